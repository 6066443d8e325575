"""Exhaustive one-dimensional grid search."""

from typing import Callable

import torch
from torch import Tensor

from metalfresnel._exceptions import NoCandidateFound
from metalfresnel.optimization._result import GridSearchResult


def grid_search(
    objective: Callable[[Tensor], Tensor],
    candidates: Tensor,
    *,
    chunk_size: int = 1024,
) -> GridSearchResult:
    r"""Minimize an objective by evaluating every candidate.

    Finds

    .. math::

        x^* = \operatorname*{arg\,min}_{x \in \{x_0, \ldots, x_{P-1}\}} f(x)

    with no pruning or early termination. Objective values are computed
    block by block and reduced with a single argmin, so the result does not
    depend on ``chunk_size``.

    Parameters
    ----------
    objective : Callable[[Tensor], Tensor]
        Vectorized objective. Takes candidates of shape ``(B,)`` and returns
        values of shape ``(B,)``.
    candidates : Tensor
        Candidate values of shape ``(P,)``, scanned in order.
    chunk_size : int
        Maximum number of candidates passed to ``objective`` at once.
        Default: 1024.

    Returns
    -------
    GridSearchResult
        Best candidate, its objective value, its index and the number of
        evaluated candidates.

    Raises
    ------
    NoCandidateFound
        If ``candidates`` is empty or not one-dimensional.
    ValueError
        If ``chunk_size < 1`` or ``objective`` returns the wrong shape.

    Examples
    --------
    >>> candidates = torch.linspace(-2.0, 2.0, 401, dtype=torch.float64)
    >>> result = grid_search(lambda x: (x - 0.5) ** 2, candidates)
    >>> result.x
    tensor(0.5000, dtype=torch.float64)

    Notes
    -----
    - Ties keep the first candidate, so an ascending candidate tensor
      returns the lowest minimizer.
    - NaN objective values rank after every other value.
    """
    if candidates.dim() != 1 or candidates.numel() == 0:
        raise NoCandidateFound(
            f"grid_search: candidates must be a non-empty 1-D tensor, "
            f"got shape {tuple(candidates.shape)}"
        )

    if chunk_size < 1:
        raise ValueError(
            f"grid_search: chunk_size must be positive, got {chunk_size}"
        )

    blocks = []
    for block in torch.split(candidates, chunk_size):
        block_values = objective(block)

        if block_values.shape != block.shape:
            raise ValueError(
                f"grid_search: objective must return one value per candidate, "
                f"got shape {tuple(block_values.shape)} for {block.numel()} candidates"
            )

        blocks.append(block_values)

    values = torch.cat(blocks)

    ranked = torch.where(
        torch.isnan(values),
        torch.full_like(values, float("inf")),
        values,
    )
    index = torch.argmin(ranked)

    return GridSearchResult(
        x=candidates[index],
        fun=values[index],
        index=index,
        num_evaluations=torch.tensor(
            candidates.numel(),
            dtype=torch.int64,
            device=candidates.device,
        ),
    )
