"""Lazy paired sampling of two reflectance curves."""

from typing import Callable, Iterator, Optional, Tuple

import torch
from torch import Tensor

from metalfresnel.sampling._cosine_samples import cosine_samples


class CurveSamples:
    """Finite, restartable sequence of ``(cosine, value_a, value_b)`` triples.

    Evaluators are called lazily, one cosine at a time, each time the
    sequence is iterated.

    Parameters
    ----------
    evaluate_a, evaluate_b : Callable[[Tensor], Tensor]
        Reflectance evaluators taking a scalar cosine tensor.
    num_angles : int
        Number of subdivisions of [0, 1]; ``num_angles - 1`` samples are
        produced.
    dtype : torch.dtype
        Dtype of the cosine samples.
    device : torch.device, optional
        Device of the cosine samples.
    """

    def __init__(
        self,
        evaluate_a: Callable[[Tensor], Tensor],
        evaluate_b: Callable[[Tensor], Tensor],
        num_angles: int,
        *,
        dtype: torch.dtype = torch.float64,
        device: Optional[torch.device] = None,
    ):
        self.evaluate_a = evaluate_a
        self.evaluate_b = evaluate_b
        self.cosine = cosine_samples(num_angles, dtype=dtype, device=device)

    def __len__(self) -> int:
        return self.cosine.shape[0]

    def __iter__(self) -> Iterator[Tuple[Tensor, Tensor, Tensor]]:
        for cosine in self.cosine:
            yield cosine, self.evaluate_a(cosine), self.evaluate_b(cosine)


def sample_curves(
    evaluate_a: Callable[[Tensor], Tensor],
    evaluate_b: Callable[[Tensor], Tensor],
    num_angles: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> CurveSamples:
    """Sample two reflectance curves at the same viewing angles.

    Parameters
    ----------
    evaluate_a, evaluate_b : Callable[[Tensor], Tensor]
        Reflectance evaluators. Each receives a scalar cosine tensor.
    num_angles : int
        Sampling density: the cosines are ``i / num_angles`` for
        ``i = 1, ..., num_angles - 1``.
    dtype : torch.dtype
        Dtype of the cosine samples. Default: ``torch.float64``.
    device : torch.device, optional
        Device of the cosine samples.

    Returns
    -------
    CurveSamples
        Iterable of ``(cosine, value_a, value_b)`` that can be iterated any
        number of times.

    Examples
    --------
    >>> n = torch.tensor([0.15557, 0.42415, 1.3831], dtype=torch.float64)
    >>> k = torch.tensor([3.6024, 2.4721, 1.9155], dtype=torch.float64)
    >>> base = complex_fresnel(n, k, 1.0)
    >>> samples = sample_curves(
    ...     lambda c: complex_fresnel(n, k, c),
    ...     lambda c: artist_fresnel(base, torch.ones(3, dtype=torch.float64), c),
    ...     200,
    ... )
    >>> len(samples)
    199
    >>> sum(((a - b) ** 2).sum() for _, a, b in samples)
    tensor(..., dtype=torch.float64)
    """
    return CurveSamples(
        evaluate_a,
        evaluate_b,
        num_angles,
        dtype=dtype,
        device=device,
    )
