from typing import Sequence, Tuple, Union

import torch
from torch import Tensor

from metalfresnel._exceptions import DomainInputInvalid, NoCandidateFound
from metalfresnel._validation import _as_color, _check_optical_constants
from metalfresnel.sampling import cosine_samples
from metalfresnel.shading import complex_fresnel, metallic_fresnel

DEFAULT_ANGLE_SAMPLES = 200


def _residual(
    base: Tensor,
    grazing: Tensor,
    cosine: Tensor,
    reference: Tensor,
    ior: Tensor,
) -> Tensor:
    # ior (...,) against cosine (S, 1) and colors (3,) gives (..., S, 3)
    approximation = metallic_fresnel(
        base, grazing, ior[..., None, None], cosine
    )
    difference = approximation - reference

    return (difference * difference).sum(dim=(-2, -1))


def _optical_constants(
    n: Union[Tensor, Sequence[float]],
    k: Union[Tensor, Sequence[float]],
) -> Tuple[Tensor, Tensor]:
    n = _as_color(n, "n")
    k = _as_color(k, "k", dtype=n.dtype, device=n.device)

    if n.shape != (3,) or k.shape != (3,):
        raise DomainInputInvalid(
            f"n and k must be single RGB triples of shape (3,), "
            f"got {tuple(n.shape)} and {tuple(k.shape)}"
        )

    _check_optical_constants(n, k)

    return n, k


def fit_residual(
    n: Union[Tensor, Sequence[float]],
    k: Union[Tensor, Sequence[float]],
    ior: Union[Tensor, float],
    *,
    angle_samples: int = DEFAULT_ANGLE_SAMPLES,
) -> Tensor:
    r"""Squared distance between the metallic and complex Fresnel curves.

    Mathematical Definition
    -----------------------
    With :math:`b = R(n, k, 1)`, :math:`g = R(n, k, 0)` and
    :math:`c_j = j / S`:

    .. math::

        E(\mathrm{ior}) = \sum_{j=1}^{S-1} \left\|
            M(b, g, \mathrm{ior}, c_j) - R(n, k, c_j)
        \right\|_2^2

    where :math:`R` is :func:`complex_fresnel` and :math:`M` is
    :func:`metallic_fresnel`. The sum is not averaged.

    Parameters
    ----------
    n, k : Tensor or sequence of float, shape (3,)
        Complex index of refraction per channel. Sequences are converted to
        float64.
    ior : Tensor or float
        Index of refraction of the metallic model. Any shape.
    angle_samples : int
        Number of subdivisions :math:`S` of the cosine range. Default: 200.

    Returns
    -------
    Tensor
        Residual with the shape of ``ior``.

    Raises
    ------
    DomainInputInvalid
        If ``n`` or ``k`` is not a finite, non-negative triple.
    NoCandidateFound
        If ``angle_samples < 2``.
    """
    n, k = _optical_constants(n, k)

    if angle_samples < 2:
        raise NoCandidateFound(
            f"angle_samples must be at least 2, got {angle_samples}"
        )

    if not isinstance(ior, Tensor):
        ior = torch.as_tensor(ior, dtype=n.dtype, device=n.device)

    grazing = complex_fresnel(n, k, 0.0)
    base = complex_fresnel(n, k, 1.0)

    cosine = cosine_samples(
        angle_samples, dtype=n.dtype, device=n.device
    ).unsqueeze(-1)
    reference = complex_fresnel(n, k, cosine)

    return _residual(base, grazing, cosine, reference, ior)
