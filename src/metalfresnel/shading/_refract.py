"""Vector refraction using Snell's law."""

from typing import Tuple, Union

import torch
from torch import Tensor


def refract(
    direction: Tensor,
    normal: Tensor,
    eta: Union[Tensor, float],
) -> Tuple[Tensor, Tensor]:
    r"""Refract a direction vector through a surface using Snell's law.

    Mathematical Definition
    -----------------------
    Given direction :math:`D`, normal :math:`N`, and refractive index ratio
    :math:`\eta = n_1 / n_2`:

    .. math::
        T = \eta D + (\eta \cos\theta_i - \cos\theta_t) N

    where :math:`\cos\theta_i = -D \cdot N` and
    :math:`\cos\theta_t = \sqrt{\max(0, 1 - \eta^2 (1 - \cos^2\theta_i))}`.

    Parameters
    ----------
    direction : Tensor, shape (..., 3)
        Unit incident directions pointing toward the surface.
    normal : Tensor, shape (..., 3)
        Unit surface normals pointing into the medium the ray comes from.
    eta : Tensor or float
        Ratio of refractive indices :math:`n_1 / n_2`. Broadcasts with the
        batch dimensions of ``direction`` and ``normal``.

    Returns
    -------
    refracted : Tensor, shape (..., 3)
        Refracted directions.
    total_internal_reflection : Tensor, shape (...)
        ``True`` where :math:`\eta^2 \sin^2\theta_i > 1`. The direction is
        still produced there, with :math:`\cos\theta_t` clamped to 0, so that
        Fresnel terms evaluated from it stay defined.

    Examples
    --------
    Air to glass at normal incidence:

    >>> direction = torch.tensor([0.0, 0.0, -1.0])
    >>> normal = torch.tensor([0.0, 0.0, 1.0])
    >>> refract(direction, normal, 1.0 / 1.5)
    (tensor([0., 0., -1.]), tensor(False))
    """
    if direction.shape[-1] != 3:
        raise ValueError(
            f"refract: direction must have last dimension 3, got {direction.shape[-1]}"
        )

    if normal.shape[-1] != 3:
        raise ValueError(
            f"refract: normal must have last dimension 3, got {normal.shape[-1]}"
        )

    if not isinstance(eta, Tensor):
        eta = torch.as_tensor(eta, dtype=direction.dtype, device=direction.device)

    cos_incident = -(direction * normal).sum(dim=-1)

    k = 1.0 - eta * eta * (1.0 - cos_incident * cos_incident)
    total_internal_reflection = k < 0
    cos_transmitted = torch.sqrt(torch.clamp(k, min=0.0))

    refracted = (
        eta.unsqueeze(-1) * direction
        + (eta * cos_incident - cos_transmitted).unsqueeze(-1) * normal
    )

    return refracted, total_internal_reflection
