"""Fresnel coefficient of a dielectric interface from refraction geometry."""

from typing import Union

import torch
from torch import Tensor


def _squared_ratio(numerator: Tensor, denominator: Tensor) -> Tensor:
    # 0/0 happens only at grazing incidence under total internal reflection,
    # where the interface reflects everything.
    degenerate = denominator == 0
    safe_denominator = torch.where(
        degenerate, torch.ones_like(denominator), denominator
    )
    ratio = torch.where(
        degenerate,
        torch.ones_like(denominator),
        numerator / safe_denominator,
    )
    return ratio * ratio


def dielectric_fresnel(
    cos_incident: Tensor,
    cos_transmitted: Tensor,
    ior: Union[Tensor, float],
) -> Tensor:
    r"""Compute the unpolarized Fresnel coefficient of a dielectric interface.

    Mathematical Definition
    -----------------------
    With :math:`c_i = \cos\theta_i`, :math:`c_t = \cos\theta_t` and
    :math:`\eta` the index of refraction of the entered medium:

    .. math::
        F = \frac{1}{2}\left[
            \left(\frac{c_i - \eta c_t}{c_i + \eta c_t}\right)^2
            + \left(\frac{\eta c_i - c_t}{\eta c_i + c_t}\right)^2
        \right]

    clamped to [0, 1].

    Parameters
    ----------
    cos_incident : Tensor
        Cosine of the incident angle.
    cos_transmitted : Tensor
        Cosine of the transmitted angle, as produced by :func:`refract`.
    ior : Tensor or float
        Index of refraction of the medium being entered.

    Returns
    -------
    Tensor
        Fresnel coefficient in [0, 1] with the broadcast shape of the inputs.
    """
    if not isinstance(ior, Tensor):
        ior = torch.as_tensor(
            ior, dtype=cos_incident.dtype, device=cos_incident.device
        )

    rs = _squared_ratio(
        cos_incident - ior * cos_transmitted,
        cos_incident + ior * cos_transmitted,
    )
    rp = _squared_ratio(
        ior * cos_incident - cos_transmitted,
        ior * cos_incident + cos_transmitted,
    )

    return torch.clamp(0.5 * (rs + rp), 0.0, 1.0)
