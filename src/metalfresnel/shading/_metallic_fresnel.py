"""Two-color metallic Fresnel model with a scalar index of refraction."""

from typing import Union

import torch
from torch import Tensor

from metalfresnel.shading._dielectric_fresnel import dielectric_fresnel
from metalfresnel.shading._refract import refract


def metallic_fresnel(
    base: Tensor,
    grazing: Tensor,
    ior: Union[Tensor, float],
    cosine: Union[Tensor, float],
) -> Tensor:
    r"""Compute metallic reflectance by blending two colors with a Fresnel weight.

    This is the simplified, artist-facing metal model: the reflectance is a
    linear blend between the color at normal incidence (``base``) and the
    color at grazing incidence (``grazing``), weighted by the Fresnel
    coefficient of a dielectric with index of refraction ``ior``.

    Mathematical Definition
    -----------------------
    The unit viewing direction and surface normal are

    .. math::
        V = (\sqrt{1 - c^2}, 0, -c), \qquad N = (0, 0, 1)

    :math:`V` is refracted with :math:`\eta = 1 / \mathrm{ior}` to give
    :math:`T` (see :func:`refract`) and

    .. math::
        f = F_{\text{dielectric}}(c, -T \cdot N, \mathrm{ior}),
        \qquad
        R = \mathrm{base}\,(1 - f) + \mathrm{grazing}\,f

    Parameters
    ----------
    base : Tensor
        Reflectance color at normal incidence.
    grazing : Tensor
        Reflectance color at grazing incidence.
    ior : Tensor or float
        Scalar index of refraction of the model. Values below 1 can produce
        total internal reflection; the Fresnel weight is then 1.
    cosine : Tensor or float
        Cosine between the viewing direction and the surface normal in
        [0, 1].

    Returns
    -------
    Tensor
        Reflectance with the broadcast shape of ``base``, ``grazing`` and the
        Fresnel weight. Not clamped.

    Examples
    --------
    >>> base = torch.tensor([0.9565, 0.7916, 0.4082])
    >>> grazing = torch.ones(3)
    >>> metallic_fresnel(base, grazing, 1.5, 0.0)
    tensor([1., 1., 1.])

    Fitting grid of ``P`` IOR values by ``S`` angles:

    >>> ior = torch.linspace(1.0, 3.0, 8)
    >>> cosine = torch.linspace(0.0, 1.0, 16)
    >>> metallic_fresnel(base, grazing, ior[:, None, None], cosine[:, None]).shape
    torch.Size([8, 16, 3])

    Notes
    -----
    - At grazing incidence (``cosine = 0``) the weight is 1 and the result is
      ``grazing``.
    - At normal incidence the weight is :math:`((\mathrm{ior} - 1) /
      (\mathrm{ior} + 1))^2`, so the result is close to but not exactly
      ``base``.
    """
    if not isinstance(cosine, Tensor):
        cosine = torch.as_tensor(cosine, dtype=base.dtype, device=base.device)

    if not isinstance(ior, Tensor):
        ior = torch.as_tensor(ior, dtype=base.dtype, device=base.device)

    sine = torch.sqrt(torch.clamp(1.0 - cosine * cosine, min=0.0))
    direction = torch.stack([sine, torch.zeros_like(cosine), -cosine], dim=-1)
    normal = torch.tensor([0.0, 0.0, 1.0], dtype=cosine.dtype, device=cosine.device)

    refracted, _ = refract(direction, normal, 1.0 / ior)
    cos_transmitted = -(refracted * normal).sum(dim=-1)

    f = dielectric_fresnel(cosine, cos_transmitted, ior)

    return base * (1.0 - f) + grazing * f
