"""Fresnel reflectance of a conductor with complex index of refraction."""

from typing import Union

import torch
from torch import Tensor


def _unpolarized_reflectance(n: Tensor, k2: Tensor, cosine: Tensor) -> Tensor:
    """Average of s- and p-polarized reflectance for ``n + ik`` given ``k^2``.

    Not clamped. The s-polarized term is 0/0 only for ``n = k = cosine = 0``
    and takes its limit value 1 there.
    """
    n2k2 = n * n + k2
    c2 = cosine * cosine
    two_nc = 2.0 * n * cosine

    rs_num = n2k2 - two_nc + c2
    rs_den = n2k2 + two_nc + c2

    # Double where keeps the gradient finite at the 0/0 point
    degenerate = rs_den == 0
    safe_rs_den = torch.where(degenerate, torch.ones_like(rs_den), rs_den)
    rs = torch.where(
        degenerate,
        torch.ones_like(rs_den),
        rs_num / safe_rs_den,
    )

    rp_num = n2k2 * c2 - two_nc + 1.0
    rp_den = n2k2 * c2 + two_nc + 1.0
    rp = rp_num / rp_den

    return 0.5 * (rs + rp)


def complex_fresnel(
    n: Tensor,
    k: Tensor,
    cosine: Union[Tensor, float],
) -> Tensor:
    r"""Compute unpolarized Fresnel reflectance for a complex refractive index.

    Evaluates the closed-form reflectance of a conductor with complex index
    of refraction :math:`n + ik`, independently per element. This is the
    physically based reference curve that the simplified shading models are
    fitted against.

    Mathematical Definition
    -----------------------
    With :math:`c = \cos\theta`:

    .. math::
        r_s = \frac{n^2 + k^2 - 2nc + c^2}{n^2 + k^2 + 2nc + c^2}

    .. math::
        r_p = \frac{(n^2 + k^2)c^2 - 2nc + 1}{(n^2 + k^2)c^2 + 2nc + 1}

    .. math::
        R = \operatorname{clamp}\left(\tfrac{1}{2}(r_s + r_p), 0, 1\right)

    Parameters
    ----------
    n : Tensor
        Real part of the refractive index. Non-negative.
    k : Tensor
        Imaginary part (extinction coefficient). Non-negative.
    cosine : Tensor or float
        Cosine of the angle between the viewing direction and the surface
        normal, in [0, 1]. Broadcasts with ``n`` and ``k``; pass
        ``cosine[..., None]`` to evaluate RGB triples at a batch of angles.

    Returns
    -------
    Tensor
        Reflectance in [0, 1] with the broadcast shape of the inputs.

    Examples
    --------
    Gold at normal incidence and at grazing angle:

    >>> n = torch.tensor([0.15557, 0.42415, 1.3831])
    >>> k = torch.tensor([3.6024, 2.4721, 1.9155])
    >>> complex_fresnel(n, k, 1.0)
    tensor([0.9565, 0.7916, 0.4082])
    >>> complex_fresnel(n, k, 0.0)
    tensor([1., 1., 1.])

    A reflectance curve for each channel:

    >>> cosine = torch.linspace(0.0, 1.0, 5)
    >>> complex_fresnel(n, k, cosine[..., None]).shape
    torch.Size([5, 3])

    Notes
    -----
    - At normal incidence the result is
      :math:`((n - 1)^2 + k^2) / ((n + 1)^2 + k^2)`.
    - At grazing incidence the result is 1 for any ``n`` and ``k``.
    - ``n = k = 0`` evaluates to 1 at every angle (the 0/0 form of
      :math:`r_s` is replaced by its limit).
    - Differentiable with respect to all inputs.
    """
    if not isinstance(cosine, Tensor):
        cosine = torch.as_tensor(cosine, dtype=n.dtype, device=n.device)

    reflectance = _unpolarized_reflectance(n, k * k, cosine)

    return torch.clamp(reflectance, 0.0, 1.0)
