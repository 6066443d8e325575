"""Artist-friendly metallic Fresnel driven only by reflectivity and edge tint.

The model maps a base reflectivity ``r`` and an edge tint ``g`` to a
plausible complex index of refraction and evaluates the conductor Fresnel
equations with it. See O. Gulbrandsen, "Artist Friendly Metallic Fresnel",
Journal of Computer Graphics Techniques 3(4), 2014.
"""

from typing import Tuple, Union

import torch
from torch import Tensor

from metalfresnel._exceptions import DomainInputInvalid
from metalfresnel._validation import _get_default_tol
from metalfresnel.shading._complex_fresnel import _unpolarized_reflectance

# Base reflectivity is clamped below 1 so that 1 - r and 1 - sqrt(r) stay
# away from zero.
_MAX_REFLECTIVITY = 0.99


def _n_min(r: Tensor) -> Tensor:
    return (1.0 - r) / (1.0 + r)


def _n_max(r: Tensor) -> Tensor:
    sqrt_r = torch.sqrt(r)
    return (1.0 + sqrt_r) / (1.0 - sqrt_r)


def artist_index_of_refraction(
    base: Tensor,
    grazing: Union[Tensor, float],
) -> Tuple[Tensor, Tensor]:
    r"""Derive the complex index of refraction implied by artist parameters.

    Mathematical Definition
    -----------------------
    With :math:`r = \operatorname{clamp}(\mathrm{base}, 0, 0.99)` and
    :math:`g = \mathrm{grazing}`:

    .. math::
        n_{\min}(r) = \frac{1 - r}{1 + r}, \qquad
        n_{\max}(r) = \frac{1 + \sqrt{r}}{1 - \sqrt{r}}

    .. math::
        n = g\,n_{\min}(r) + (1 - g)\,n_{\max}(r), \qquad
        k^2 = \frac{(n + 1)^2 r - (n - 1)^2}{1 - r}

    Parameters
    ----------
    base : Tensor
        Reflectivity at normal incidence.
    grazing : Tensor or float
        Edge tint. Values in [0, 1] always give a non-negative :math:`k^2`.

    Returns
    -------
    n : Tensor
        Real part of the derived refractive index.
    k2 : Tensor
        Squared extinction coefficient. Negative values within the dtype's
        rounding tolerance are replaced by 0.

    Raises
    ------
    DomainInputInvalid
        If ``base`` or ``grazing`` is not finite, or if the derived
        :math:`k^2` is negative beyond rounding noise (typically an edge
        tint outside [0, 1]).
    """
    if not isinstance(grazing, Tensor):
        grazing = torch.as_tensor(grazing, dtype=base.dtype, device=base.device)

    if not (torch.isfinite(base).all() and torch.isfinite(grazing).all()):
        raise DomainInputInvalid(
            f"artist parameters must be finite, got base={base}, grazing={grazing}"
        )

    r = torch.clamp(base, 0.0, _MAX_REFLECTIVITY)
    g = grazing

    n = g * _n_min(r) + (1.0 - g) * _n_max(r)

    positive = (n + 1.0) ** 2 * r
    negative = (n - 1.0) ** 2
    k2 = (positive - negative) / (1.0 - r)

    tol = _get_default_tol(k2.dtype)
    scale = (positive + negative) / (1.0 - r)
    if (k2 < -tol * (1.0 + scale)).any():
        raise DomainInputInvalid(
            f"artist parameters derive a negative k^2 ({k2}) for "
            f"base={base}, grazing={grazing}; the edge tint must lie in [0, 1]"
        )

    return n, torch.clamp(k2, min=0.0)


def artist_parameters(n: Tensor, k: Tensor) -> Tuple[Tensor, Tensor]:
    r"""Map a complex index of refraction to reflectivity and edge tint.

    Inverse of :func:`artist_index_of_refraction`:

    .. math::
        r = \frac{(n - 1)^2 + k^2}{(n + 1)^2 + k^2}, \qquad
        g = \frac{n_{\max}(r) - n}{n_{\max}(r) - n_{\min}(r)}

    Returns
    -------
    r : Tensor
        Reflectivity at normal incidence.
    g : Tensor
        Edge tint.
    """
    k2 = k * k
    r = ((n - 1.0) ** 2 + k2) / ((n + 1.0) ** 2 + k2)

    n_max = _n_max(r)
    g = (n_max - n) / (n_max - _n_min(r))

    return r, g


def artist_fresnel(
    base: Tensor,
    grazing: Union[Tensor, float],
    cosine: Union[Tensor, float],
) -> Tensor:
    r"""Compute artist-friendly metallic Fresnel reflectance.

    Derives :math:`(n, k^2)` from ``base`` and ``grazing`` with
    :func:`artist_index_of_refraction` and evaluates the same s- and
    p-polarized terms as :func:`complex_fresnel`, without clamping the
    result.

    Parameters
    ----------
    base : Tensor
        Reflectivity at normal incidence. Clamped to [0, 0.99] internally.
    grazing : Tensor or float
        Edge tint, usually the reflectance color at grazing incidence.
    cosine : Tensor or float
        Cosine between the viewing direction and the surface normal.
        Broadcasts with ``base``; pass ``cosine[..., None]`` for RGB curves.

    Returns
    -------
    Tensor
        Reflectance with the broadcast shape of the inputs.

    Raises
    ------
    DomainInputInvalid
        See :func:`artist_index_of_refraction`.

    Examples
    --------
    >>> base = torch.tensor([0.9565, 0.7916, 0.4082])
    >>> artist_fresnel(base, torch.ones(3), 1.0)
    tensor([0.9565, 0.7916, 0.4082])

    Notes
    -----
    - At normal incidence the result reproduces ``base`` (for
      ``base <= 0.99``).
    - At grazing incidence the result is 1.
    """
    if not isinstance(cosine, Tensor):
        cosine = torch.as_tensor(cosine, dtype=base.dtype, device=base.device)

    n, k2 = artist_index_of_refraction(base, grazing)

    return _unpolarized_reflectance(n, k2, cosine)
