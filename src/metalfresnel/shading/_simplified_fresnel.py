"""Dispatch over the simplified metal reflectance models."""

from typing import Literal, Optional, Union

from torch import Tensor

from metalfresnel.shading._artist_fresnel import artist_fresnel
from metalfresnel.shading._metallic_fresnel import metallic_fresnel


def simplified_fresnel(
    base: Tensor,
    grazing: Tensor,
    cosine: Union[Tensor, float],
    *,
    model: Literal["metallic", "artist"] = "metallic",
    ior: Optional[Union[Tensor, float]] = None,
) -> Tensor:
    """Evaluate one of the simplified two-color metal models.

    Parameters
    ----------
    base : Tensor
        Reflectance color at normal incidence.
    grazing : Tensor
        Reflectance color at grazing incidence.
    cosine : Tensor or float
        Cosine between the viewing direction and the surface normal.
    model : str
        ``"metallic"`` (default) for :func:`metallic_fresnel`, which needs
        ``ior``, or ``"artist"`` for :func:`artist_fresnel`.
    ior : Tensor or float, optional
        Index of refraction of the metallic model.

    Returns
    -------
    Tensor
        Reflectance of the selected model.
    """
    model_lower = model.lower()

    if model_lower == "metallic":
        if ior is None:
            raise ValueError(
                "simplified_fresnel: the metallic model requires ior"
            )
        return metallic_fresnel(base, grazing, ior, cosine)
    elif model_lower == "artist":
        return artist_fresnel(base, grazing, cosine)
    else:
        raise ValueError(
            f"Unknown model: {model}. Use 'metallic' or 'artist'."
        )
