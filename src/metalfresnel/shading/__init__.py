from ._artist_fresnel import (
    artist_fresnel,
    artist_index_of_refraction,
    artist_parameters,
)
from ._complex_fresnel import complex_fresnel
from ._dielectric_fresnel import dielectric_fresnel
from ._metallic_fresnel import metallic_fresnel
from ._refract import refract
from ._simplified_fresnel import simplified_fresnel

__all__ = [
    "artist_fresnel",
    "artist_index_of_refraction",
    "artist_parameters",
    "complex_fresnel",
    "dielectric_fresnel",
    "metallic_fresnel",
    "refract",
    "simplified_fresnel",
]
