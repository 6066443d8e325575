"""Display encoding of linear reflectance colors."""

from metalfresnel.color._srgb_linear_to_srgb import srgb_linear_to_srgb
from metalfresnel.color._srgb_to_hex import srgb_to_hex

__all__ = [
    "srgb_linear_to_srgb",
    "srgb_to_hex",
]
