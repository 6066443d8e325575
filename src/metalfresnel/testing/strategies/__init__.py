"""Hypothesis strategies for reflectance operator testing."""

from ._cosines import cosines
from ._optical_constants import optical_constants
from ._reflectance_colors import reflectance_colors

__all__ = [
    "cosines",
    "optical_constants",
    "reflectance_colors",
]
