from ._metal_preset import MetalPreset
from ._metal_presets import METAL_PRESETS, get_metal_preset

__all__ = [
    "METAL_PRESETS",
    "MetalPreset",
    "get_metal_preset",
]
