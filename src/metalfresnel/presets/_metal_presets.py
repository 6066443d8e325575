"""Optical constants of common metals.

Sampled from https://refractiveindex.info at 0.65, 0.55 and 0.45
micrometers.
"""

from metalfresnel.presets._metal_preset import MetalPreset

METAL_PRESETS = (
    MetalPreset("Silver", (0.052225, 0.059582, 0.040000), (4.4094, 3.5974, 2.6484)),
    MetalPreset("Gold", (0.15557, 0.42415, 1.3831), (3.6024, 2.4721, 1.9155)),
    MetalPreset("Copper", (0.23780, 1.0066, 1.2404), (3.6264, 2.5823, 2.3929)),
    MetalPreset("Aluminum", (1.5580, 1.0152, 0.63324), (7.7124, 6.6273, 5.4544)),
    MetalPreset("Chromium", (3.1071, 3.1812, 2.3230), (3.3314, 3.3291, 3.1350)),
    MetalPreset("Lead", (2.5750, 2.5444, 2.1038), (4.1612, 4.1823, 4.1890)),
    MetalPreset("Platinum", (0.47475, 0.46521, 0.63275), (6.3329, 5.1073, 3.7481)),
    MetalPreset("Titanium", (0.25300, 0.28822, 0.52181), (5.2796, 4.2122, 3.0367)),
    MetalPreset("Tungsten", (0.92074, 1.3437, 2.2323), (6.8595, 5.2293, 5.1461)),
    MetalPreset("Iron", (1.8247, 1.2246, 1.0205), (7.6326, 5.9377, 4.3952)),
    MetalPreset("Vanadium", (0.43109, 0.60711, 0.91187), (5.5575, 4.5217, 3.6035)),
    MetalPreset("Zinc", (1.2338, 0.92943, 0.67767), (5.8730, 4.9751, 4.0122)),
    MetalPreset("Nickel", (1.3726, 1.0753, 1.1336), (6.6273, 5.1763, 3.7544)),
    MetalPreset("Mercury", (2.0733, 1.5523, 1.0606), (5.3383, 4.6510, 3.8628)),
    MetalPreset("Cobalt", (2.2371, 2.0524, 1.7365), (4.2357, 3.8242, 3.2745)),
)


def get_metal_preset(name: str) -> MetalPreset:
    """Look up a metal preset by name, ignoring case.

    Raises
    ------
    KeyError
        If no preset has this name.
    """
    for preset in METAL_PRESETS:
        if preset.name.lower() == name.lower():
            return preset

    raise KeyError(
        f"Unknown metal preset: {name}. Available: "
        + ", ".join(preset.name for preset in METAL_PRESETS)
    )
