"""Hexadecimal color codes for display-encoded colors."""

import torch
from torch import Tensor


def srgb_to_hex(input: Tensor) -> str:
    """Format an sRGB color as a ``#rrggbb`` hex code.

    Parameters
    ----------
    input : Tensor, shape (3,)
        sRGB (gamma-encoded) color. Values are clamped to [0, 1] and
        quantized to 8 bits, rounding halves up.

    Returns
    -------
    str
        Lowercase hex code, e.g. ``"#ffd29e"``.

    Examples
    --------
    >>> srgb_to_hex(torch.tensor([1.0, 0.5, 0.0]))
    '#ff8000'
    """
    if input.shape != (3,):
        raise ValueError(
            f"srgb_to_hex: input must have shape (3,), got {tuple(input.shape)}"
        )

    channels = torch.floor(torch.clamp(input, 0.0, 1.0) * 255.0 + 0.5)

    return "#" + "".join(f"{int(c):02x}" for c in channels.tolist())
