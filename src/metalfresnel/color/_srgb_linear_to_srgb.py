"""Linear sRGB to sRGB color conversion."""

import torch
from torch import Tensor

# IEC 61966-2-1 transfer function constants
_LINEAR_THRESHOLD = 0.0031308
_LINEAR_SLOPE = 12.92
_GAMMA = 2.4
_SCALE = 1.055
_OFFSET = 0.055


def srgb_linear_to_srgb(input: Tensor) -> Tensor:
    r"""Convert linear sRGB to sRGB color space.

    Encodes linear reflectance values with the IEC 61966-2-1 transfer
    function so that colors can be entered in color pickers that apply the
    inverse conversion.

    Mathematical Definition
    -----------------------
    For each input value :math:`x`:

    .. math::
        f(x) = \begin{cases}
            12.92 \cdot x & \text{if } x \leq 0.0031308 \\
            1.055 \cdot x^{1/2.4} - 0.055 & \text{otherwise}
        \end{cases}

    Parameters
    ----------
    input : Tensor
        Linear sRGB values, typically in [0, 1]. Any shape.

    Returns
    -------
    Tensor
        sRGB (gamma-encoded) values with the same shape as input.

    Examples
    --------
    >>> srgb_linear_to_srgb(torch.tensor([0.0331, 0.2140, 0.6038]))
    tensor([0.2000, 0.5000, 0.8000])

    Notes
    -----
    - The function is continuous at the threshold point.
    - Differentiable; the power branch is evaluated on a clamped input so
      the gradient stays finite below the threshold.
    """
    safe = torch.clamp(input, min=_LINEAR_THRESHOLD)
    encoded = _SCALE * safe ** (1.0 / _GAMMA) - _OFFSET

    return torch.where(
        input <= _LINEAR_THRESHOLD,
        _LINEAR_SLOPE * input,
        encoded,
    )
