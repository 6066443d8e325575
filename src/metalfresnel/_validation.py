"""Input validation shared by the reflectance and fitting operators."""

from typing import Optional, Sequence, Union

import torch
from torch import Tensor

from metalfresnel._exceptions import DomainInputInvalid


def _get_default_tol(dtype: torch.dtype) -> float:
    """Get dtype-aware rounding tolerance.

    Tolerances are chosen based on the number of significant digits
    available in each dtype:
    - bfloat16: ~3 digits (8-bit mantissa)
    - float16: ~3-4 digits (10-bit mantissa)
    - float32: ~7 digits (23-bit mantissa)
    - float64: ~16 digits (52-bit mantissa)
    """
    if dtype in (torch.bfloat16, torch.float16):
        return 1e-3
    elif dtype == torch.float32:
        return 1e-5
    else:  # float64
        return 1e-12


def _as_color(
    value: Union[Tensor, Sequence[float]],
    name: str,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Convert ``value`` to a tensor of shape ``(..., 3)`` with finite entries."""
    if not isinstance(value, Tensor):
        value = torch.as_tensor(
            value,
            dtype=dtype if dtype is not None else torch.float64,
            device=device,
        )

    if value.is_complex():
        raise DomainInputInvalid(
            f"{name} must be real, got dtype {value.dtype}; pass the real and "
            f"imaginary parts as n and k"
        )

    if dtype is not None or device is not None:
        value = value.to(dtype=dtype, device=device)

    # Integer and boolean tensors are promoted like Python sequences
    if not value.is_floating_point():
        value = value.to(torch.float64)

    if value.dim() == 0 or value.shape[-1] != 3:
        raise DomainInputInvalid(
            f"{name} must have last dimension 3, got shape {tuple(value.shape)}"
        )

    if not torch.isfinite(value).all():
        raise DomainInputInvalid(f"{name} must be finite, got {value}")

    return value


def _check_optical_constants(n: Tensor, k: Tensor) -> None:
    """Raise if ``n`` or ``k`` contains negative entries."""
    if (n < 0).any():
        raise DomainInputInvalid(f"n must be non-negative, got {n}")

    if (k < 0).any():
        raise DomainInputInvalid(f"k must be non-negative, got {k}")
