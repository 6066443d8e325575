import math
from typing import Optional

import torch
from torch import Tensor

from metalfresnel._exceptions import NoCandidateFound

DEFAULT_IOR_MIN = 1.001
DEFAULT_IOR_MAX = 10.0
DEFAULT_IOR_STEP = 0.001

MAX_IOR_CANDIDATES = 2**24


def ior_candidates(
    ior_min: float = DEFAULT_IOR_MIN,
    ior_max: float = DEFAULT_IOR_MAX,
    ior_step: float = DEFAULT_IOR_STEP,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Ascending IOR candidates ``ior_min + i * ior_step`` below ``ior_max``.

    Candidates are computed from their index in float64, so no rounding
    error accumulates along the range. After conversion to ``dtype``, values
    rounded outside ``[ior_min, ior_max)`` and repeated values are dropped,
    so low-precision grids are shorter than float64 ones.

    Parameters
    ----------
    ior_min : float
        First candidate (inclusive). Must be at least 1. Default: 1.001.
    ior_max : float
        End of the range (exclusive). Default: 10.0.
    ior_step : float
        Candidate spacing. Must be positive. Default: 0.001.
    dtype : torch.dtype
        Output dtype. Default: ``torch.float64``.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor, shape (P,)
        Distinct candidate IOR values, strictly increasing.

    Raises
    ------
    NoCandidateFound
        If a bound is not finite, ``ior_step <= 0``, ``ior_min < 1`` or
        ``ior_min >= ior_max``, the grid exceeds
        :data:`MAX_IOR_CANDIDATES` values, or no candidate is representable
        in ``dtype``.
    """
    for name, value in (
        ("ior_min", ior_min),
        ("ior_max", ior_max),
        ("ior_step", ior_step),
    ):
        if not math.isfinite(value):
            raise NoCandidateFound(f"{name} must be finite, got {value}")

    if ior_step <= 0:
        raise NoCandidateFound(f"ior_step must be positive, got {ior_step}")

    if ior_min < 1.0:
        raise NoCandidateFound(f"ior_min must be at least 1, got {ior_min}")

    if ior_min >= ior_max:
        raise NoCandidateFound(
            f"ior_min must be less than ior_max, got [{ior_min}, {ior_max})"
        )

    count = math.ceil((ior_max - ior_min) / ior_step)
    if count > MAX_IOR_CANDIDATES:
        raise NoCandidateFound(
            f"ior_step {ior_step} gives {count} candidates, more than "
            f"{MAX_IOR_CANDIDATES}"
        )

    index = torch.arange(count, dtype=torch.float64, device=device)
    candidates = ior_min + ior_step * index

    # Drop a last candidate that lands on ior_max through rounding of count
    candidates = candidates[candidates < ior_max - 1e-6 * ior_step]

    rounded = candidates.to(dtype)
    value = rounded.to(torch.float64)

    # Rounding is monotone, so repeats are adjacent
    distinct = torch.ones_like(value, dtype=torch.bool)
    distinct[1:] = value[1:] != value[:-1]

    rounded = rounded[distinct & (value >= ior_min) & (value < ior_max)]

    if rounded.numel() == 0:
        raise NoCandidateFound(
            f"no candidate in [{ior_min}, {ior_max}) is representable in {dtype}"
        )

    return rounded
