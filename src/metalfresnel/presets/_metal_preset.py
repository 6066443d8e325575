from typing import NamedTuple, Optional, Tuple

import torch
from torch import Tensor


class MetalPreset(NamedTuple):
    """Measured optical constants of a metal.

    Parameters
    ----------
    name : str
        Display name of the metal.
    n : tuple of float
        Real part of the refractive index at 0.65, 0.55 and 0.45
        micrometers (red, green, blue).
    k : tuple of float
        Extinction coefficient at the same wavelengths.
    """

    name: str
    n: Tuple[float, float, float]
    k: Tuple[float, float, float]

    def to_tensors(
        self,
        *,
        dtype: torch.dtype = torch.float64,
        device: Optional[torch.device] = None,
    ) -> Tuple[Tensor, Tensor]:
        """Return ``(n, k)`` as tensors of shape (3,)."""
        return (
            torch.tensor(self.n, dtype=dtype, device=device),
            torch.tensor(self.k, dtype=dtype, device=device),
        )
