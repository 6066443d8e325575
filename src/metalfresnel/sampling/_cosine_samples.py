from typing import Optional

import torch
from torch import Tensor


def cosine_samples(
    num_angles: int,
    *,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Equally spaced viewing-angle cosines in the open interval (0, 1).

    Parameters
    ----------
    num_angles : int
        Number of subdivisions of [0, 1]. Must be at least 2.
    dtype : torch.dtype
        Output dtype. Default: ``torch.float64``.
    device : torch.device, optional
        Output device.

    Returns
    -------
    Tensor, shape (num_angles - 1,)
        ``i / num_angles`` for ``i = 1, ..., num_angles - 1``, ascending.

    Examples
    --------
    >>> cosine_samples(4)
    tensor([0.2500, 0.5000, 0.7500], dtype=torch.float64)
    """
    if num_angles < 2:
        raise ValueError(
            f"cosine_samples: num_angles must be at least 2, got {num_angles}"
        )

    index = torch.arange(1, num_angles, dtype=dtype, device=device)

    return index / num_angles
