import torch
from torch import Tensor


def rms_error(input: Tensor, target: Tensor) -> Tensor:
    r"""Root mean squared color distance between two sampled curves.

    .. math::

        \sqrt{\frac{1}{S} \sum_{j=1}^{S} \left\| a_j - b_j \right\|_2^2}

    Parameters
    ----------
    input, target : Tensor, shape (..., S, 3)
        Curves sampled at the same ``S`` angles.

    Returns
    -------
    Tensor, shape (...)
        RMS error per curve pair.
    """
    if input.shape != target.shape:
        raise ValueError(
            f"rms_error: shapes must match, got {tuple(input.shape)} and "
            f"{tuple(target.shape)}"
        )

    if input.dim() < 2 or input.shape[-1] != 3:
        raise ValueError(
            f"rms_error: curves must have shape (..., S, 3), got {tuple(input.shape)}"
        )

    difference = input - target
    squared_distance = (difference * difference).sum(dim=-1)

    return torch.sqrt(squared_distance.mean(dim=-1))
