import hypothesis.strategies
import torch


@hypothesis.strategies.composite
def optical_constants(
    draw: hypothesis.strategies.DrawFn,
    min_value: float = 0.0,
    max_value: float = 10.0,
    dtype: torch.dtype = torch.float64,
) -> torch.Tensor:
    """Strategy for non-negative RGB triples of ``n`` or ``k`` values."""
    values = draw(
        hypothesis.strategies.lists(
            hypothesis.strategies.floats(
                min_value=min_value,
                max_value=max_value,
                allow_nan=False,
                allow_infinity=False,
            ),
            min_size=3,
            max_size=3,
        )
    )
    return torch.tensor(values, dtype=dtype)
