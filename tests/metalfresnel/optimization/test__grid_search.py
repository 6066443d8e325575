"""Tests for exhaustive grid search."""

import pytest
import torch

from metalfresnel import NoCandidateFound
from metalfresnel.optimization import GridSearchResult, grid_search


class TestGridSearchBasic:
    def test_quadratic(self):
        """Finds the grid point closest to the minimum of a parabola."""
        candidates = torch.linspace(-2.0, 2.0, 401, dtype=torch.float64)
        result = grid_search(lambda x: (x - 0.5) ** 2, candidates)
        assert isinstance(result, GridSearchResult)
        torch.testing.assert_close(
            result.x, torch.tensor(0.5, dtype=torch.float64)
        )
        assert result.index.item() == 250
        assert result.num_evaluations.item() == 401

    def test_fun_is_objective_at_x(self):
        candidates = torch.linspace(0.0, 3.0, 31, dtype=torch.float64)
        result = grid_search(torch.cos, candidates)
        torch.testing.assert_close(result.fun, torch.cos(result.x))

    def test_exhaustive(self):
        """Every candidate is passed to the objective exactly once."""
        seen = []

        def objective(x):
            seen.append(x.clone())
            return x * 0.0

        candidates = torch.arange(10, dtype=torch.float64)
        grid_search(objective, candidates, chunk_size=3)
        torch.testing.assert_close(torch.cat(seen), candidates)


class TestGridSearchTies:
    def test_first_minimum_wins(self):
        """Equal minima keep the lowest index."""
        values = torch.tensor([3.0, 2.0, 1.0, 4.0, 5.0, 1.0, 6.0])
        candidates = torch.arange(7, dtype=torch.float32)
        result = grid_search(lambda x: values[x.long()], candidates)
        assert result.index.item() == 2

    def test_constant_objective(self):
        """A flat objective returns the first candidate."""
        candidates = torch.linspace(1.0, 2.0, 11, dtype=torch.float64)
        result = grid_search(torch.zeros_like, candidates)
        assert result.index.item() == 0


class TestGridSearchChunking:
    @pytest.mark.parametrize("chunk_size", [1, 7, 64, 1000])
    def test_independent_of_chunk_size(self, chunk_size):
        candidates = torch.linspace(0.0, 6.0, 601, dtype=torch.float64)
        result = grid_search(
            lambda x: torch.sin(3.0 * x) + 0.1 * x,
            candidates,
            chunk_size=chunk_size,
        )
        reference = grid_search(
            lambda x: torch.sin(3.0 * x) + 0.1 * x,
            candidates,
            chunk_size=len(candidates),
        )
        assert result.index.item() == reference.index.item()


class TestGridSearchNaN:
    def test_nan_never_wins(self):
        """NaN objective values rank after finite ones."""
        values = torch.tensor([float("nan"), 2.0, 1.0, float("nan")])
        candidates = torch.arange(4, dtype=torch.float32)
        result = grid_search(lambda x: values[x.long()], candidates)
        assert result.index.item() == 2

    def test_all_nan(self):
        """All-NaN objectives return the first candidate."""
        candidates = torch.arange(3, dtype=torch.float64)
        result = grid_search(lambda x: x * float("nan"), candidates)
        assert result.index.item() == 0
        assert torch.isnan(result.fun)


class TestGridSearchErrors:
    def test_empty_candidates(self):
        with pytest.raises(NoCandidateFound):
            grid_search(lambda x: x, torch.empty(0))

    def test_two_dimensional_candidates(self):
        with pytest.raises(NoCandidateFound):
            grid_search(lambda x: x, torch.zeros(2, 2))

    def test_invalid_chunk_size(self):
        with pytest.raises(ValueError, match="chunk_size"):
            grid_search(lambda x: x, torch.zeros(3), chunk_size=0)

    def test_wrong_objective_shape(self):
        with pytest.raises(ValueError, match="one value per candidate"):
            grid_search(lambda x: x.sum(), torch.zeros(3))

    def test_scalar_objective_with_chunks(self):
        """A reduced objective is rejected for every block size."""
        for chunk_size in (1, 2, 1024):
            with pytest.raises(ValueError, match="one value per candidate"):
                grid_search(
                    lambda x: x.sum(), torch.zeros(5), chunk_size=chunk_size
                )

    def test_short_block(self):
        with pytest.raises(ValueError, match="one value per candidate"):
            grid_search(lambda x: x[:-1], torch.zeros(5), chunk_size=2)
