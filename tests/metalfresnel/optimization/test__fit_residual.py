"""Tests for fit_residual."""

import pytest
import torch

from metalfresnel import DomainInputInvalid, NoCandidateFound
from metalfresnel.optimization import fit_residual
from metalfresnel.sampling import sample_curves
from metalfresnel.shading import complex_fresnel, metallic_fresnel

GOLD_N = torch.tensor([0.15557, 0.42415, 1.3831], dtype=torch.float64)
GOLD_K = torch.tensor([3.6024, 2.4721, 1.9155], dtype=torch.float64)


def _brute_force_residual(n, k, ior, angle_samples):
    base = complex_fresnel(n, k, 1.0)
    grazing = complex_fresnel(n, k, 0.0)
    total = 0.0
    for _, approximation, exact in sample_curves(
        lambda c: metallic_fresnel(base, grazing, ior, c),
        lambda c: complex_fresnel(n, k, c),
        angle_samples,
    ):
        total += ((approximation - exact) ** 2).sum().item()
    return total


class TestFitResidual:
    def test_matches_brute_force(self):
        """Vectorized residual equals the summed per-sample squared distance."""
        for ior in (1.5, 3.0, 8.0):
            result = fit_residual(GOLD_N, GOLD_K, ior, angle_samples=50)
            expected = _brute_force_residual(GOLD_N, GOLD_K, ior, 50)
            torch.testing.assert_close(
                result,
                torch.tensor(expected, dtype=torch.float64),
                rtol=1e-10,
                atol=1e-14,
            )

    def test_shape_follows_ior(self):
        ior = torch.linspace(1.0, 5.0, 12, dtype=torch.float64).reshape(3, 4)
        assert fit_residual(GOLD_N, GOLD_K, ior).shape == (3, 4)

    def test_non_negative(self):
        ior = torch.linspace(1.0, 10.0, 50, dtype=torch.float64)
        assert (fit_residual(GOLD_N, GOLD_K, ior) >= 0.0).all()

    def test_summed_not_averaged(self):
        """Doubling the sampling density roughly doubles the residual."""
        sparse = fit_residual(GOLD_N, GOLD_K, 2.0, angle_samples=200)
        dense = fit_residual(GOLD_N, GOLD_K, 2.0, angle_samples=400)
        ratio = (dense / sparse).item()
        assert 1.8 < ratio < 2.2

    def test_accepts_sequences(self):
        result = fit_residual(
            [0.15557, 0.42415, 1.3831], [3.6024, 2.4721, 1.9155], 2.0
        )
        torch.testing.assert_close(result, fit_residual(GOLD_N, GOLD_K, 2.0))

    def test_invalid_constants(self):
        with pytest.raises(DomainInputInvalid):
            fit_residual([-0.1, 0.4, 1.3], GOLD_K, 2.0)

    def test_invalid_angle_samples(self):
        with pytest.raises(NoCandidateFound):
            fit_residual(GOLD_N, GOLD_K, 2.0, angle_samples=1)
