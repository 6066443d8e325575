"""Tests for the dielectric Fresnel coefficient."""

import math

import torch

from metalfresnel.shading import dielectric_fresnel


def _fresnel(theta_i: float, ior: float) -> float:
    theta_t = math.asin(math.sin(theta_i) / ior)
    ci, ct = math.cos(theta_i), math.cos(theta_t)
    rs = ((ci - ior * ct) / (ci + ior * ct)) ** 2
    rp = ((ior * ci - ct) / (ior * ci + ct)) ** 2
    return 0.5 * (rs + rp)


class TestDielectricFresnelKnownValues:
    """Tests for known reference values."""

    def test_normal_incidence(self):
        """At normal incidence F = ((ior - 1) / (ior + 1))^2."""
        one = torch.tensor(1.0, dtype=torch.float64)
        result = dielectric_fresnel(one, one, 1.5)
        torch.testing.assert_close(
            result, torch.tensor(0.04, dtype=torch.float64)
        )

    def test_grazing_incidence(self):
        """At grazing incidence everything is reflected."""
        ci = torch.tensor(0.0, dtype=torch.float64)
        ct = torch.tensor(math.sqrt(1.0 - 1.0 / 1.5**2), dtype=torch.float64)
        torch.testing.assert_close(
            dielectric_fresnel(ci, ct, 1.5),
            torch.tensor(1.0, dtype=torch.float64),
        )

    def test_oblique_incidence(self):
        """Matches the textbook Fresnel equations at 45 degrees."""
        theta_i = math.radians(45)
        ior = 1.5
        theta_t = math.asin(math.sin(theta_i) / ior)
        result = dielectric_fresnel(
            torch.tensor(math.cos(theta_i), dtype=torch.float64),
            torch.tensor(math.cos(theta_t), dtype=torch.float64),
            ior,
        )
        torch.testing.assert_close(
            result,
            torch.tensor(_fresnel(theta_i, ior), dtype=torch.float64),
        )

    def test_zero_over_zero(self):
        """Grazing incidence with a grazing transmitted ray reflects everything."""
        zero = torch.tensor(0.0, dtype=torch.float64)
        result = dielectric_fresnel(zero, zero, 1.5)
        torch.testing.assert_close(result, torch.tensor(1.0, dtype=torch.float64))

    def test_matched_index(self):
        """ior=1 with an unbent ray reflects nothing."""
        cosine = torch.tensor([0.2, 0.5, 0.9], dtype=torch.float64)
        torch.testing.assert_close(
            dielectric_fresnel(cosine, cosine, 1.0),
            torch.zeros(3, dtype=torch.float64),
        )
