"""Tests for cosine_samples."""

import pytest
import torch

from metalfresnel.sampling import cosine_samples


class TestCosineSamples:
    def test_values(self):
        """Samples are i / num_angles for i in [1, num_angles)."""
        torch.testing.assert_close(
            cosine_samples(4),
            torch.tensor([0.25, 0.5, 0.75], dtype=torch.float64),
        )

    def test_open_interval(self):
        """0 and 1 are excluded."""
        samples = cosine_samples(200)
        assert samples.shape == (199,)
        assert samples.min() > 0.0
        assert samples.max() < 1.0

    def test_ascending(self):
        samples = cosine_samples(1600)
        assert (samples[1:] > samples[:-1]).all()

    def test_dtype(self):
        assert cosine_samples(10, dtype=torch.float32).dtype == torch.float32

    def test_too_few_angles(self):
        """At least two subdivisions are needed for one sample."""
        with pytest.raises(ValueError, match="at least 2"):
            cosine_samples(1)
