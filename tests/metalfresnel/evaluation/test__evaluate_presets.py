"""Tests for evaluate_presets."""

import pytest

from metalfresnel import DomainInputInvalid
from metalfresnel.evaluation import BatchEvaluation, evaluate_presets
from metalfresnel.presets import METAL_PRESETS, MetalPreset

COARSE = dict(ior_step=0.05, angle_samples=50, display_samples=100)


class TestEvaluatePresets:
    def test_all_presets(self):
        batch = evaluate_presets(**COARSE)
        assert isinstance(batch, BatchEvaluation)
        assert len(batch.evaluations) == len(METAL_PRESETS)
        assert batch.failures == ()

    def test_preserves_order(self):
        batch = evaluate_presets(**COARSE)
        assert [e.name for e in batch.evaluations] == [
            preset.name for preset in METAL_PRESETS
        ]

    def test_subset(self):
        batch = evaluate_presets(METAL_PRESETS[:2], **COARSE)
        assert [e.name for e in batch.evaluations] == ["Silver", "Gold"]

    def test_empty(self):
        batch = evaluate_presets((), **COARSE)
        assert batch.evaluations == ()
        assert batch.failures == ()


class TestEvaluatePresetsFailures:
    def test_failure_is_isolated(self):
        """A broken preset is skipped and the rest are still evaluated."""
        presets = (
            METAL_PRESETS[0],
            MetalPreset("Broken", (-1.0, 0.5, 0.5), (3.0, 3.0, 3.0)),
            METAL_PRESETS[1],
        )

        with pytest.warns(RuntimeWarning, match="Broken"):
            batch = evaluate_presets(presets, **COARSE)

        assert [e.name for e in batch.evaluations] == ["Silver", "Gold"]
        assert len(batch.failures) == 1

        name, error = batch.failures[0]
        assert name == "Broken"
        assert isinstance(error, DomainInputInvalid)
