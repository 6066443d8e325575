"""Tests for the metal presets."""

import pytest
import torch

from metalfresnel.presets import METAL_PRESETS, MetalPreset, get_metal_preset


class TestMetalPresets:
    def test_count_and_order(self):
        assert len(METAL_PRESETS) == 15
        assert METAL_PRESETS[0].name == "Silver"
        assert METAL_PRESETS[-1].name == "Cobalt"

    def test_unique_names(self):
        names = [preset.name.lower() for preset in METAL_PRESETS]
        assert len(set(names)) == len(names)

    def test_constants_are_valid(self):
        """Every preset is a non-negative RGB triple."""
        for preset in METAL_PRESETS:
            assert len(preset.n) == 3
            assert len(preset.k) == 3
            assert all(value >= 0.0 for value in preset.n + preset.k)

    def test_gold_values(self):
        gold = get_metal_preset("Gold")
        assert gold.n == (0.15557, 0.42415, 1.3831)
        assert gold.k == (3.6024, 2.4721, 1.9155)


class TestGetMetalPreset:
    def test_case_insensitive(self):
        assert get_metal_preset("copper") is get_metal_preset("COPPER")
        assert get_metal_preset("copper").name == "Copper"

    def test_unknown(self):
        with pytest.raises(KeyError, match="Unknown metal preset"):
            get_metal_preset("Unobtainium")


class TestMetalPresetToTensors:
    def test_default_dtype(self):
        n, k = get_metal_preset("Iron").to_tensors()
        assert n.dtype == torch.float64
        assert k.dtype == torch.float64
        assert n.shape == (3,)
        torch.testing.assert_close(
            n, torch.tensor([1.8247, 1.2246, 1.0205], dtype=torch.float64)
        )

    def test_float32(self):
        n, k = get_metal_preset("Iron").to_tensors(dtype=torch.float32)
        assert n.dtype == torch.float32
        assert k.dtype == torch.float32

    def test_immutable(self):
        preset = MetalPreset("Test", (1.0, 1.0, 1.0), (2.0, 2.0, 2.0))
        with pytest.raises(AttributeError):
            preset.name = "Other"
