from ._evaluate_preset import PresetEvaluation, evaluate_preset
from ._evaluate_presets import BatchEvaluation, evaluate_presets
from ._rms_error import rms_error

__all__ = [
    "BatchEvaluation",
    "PresetEvaluation",
    "evaluate_preset",
    "evaluate_presets",
    "rms_error",
]
