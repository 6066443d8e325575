from ._cosine_samples import cosine_samples
from ._reflectance_curves import ReflectanceCurves, sample_reflectance_curves
from ._sample_curves import CurveSamples, sample_curves

__all__ = [
    "CurveSamples",
    "ReflectanceCurves",
    "cosine_samples",
    "sample_curves",
    "sample_reflectance_curves",
]
