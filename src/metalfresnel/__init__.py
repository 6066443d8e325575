"""metalfresnel: fit metallic Fresnel shading parameters to measured metals."""

from . import (
    color,
    evaluation,
    optimization,
    presets,
    sampling,
    shading,
)
from ._exceptions import (
    DomainInputInvalid,
    MetalFresnelError,
    NoCandidateFound,
)

__all__ = [
    "DomainInputInvalid",
    "MetalFresnelError",
    "NoCandidateFound",
    "color",
    "evaluation",
    "optimization",
    "presets",
    "sampling",
    "shading",
]

__version__ = "0.1.0"
