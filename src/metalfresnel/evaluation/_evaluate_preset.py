from typing import NamedTuple, Optional

import torch
from torch import Tensor

from metalfresnel.color import srgb_linear_to_srgb, srgb_to_hex
from metalfresnel.evaluation._rms_error import rms_error
from metalfresnel.optimization import find_best_ior
from metalfresnel.optimization._fit_residual import DEFAULT_ANGLE_SAMPLES
from metalfresnel.optimization._ior_candidates import (
    DEFAULT_IOR_MAX,
    DEFAULT_IOR_MIN,
    DEFAULT_IOR_STEP,
)
from metalfresnel.presets import MetalPreset
from metalfresnel.sampling import ReflectanceCurves, sample_reflectance_curves

DEFAULT_DISPLAY_SAMPLES = 1600


class PresetEvaluation(NamedTuple):
    """Fit and error summary of one metal preset.

    Parameters
    ----------
    name : str
        Preset name.
    base : Tensor
        Reflectance at normal incidence scaled to 0..255 and floored,
        shape (3,).
    grazing : Tensor
        Reflectance at grazing incidence scaled to 0..255 and floored,
        shape (3,).
    ior : float
        Fitted index of refraction of the metallic model.
    residual : float
        Summed squared distance minimized by the fit.
    base_srgb : Tensor
        sRGB-encoded base reflectance in [0, 1], shape (3,).
    base_hex : str
        ``"#rrggbb"`` code of ``base_srgb``.
    metallic_error : float
        RMS error of the metallic model against the complex Fresnel curve.
    artist_error : float
        RMS error of the artist model against the complex Fresnel curve.
    curves : ReflectanceCurves
        The three curves at the display sampling density.
    """

    name: str
    base: Tensor
    grazing: Tensor
    ior: float
    residual: float
    base_srgb: Tensor
    base_hex: str
    metallic_error: float
    artist_error: float
    curves: ReflectanceCurves


def evaluate_preset(
    preset: MetalPreset,
    *,
    ior_min: float = DEFAULT_IOR_MIN,
    ior_max: float = DEFAULT_IOR_MAX,
    ior_step: float = DEFAULT_IOR_STEP,
    angle_samples: int = DEFAULT_ANGLE_SAMPLES,
    display_samples: int = DEFAULT_DISPLAY_SAMPLES,
    chunk_size: int = 1024,
    dtype: torch.dtype = torch.float64,
    device: Optional[torch.device] = None,
) -> PresetEvaluation:
    """Fit a metal preset and measure both simplified models against it.

    Parameters
    ----------
    preset : MetalPreset
        Metal to evaluate.
    ior_min, ior_max, ior_step, angle_samples, chunk_size
        Passed to :func:`find_best_ior`.
    display_samples : int
        Sampling density of the curves and of the RMS errors. Default: 1600.
    dtype : torch.dtype
        Dtype of the computation. Default: ``torch.float64``.
    device : torch.device, optional
        Device of the computation.

    Returns
    -------
    PresetEvaluation
        Report and plot data for the preset.

    Raises
    ------
    DomainInputInvalid
        If the preset's constants are invalid or the artist model cannot be
        evaluated for its colors.
    NoCandidateFound
        If the IOR range is malformed.
    """
    n, k = preset.to_tensors(dtype=dtype, device=device)

    fit = find_best_ior(
        n,
        k,
        ior_min=ior_min,
        ior_max=ior_max,
        ior_step=ior_step,
        angle_samples=angle_samples,
        chunk_size=chunk_size,
    )

    curves = sample_reflectance_curves(
        n, k, fit.base, fit.grazing, fit.ior, display_samples
    )

    base_srgb = srgb_linear_to_srgb(fit.base)

    return PresetEvaluation(
        name=preset.name,
        base=torch.floor(fit.base * 255.0),
        grazing=torch.floor(fit.grazing * 255.0),
        ior=fit.ior.item(),
        residual=fit.residual.item(),
        base_srgb=base_srgb,
        base_hex=srgb_to_hex(base_srgb),
        metallic_error=rms_error(curves.metallic, curves.physical).item(),
        artist_error=rms_error(curves.artist, curves.physical).item(),
        curves=curves,
    )
