import warnings
from typing import Iterable, NamedTuple, Tuple

from metalfresnel._exceptions import MetalFresnelError
from metalfresnel.evaluation._evaluate_preset import (
    PresetEvaluation,
    evaluate_preset,
)
from metalfresnel.presets import METAL_PRESETS, MetalPreset


class BatchEvaluation(NamedTuple):
    """Results of evaluating several presets.

    Parameters
    ----------
    evaluations : tuple of PresetEvaluation
        Successful evaluations, in input order.
    failures : tuple of (str, MetalFresnelError)
        Name and error of every preset that could not be evaluated.
    """

    evaluations: Tuple[PresetEvaluation, ...]
    failures: Tuple[Tuple[str, MetalFresnelError], ...]


def evaluate_presets(
    presets: Iterable[MetalPreset] = METAL_PRESETS,
    **kwargs,
) -> BatchEvaluation:
    """Evaluate every preset, isolating per-preset failures.

    A preset whose fit or evaluation raises :class:`MetalFresnelError` is
    skipped with a ``RuntimeWarning`` and recorded in ``failures``; the
    remaining presets are still evaluated.

    Parameters
    ----------
    presets : iterable of MetalPreset
        Presets to evaluate. Default: :data:`METAL_PRESETS`.
    **kwargs
        Keyword arguments passed to :func:`evaluate_preset`.

    Returns
    -------
    BatchEvaluation
        Evaluations and failures.

    Examples
    --------
    >>> batch = evaluate_presets(ior_step=0.01)
    >>> [(e.name, round(e.ior, 2)) for e in batch.evaluations][:2]
    [('Silver', ...), ('Gold', ...)]
    """
    evaluations = []
    failures = []

    for preset in presets:
        try:
            evaluations.append(evaluate_preset(preset, **kwargs))
        except MetalFresnelError as error:
            warnings.warn(
                f"Skipping metal preset {preset.name!r}: {error}",
                RuntimeWarning,
                stacklevel=2,
            )
            failures.append((preset.name, error))

    return BatchEvaluation(
        evaluations=tuple(evaluations),
        failures=tuple(failures),
    )
