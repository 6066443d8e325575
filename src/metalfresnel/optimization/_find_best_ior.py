import warnings
from typing import Sequence, Union

import torch
from torch import Tensor

from metalfresnel._exceptions import NoCandidateFound
from metalfresnel.optimization._fit_residual import (
    DEFAULT_ANGLE_SAMPLES,
    _optical_constants,
    _residual,
)
from metalfresnel.optimization._grid_search import grid_search
from metalfresnel.optimization._ior_candidates import (
    DEFAULT_IOR_MAX,
    DEFAULT_IOR_MIN,
    DEFAULT_IOR_STEP,
    ior_candidates,
)
from metalfresnel.optimization._result import FitResult
from metalfresnel.sampling import cosine_samples
from metalfresnel.shading import complex_fresnel


def find_best_ior(
    n: Union[Tensor, Sequence[float]],
    k: Union[Tensor, Sequence[float]],
    *,
    ior_min: float = DEFAULT_IOR_MIN,
    ior_max: float = DEFAULT_IOR_MAX,
    ior_step: float = DEFAULT_IOR_STEP,
    angle_samples: int = DEFAULT_ANGLE_SAMPLES,
    chunk_size: int = 1024,
) -> FitResult:
    r"""Find the metallic Fresnel IOR that best matches a complex Fresnel curve.

    The metallic model is parameterized by the physical reflectance at
    normal incidence (``base``) and at grazing incidence (``grazing``); the
    only free parameter is its index of refraction. Every candidate in
    ``[ior_min, ior_max)`` spaced by ``ior_step`` is scored with
    :func:`fit_residual` and the minimum is returned.

    Mathematical Definition
    -----------------------
    .. math::

        \mathrm{ior}^* = \operatorname*{arg\,min}_{\mathrm{ior}_i} E(\mathrm{ior}_i),
        \qquad \mathrm{ior}_i = \mathrm{ior}_{\min} + i\,\Delta

    where :math:`E` is the summed squared color distance over
    ``angle_samples - 1`` equally spaced cosines in (0, 1).

    Parameters
    ----------
    n : Tensor or sequence of float, shape (3,)
        Real part of the refractive index for red, green and blue
        (0.65, 0.55, 0.45 micrometers). Sequences are converted to float64.
    k : Tensor or sequence of float, shape (3,)
        Extinction coefficient for red, green and blue.
    ior_min : float
        First candidate IOR (inclusive). Default: 1.001.
    ior_max : float
        End of the candidate range (exclusive). Default: 10.0.
    ior_step : float
        Candidate spacing. Default: 0.001.
    angle_samples : int
        Number of subdivisions of the cosine range used for the residual.
        Default: 200.
    chunk_size : int
        Number of candidates evaluated per vectorized block. Bounds memory
        use only. Default: 1024.

    Returns
    -------
    FitResult
        Fitted IOR, its residual, the base and grazing colors and the
        number of scanned candidates.

    Raises
    ------
    DomainInputInvalid
        If ``n`` or ``k`` is not a finite, non-negative RGB triple.
    NoCandidateFound
        If the candidate range is empty or malformed, or
        ``angle_samples < 2``. Raised before any evaluation.

    Examples
    --------
    Gold:

    >>> n = torch.tensor([0.15557, 0.42415, 1.3831], dtype=torch.float64)
    >>> k = torch.tensor([3.6024, 2.4721, 1.9155], dtype=torch.float64)
    >>> result = find_best_ior(n, k)
    >>> result.base
    tensor([0.9565, 0.7916, 0.4082], dtype=torch.float64)

    A coarser, faster fit:

    >>> result = find_best_ior(n, k, ior_step=0.01, angle_samples=50)

    Notes
    -----
    - The scan is exhaustive and deterministic: identical inputs give
      bit-identical results.
    - Ties keep the lowest IOR.
    - ``base`` and ``grazing`` are differentiable with respect to ``n`` and
      ``k``; the search itself runs without gradient tracking.

    See Also
    --------
    fit_residual : The objective minimized here.
    grid_search : The underlying exhaustive minimization.
    """
    n, k = _optical_constants(n, k)

    if angle_samples < 2:
        raise NoCandidateFound(
            f"angle_samples must be at least 2, got {angle_samples}"
        )

    candidates = ior_candidates(
        ior_min,
        ior_max,
        ior_step,
        dtype=n.dtype,
        device=n.device,
    )

    if n.dtype in (torch.float16, torch.bfloat16):
        warnings.warn(
            f"find_best_ior with {n.dtype} accumulates residuals over "
            f"{angle_samples - 1} samples with low precision. Consider using "
            f"float32 or float64.",
            RuntimeWarning,
            stacklevel=2,
        )

    grazing = complex_fresnel(n, k, 0.0)
    base = complex_fresnel(n, k, 1.0)

    with torch.no_grad():
        cosine = cosine_samples(
            angle_samples, dtype=n.dtype, device=n.device
        ).unsqueeze(-1)
        reference = complex_fresnel(n, k, cosine)
        fixed_base = base.detach()
        fixed_grazing = grazing.detach()

        def objective(ior: Tensor) -> Tensor:
            return _residual(fixed_base, fixed_grazing, cosine, reference, ior)

        result = grid_search(objective, candidates, chunk_size=chunk_size)

    return FitResult(
        ior=result.x,
        residual=result.fun,
        base=base,
        grazing=grazing,
        num_candidates=result.num_evaluations,
    )
