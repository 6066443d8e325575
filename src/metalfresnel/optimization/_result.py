from typing import NamedTuple

from torch import Tensor


class GridSearchResult(NamedTuple):
    """Result of an exhaustive grid search.

    Parameters
    ----------
    x : Tensor
        Best candidate. Scalar.
    fun : Tensor
        Objective value at ``x``.
    index : Tensor
        Position of ``x`` in the candidate tensor. ``int64`` scalar.
    num_evaluations : Tensor
        Number of candidates evaluated. ``int64`` scalar.
    """

    x: Tensor
    fun: Tensor
    index: Tensor
    num_evaluations: Tensor


class FitResult(NamedTuple):
    """Best-fit index of refraction of the metallic Fresnel model.

    Parameters
    ----------
    ior : Tensor
        Fitted index of refraction. Scalar, ``>= 1``.
    residual : Tensor
        Summed squared color distance between the metallic and the complex
        Fresnel curves at ``ior``. Scalar, ``>= 0``.
    base : Tensor
        Complex Fresnel reflectance at normal incidence, shape (3,).
    grazing : Tensor
        Complex Fresnel reflectance at grazing incidence, shape (3,).
    num_candidates : Tensor
        Number of IOR values scanned. ``int64`` scalar.
    """

    ior: Tensor
    residual: Tensor
    base: Tensor
    grazing: Tensor
    num_candidates: Tensor
