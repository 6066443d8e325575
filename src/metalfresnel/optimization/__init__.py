from ._find_best_ior import find_best_ior
from ._fit_residual import fit_residual
from ._grid_search import grid_search
from ._ior_candidates import ior_candidates
from ._result import FitResult, GridSearchResult

__all__ = [
    "FitResult",
    "GridSearchResult",
    "find_best_ior",
    "fit_residual",
    "grid_search",
    "ior_candidates",
]
