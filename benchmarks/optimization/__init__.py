"""Benchmarks for metal IOR fitting.

This module provides benchmark classes for the vectorized grid search
against a per-candidate loop baseline.
"""

from .bench_find_best_ior import BenchFindBestIor, Timing

__all__ = [
    "BenchFindBestIor",
    "Timing",
]
