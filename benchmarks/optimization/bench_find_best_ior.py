"""Benchmarks for find_best_ior.

This module compares the chunked, vectorized IOR scan against a loop that
scores one candidate at a time.
"""

from __future__ import annotations

import time
from typing import Any, Callable, NamedTuple

import numpy as np
import torch

from metalfresnel.evaluation import evaluate_presets
from metalfresnel.optimization import find_best_ior, fit_residual, ior_candidates
from metalfresnel.presets import get_metal_preset


class Timing(NamedTuple):
    """Wall-clock statistics of repeated calls, in seconds."""

    mean: float
    std: float
    min: float
    max: float

    def __str__(self) -> str:
        return f"{format_time(self.mean)} +/- {format_time(self.std)}"


_TIME_UNITS = ((1e-6, 1e9, "ns"), (1e-3, 1e6, "us"), (1.0, 1e3, "ms"))


def format_time(seconds: float) -> str:
    """Format a duration with the largest unit that keeps it above 1."""
    for limit, scale, unit in _TIME_UNITS:
        if seconds < limit:
            return f"{seconds * scale:.3f}{unit}"
    return f"{seconds:.3f}s"


def benchmark(
    func: Callable,
    *args: Any,
    warmup: int = 1,
    iterations: int = 5,
    **kwargs: Any,
) -> Timing:
    """Time ``func(*args, **kwargs)`` after ``warmup`` untimed calls.

    CUDA work is synchronized before each timer stop so that asynchronous
    kernels are included.
    """
    for _ in range(warmup):
        func(*args, **kwargs)

    times = np.empty(iterations)
    for i in range(iterations):
        start = time.perf_counter()
        func(*args, **kwargs)
        if torch.cuda.is_available():
            torch.cuda.synchronize()
        times[i] = time.perf_counter() - start

    return Timing(
        mean=float(times.mean()),
        std=float(times.std()),
        min=float(times.min()),
        max=float(times.max()),
    )


def report(name: str, vectorized: Timing, loop: Timing | None = None) -> None:
    """Print one benchmark case, with the loop speedup when available."""
    print(f"\n{name}\n{'-' * len(name)}")
    print(f"  vectorized: {vectorized}")

    if loop is None:
        return

    print(f"  loop:       {loop}")
    print(f"  speedup:    {loop.mean / vectorized.mean:.2f}x")


def _loop_find_best_ior(n, k, *, ior_step, angle_samples):
    best_ior = None
    best_residual = float("inf")
    for ior in ior_candidates(ior_step=ior_step).tolist():
        residual = fit_residual(n, k, ior, angle_samples=angle_samples).item()
        if residual < best_residual:
            best_ior, best_residual = ior, residual
    return best_ior, best_residual


class BenchFindBestIor:
    """Benchmarks for the IOR fit."""

    def __init__(self, warmup: int = 1, iterations: int = 5):
        """Initialize benchmark runner.

        Parameters
        ----------
        warmup : int, optional
            Number of warmup iterations. Default is 1.
        iterations : int, optional
            Number of timed iterations. Default is 5.
        """
        self.warmup = warmup
        self.iterations = iterations

    def _bench(self, func: Callable, *args: Any, **kwargs: Any) -> Timing:
        """Run benchmark with configured settings."""
        return benchmark(
            func,
            *args,
            warmup=self.warmup,
            iterations=self.iterations,
            **kwargs,
        )

    def bench_find_best_ior(
        self, metal: str = "Gold", ior_step: float = 0.01
    ) -> None:
        """Benchmark find_best_ior against a per-candidate loop.

        Parameters
        ----------
        metal : str, optional
            Preset name. Default is "Gold".
        ior_step : float, optional
            Candidate spacing. Default is 0.01.
        """
        n, k = get_metal_preset(metal).to_tensors()

        vectorized_time = self._bench(find_best_ior, n, k, ior_step=ior_step)
        loop_time = self._bench(
            _loop_find_best_ior, n, k, ior_step=ior_step, angle_samples=200
        )

        report(
            f"find_best_ior ({metal}, step={ior_step})",
            vectorized_time,
            loop_time,
        )

    def bench_chunk_size(self, chunk_size: int = 1024) -> None:
        """Benchmark the default grid with a given chunk size.

        Parameters
        ----------
        chunk_size : int, optional
            Candidates per vectorized block. Default is 1024.
        """
        n, k = get_metal_preset("Gold").to_tensors()

        vectorized_time = self._bench(find_best_ior, n, k, chunk_size=chunk_size)

        report(
            f"find_best_ior (default grid, chunk_size={chunk_size})",
            vectorized_time,
        )

    def bench_evaluate_presets(self) -> None:
        """Benchmark the full preset report."""
        vectorized_time = self._bench(evaluate_presets)

        report("evaluate_presets (15 metals)", vectorized_time)

    def run_all(self) -> None:
        """Run all benchmarks."""
        print("=" * 60)
        print("IOR FIT BENCHMARKS")
        print("=" * 60)

        print("\n--- Vectorized vs Loop ---")
        self.bench_find_best_ior()
        self.bench_find_best_ior(metal="Silver")

        print("\n--- Full Grid ---")
        self.bench_chunk_size()
        self.bench_evaluate_presets()

    def run_scaling(self) -> None:
        """Run scaling benchmarks with varying parameters."""
        print("=" * 60)
        print("SCALING BENCHMARKS")
        print("=" * 60)

        print("\n--- Chunk Size Scaling ---")
        for chunk_size in [64, 256, 1024, 4096]:
            self.bench_chunk_size(chunk_size=chunk_size)


if __name__ == "__main__":
    bench = BenchFindBestIor(warmup=1, iterations=5)
    bench.run_all()
    print("\n")
    bench.run_scaling()
