# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Benchmarking utilities for the integrators.

Compares the compiled time loop against the numpy loop used for plain
Python vector fields, and the scalar specialisation against the general
stepper at N=1.
"""

import time
import numpy as np

from odestep.methods import SCHEMES, display_name
from odestep.models.lorenz96 import initial_state, lorenz96
from odestep.models.mean_reversion import mean_reversion
from odestep.solvers.time_integrators import integrate, integrate_scalar


def _lorenz96_py(xdot, x, F):
    xdot[:] = (np.roll(x, -1) - np.roll(x, 2)) * np.roll(x, 1) - x + F


def _time_fn(fn, args=(), kwargs=None, n_warmup=1, n_iter=10):
    """Time a function over n_iter calls, returning median and stats."""
    kwargs = kwargs or {}
    for _ in range(n_warmup):
        fn(*args, **kwargs)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        fn(*args, **kwargs)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = np.array(times)
    return {
        "median_ms": float(np.median(times)),
        "mean_ms": float(np.mean(times)),
        "std_ms": float(np.std(times)),
        "min_ms": float(np.min(times)),
        "max_ms": float(np.max(times)),
        "n_iter": n_iter,
    }


def bench_integrate(scheme, N=40, n=2000, F=8.0, n_iter=10):
    """Benchmark integrate() with the compiled Lorenz 96 field."""
    x0 = initial_state(N, F)

    def run():
        x = np.zeros(N * n)
        x[:N] = x0
        integrate(scheme, lorenz96, x, N, n, 0.001, F)

    return _time_fn(run, n_iter=n_iter)


def bench_integrate_python(scheme, N=40, n=2000, F=8.0, n_iter=10):
    """Benchmark integrate() with a plain numpy Lorenz 96 field."""
    x0 = initial_state(N, F)

    def run():
        x = np.zeros(N * n)
        x[:N] = x0
        integrate(scheme, _lorenz96_py, x, N, n, 0.001, F)

    return _time_fn(run, n_iter=n_iter)


def bench_integrate_scalar(scheme, n=20000, n_iter=10):
    """Benchmark integrate_scalar() with the compiled mean-reversion drift."""

    def run():
        x = np.zeros(n)
        x[0] = 1.0
        integrate_scalar(scheme, mean_reversion, x, n, 0.001, 1.0, 0.0)

    return _time_fn(run, n_iter=n_iter)


def run_all_benchmarks(N=40, n=2000, verbose=True):
    """Run every benchmark for every scheme. Returns dict of results."""
    results = {}

    benches = [
        ("integrate", lambda s: bench_integrate(s, N=N, n=n)),
        ("integrate_python", lambda s: bench_integrate_python(s, N=N, n=n)),
        ("integrate_scalar", lambda s: bench_integrate_scalar(s, n=10 * n)),
    ]

    for scheme in SCHEMES:
        for label, fn in benches:
            key = f"{label}[{display_name(scheme)}]"
            if verbose:
                print(f"  {key}...", end="", flush=True)
            r = fn(scheme)
            results[key] = r
            if verbose:
                print(f" {r['median_ms']:.3f} ms (median, n={r['n_iter']})")

    return results


if __name__ == "__main__":
    print("=" * 55)
    print("odestep Benchmarks")
    print("=" * 55)
    print()
    print("Lorenz 96 (N=40, n=2000) and scalar drift (n=20000):")
    run_all_benchmarks()
