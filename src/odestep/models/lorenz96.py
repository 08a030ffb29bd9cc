# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from numba import njit

MIN_DIMENSION = 4


@njit(cache=True)
def lorenz96(xdot, x, F):
    """Lorenz 96 vector field with cyclic boundary.

    dx_i/dt = (x_{i+1} - x_{i-2}) * x_{i-1} - x_i + F

    Requires len(x) >= 4 (see ``check_dimension``); not checked here.
    """
    N = x.shape[0]
    xdot[0] = (x[1] - x[N - 2]) * x[N - 1] - x[0] + F
    xdot[1] = (x[2] - x[N - 1]) * x[0] - x[1] + F
    for i in range(2, N - 1):
        xdot[i] = (x[i + 1] - x[i - 2]) * x[i - 1] - x[i] + F
    xdot[N - 1] = (x[0] - x[N - 3]) * x[N - 2] - x[N - 1] + F


def check_dimension(N):
    """Raise ValueError unless N is large enough for the Lorenz 96 stencil."""
    if N < MIN_DIMENSION:
        raise ValueError(f"Lorenz 96 needs N >= {MIN_DIMENSION}, got {N}")


def initial_state(N, F, perturbation=0.01):
    """Uniform equilibrium x_i = F with the first variable nudged.

    The unperturbed state is a fixed point; the nudge lets the chaotic
    dynamics develop.
    """
    check_dimension(N)
    x0 = np.full(N, float(F))
    x0[0] += perturbation
    return x0
