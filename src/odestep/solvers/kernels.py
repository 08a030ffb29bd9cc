# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import numpy as np
from numba import njit

# Kernels taking a compiled vector field as an argument are specialised per
# field and are not cached to disk.


@njit
def explicit_rk_impl(traj, h, a, b, field, params):
    """Numba-compiled explicit Runge-Kutta sweep over a (n, N) trajectory.

    Args:
        traj: trajectory, shape (n, N). Row 0 is read only; rows 1..n-1
            receive an in-place addition of the scheme's estimate.
        h: step size.
        a: strictly lower-triangular stage matrix, shape (s, s).
        b: combination weights, shape (s,).
        field: compiled vector field, field(xdot, x, *params).
        params: tuple of extra vector-field arguments.
    """
    n, N = traj.shape
    s = b.shape[0]
    k = np.empty((s, N))
    v = np.empty(N)

    for t in range(n - 1):
        u = traj[t]
        u1 = traj[t + 1]

        for j in range(s):
            for i in range(N):
                acc = u[i]
                for m in range(j):
                    if a[j, m] != 0.0:
                        acc += h * a[j, m] * k[m, i]
                v[i] = acc
            field(k[j], v, *params)

        for i in range(N):
            inc = 0.0
            for j in range(s):
                if b[j] != 0.0:
                    inc += b[j] * k[j, i]
            u1[i] += u[i] + h * inc


@njit
def explicit_rk_scalar_impl(x, h, a, b, field, params):
    """Numba-compiled explicit Runge-Kutta sweep for a scalar ODE.

    Same recurrence as ``explicit_rk_impl`` with N = 1; the field returns
    the derivative instead of writing a buffer.
    """
    n = x.shape[0]
    s = b.shape[0]
    k = np.empty(s)

    for t in range(n - 1):
        u = x[t]
        for j in range(s):
            v = u
            for m in range(j):
                if a[j, m] != 0.0:
                    v += h * a[j, m] * k[m]
            k[j] = field(v, *params)

        inc = 0.0
        for j in range(s):
            if b[j] != 0.0:
                inc += b[j] * k[j]
        x[t + 1] += u + h * inc
