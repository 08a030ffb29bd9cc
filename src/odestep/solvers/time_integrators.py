# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Fixed-step explicit integrators writing into a caller-owned trajectory.

Both entry points walk the time indices 0..n-2 and, for each k, ADD the
scheme's estimate of state(k+1), computed from state(k), to whatever slot
k+1 already holds. Slot 0 is never written. Pre-filling slots 1..n-1 with
noise therefore superimposes the deterministic drift on the forcing.

A vector field compiled with numba runs inside a compiled time loop; any
other callable runs through an equivalent numpy loop.
"""

import logging
import math

import numpy as np
from numba.extending import is_jitted

from odestep.methods import Scheme, display_name, parse
from odestep.solvers.kernels import explicit_rk_impl, explicit_rk_scalar_impl
from odestep.solvers.tableau import tableau_for

logger = logging.getLogger(__name__)


def resolve_scheme(scheme):
    """Turn a ``Scheme``, integer selector or name into a real ``Scheme``.

    Raises ValueError for anything that does not name Euler, Heun or RK4.
    """
    if isinstance(scheme, str):
        resolved = parse(scheme)
    else:
        try:
            resolved = Scheme(scheme)
        except ValueError:
            resolved = Scheme.UNKNOWN
    if resolved == Scheme.UNKNOWN:
        raise ValueError(f"Unknown scheme: {scheme!r}")
    return resolved


def _check_step(n, h):
    if n < 1:
        raise ValueError(f"n must be >= 1, got {n}")
    h = float(h)
    if not math.isfinite(h):
        raise ValueError(f"h must be finite, got {h}")
    return h


def _check_buffer(x, size):
    if not isinstance(x, np.ndarray):
        raise ValueError(f"Trajectory must be a numpy array, got {type(x).__name__}")
    if x.dtype != np.float64:
        raise ValueError(f"Trajectory must be float64, got {x.dtype}")
    if not x.flags.c_contiguous:
        raise ValueError("Trajectory must be C-contiguous (it is updated in place)")
    if not x.flags.writeable:
        raise ValueError("Trajectory is read-only")
    if x.size != size:
        raise ValueError(f"Trajectory has {x.size} values, expected N*n = {size}")


def _field_name(field):
    return getattr(field, "__name__", type(field).__name__)


def _explicit_rk_py(traj, h, a, b, field, params):
    """Numpy counterpart of ``explicit_rk_impl`` for plain Python fields."""
    n, N = traj.shape
    s = len(b)
    k = np.empty((s, N))
    v = np.empty(N)
    inc = np.empty(N)

    for t in range(n - 1):
        u = traj[t]
        for j in range(s):
            v[:] = u
            for m in range(j):
                if a[j, m] != 0.0:
                    v += h * a[j, m] * k[m]
            field(k[j], v, *params)

        inc[:] = 0.0
        for j in range(s):
            if b[j] != 0.0:
                inc += b[j] * k[j]
        traj[t + 1] += u + h * inc


def _explicit_rk_scalar_py(x, h, a, b, field, params):
    """Pure-Python counterpart of ``explicit_rk_scalar_impl``."""
    n = x.shape[0]
    s = len(b)
    k = [0.0] * s
    a = a.tolist()
    b = b.tolist()

    for t in range(n - 1):
        u = float(x[t])
        for j in range(s):
            v = u
            for m in range(j):
                if a[j][m] != 0.0:
                    v += h * a[j][m] * k[m]
            k[j] = float(field(v, *params))

        inc = 0.0
        for j in range(s):
            if b[j] != 0.0:
                inc += b[j] * k[j]
        x[t + 1] += u + h * inc


def integrate(scheme, field, x, N, n, h, *params):
    """Advance an N-dimensional trajectory in place.

    Parameters
    ----------
    scheme : Scheme, int or str
        Euler, Heun or RK4. ``Scheme.UNKNOWN`` and unrecognised names raise.
    field : callable(xdot, x, *params)
        Vector field; writes dx/dt at the length-N probe state ``x`` into
        ``xdot``. May be a numba ``@njit`` function, in which case the whole
        time loop is compiled.
    x : ndarray, float64
        Time-major trajectory buffer, flat of length N*n or shape (n, N).
        Must be C-contiguous and writable. Slot 0 holds the initial state.
    N : int
        State dimension, >= 1.
    n : int
        Number of time indices, >= 1. n = 1 leaves ``x`` untouched.
    h : float
        Step size. Negative values integrate backward in time.
    *params
        Extra arguments forwarded to ``field`` unchanged.

    Raises
    ------
    ValueError
        On an unknown scheme or a buffer that does not match (N, n). Nothing
        is written in that case.
    """
    scheme = resolve_scheme(scheme)
    if N < 1:
        raise ValueError(f"N must be >= 1, got {N}")
    h = _check_step(n, h)
    _check_buffer(x, N * n)

    tab = tableau_for(scheme)
    jitted = is_jitted(field)
    logger.debug(
        "%s : %s (N=%d, n=%d, h=%g, %s)",
        display_name(scheme), _field_name(field), N, n, h,
        "compiled" if jitted else "python",
    )
    if n == 1:
        return

    traj = x.reshape(n, N)
    if jitted:
        explicit_rk_impl(traj, h, tab.a, tab.b, field, tuple(params))
    else:
        _explicit_rk_py(traj, h, tab.a, tab.b, field, params)


def integrate_scalar(scheme, field, x, n, h, *params):
    """Advance a scalar trajectory in place.

    Same contract as ``integrate`` with N = 1, except that ``field`` has
    the form ``field(x, *params) -> float`` and returns the derivative.
    ``x`` is a float64 buffer of length n.
    """
    scheme = resolve_scheme(scheme)
    h = _check_step(n, h)
    _check_buffer(x, n)

    tab = tableau_for(scheme)
    jitted = is_jitted(field)
    logger.debug(
        "%s : %s (scalar, n=%d, h=%g, %s)",
        display_name(scheme), _field_name(field), n, h,
        "compiled" if jitted else "python",
    )
    if n == 1:
        return

    x = x.reshape(n)
    if jitted:
        explicit_rk_scalar_impl(x, h, tab.a, tab.b, field, tuple(params))
    else:
        _explicit_rk_scalar_py(x, h, tab.a, tab.b, field, params)
