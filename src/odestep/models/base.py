# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Vector-field contract consumed by the integrators.

An N-dimensional field has the form ``field(xdot, x, *params)``: it reads
the length-N probe state ``x`` and writes dx/dt into ``xdot``. A scalar
field has the form ``field(x, *params)`` and returns dx/dt. Fields are
called several times per step (once per stage) with different probe
states and must not keep state between calls. Decorating a field with
``numba.njit`` lets the integrator compile the whole time loop.
"""

from typing import Callable

import numpy as np

VectorField = Callable[..., None]
ScalarField = Callable[..., float]


def evaluate(field, x, *params):
    """Evaluate an N-dimensional field once into a fresh buffer."""
    x = np.ascontiguousarray(x, dtype=np.float64)
    xdot = np.empty_like(x)
    field(xdot, x, *params)
    return xdot


def evaluate_scalar(field, x, *params):
    """Evaluate a scalar field once."""
    return float(field(float(x), *params))
