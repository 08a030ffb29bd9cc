# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import math

import numpy as np
from odestep.models.base import evaluate, evaluate_scalar
from odestep.models.lorenz96 import initial_state, lorenz96
from odestep.models.mean_reversion import mean_reversion, stationary_std


def test_lorenz96_equilibrium():
    """x_i = F for all i is a fixed point."""
    F = 8.0
    xdot = evaluate(lorenz96, np.full(10, F), F)
    assert np.allclose(xdot, 0.0)


def test_lorenz96_matches_cyclic_formula():
    """Every component follows (x[i+1] - x[i-2]) * x[i-1] - x[i] + F with wraparound."""
    rng = np.random.default_rng(7)
    N, F = 12, 8.0
    x = rng.normal(size=N)
    xdot = evaluate(lorenz96, x, F)
    expected = np.array([
        (x[(i + 1) % N] - x[(i - 2) % N]) * x[(i - 1) % N] - x[i] + F
        for i in range(N)
    ])
    assert np.allclose(xdot, expected, rtol=1e-14)


def test_lorenz96_minimum_dimension():
    """N = 4 exercises every boundary branch of the stencil."""
    x = np.array([1.0, 2.0, 3.0, 4.0])
    xdot = evaluate(lorenz96, x, 0.0)
    assert np.allclose(xdot, [(2 - 3) * 4 - 1, (3 - 4) * 1 - 2, (4 - 1) * 2 - 3, (1 - 2) * 3 - 4])


def test_initial_state_perturbs_first_variable():
    x0 = initial_state(40, 8.0, perturbation=0.01)
    assert x0.shape == (40,)
    assert np.isclose(x0[0], 8.01)
    assert np.all(x0[1:] == 8.0)


def test_mean_reversion_drift():
    assert evaluate_scalar(mean_reversion, 2.0, 0.5, 1.0) == 0.5 * (1.0 - 2.0)
    assert evaluate_scalar(mean_reversion, 1.0, 0.5, 1.0) == 0.0


def test_stationary_std():
    assert math.isclose(stationary_std(2.0, 1.0), 0.5)
