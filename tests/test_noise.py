# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import math

import numpy as np
import pytest
from odestep.noise import prefill_noise


def test_slot_zero_untouched():
    N, n = 3, 50
    x = np.zeros(N * n)
    x[:N] = [1.0, 2.0, 3.0]
    prefill_noise(x, N, n, 0.01, 1.0, seed=1)
    assert np.array_equal(x[:N], [1.0, 2.0, 3.0])
    assert np.all(x[N:] != 0.0)


def test_zero_sigma_zero_fills():
    """sigma = 0 overwrites previous slot contents with zeros."""
    x = np.ones(20)
    prefill_noise(x, 2, 10, 0.1, 0.0, seed=0)
    assert np.all(x[2:] == 0.0)
    assert np.all(x[:2] == 1.0)


def test_increments_scale_with_sqrt_h():
    """Sample std of the increments is sigma * sqrt(h)."""
    N, n, h, sigma = 4, 50001, 0.04, 0.5
    x = np.zeros((n, N))
    prefill_noise(x, N, n, h, sigma, seed=3)
    assert np.isclose(x[1:].std(), sigma * math.sqrt(h), rtol=0.02)
    assert abs(x[1:].mean()) < 0.01


def test_per_component_sigma():
    N, n = 2, 20001
    x = np.zeros((n, N))
    prefill_noise(x, N, n, 1.0, np.array([1.0, 0.0]), seed=5)
    assert np.all(x[1:, 1] == 0.0)
    assert np.isclose(x[1:, 0].std(), 1.0, rtol=0.05)


def test_seed_reproducible_and_rng_accepted():
    a = prefill_noise(np.zeros(30), 3, 10, 0.1, 1.0, seed=42)
    b = prefill_noise(np.zeros(30), 3, 10, 0.1, 1.0, rng=np.random.default_rng(42))
    assert np.array_equal(a, b)


def test_rejects_length_mismatch():
    with pytest.raises(ValueError):
        prefill_noise(np.zeros(29), 3, 10, 0.1, 1.0)
