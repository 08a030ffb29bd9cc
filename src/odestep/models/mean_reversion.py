# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import math

from numba import njit


@njit(cache=True)
def mean_reversion(x, theta, mu):
    """Scalar mean-reverting drift theta * (mu - x).

    With additive noise this is the Ornstein-Uhlenbeck process
    dX = theta * (mu - X) dt + sigma dW.
    """
    return theta * (mu - x)


def stationary_std(theta, sigma):
    """Standard deviation of the stationary Ornstein-Uhlenbeck distribution."""
    if theta <= 0:
        raise ValueError(f"theta must be positive for a stationary state, got {theta}")
    return sigma / math.sqrt(2.0 * theta)
