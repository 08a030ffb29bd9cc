# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Stochastic forcing for trajectories integrated with additive write-back.

``prefill_noise`` fills slots 1..n-1 with Wiener increments. Running
``integrate`` with the Euler scheme afterwards adds the drift on top, which
gives the Euler-Maruyama scheme for additive noise:

    x[k+1] = x[k] + h * f(x[k]) + sigma * sqrt(h) * xi_k
"""

import logging
import math

import numpy as np

logger = logging.getLogger(__name__)


def prefill_noise(x, N, n, h, sigma, rng=None, seed=None):
    """Overwrite slots 1..n-1 of a time-major trajectory with scaled noise.

    Args:
        x: float64 trajectory, flat of length N*n or shape (n, N).
        N: state dimension.
        n: number of time indices.
        h: step size; increments are scaled by sqrt(|h|).
        sigma: noise amplitude, scalar or length-N array.
        rng: numpy Generator. Created from ``seed`` when omitted.
        seed: seed for ``np.random.default_rng`` when ``rng`` is None.

    Returns:
        x, with slot 0 untouched.
    """
    if x.size != N * n:
        raise ValueError(f"Trajectory has {x.size} values, expected N*n = {N * n}")
    if rng is None:
        rng = np.random.default_rng(seed)
        logger.debug("Noise generator seeded with %s", seed)

    traj = x.reshape(n, N)
    if n > 1:
        scale = np.asarray(sigma, dtype=np.float64) * math.sqrt(abs(h))
        traj[1:] = scale * rng.standard_normal((n - 1, N))
    return x
