# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

import json
import numpy as np


class _NumpyEncoder(json.JSONEncoder):
    def default(self, obj):
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.integer):
            return int(obj)
        return super().default(obj)


def save_run(result, path):
    with open(path, "w") as f:
        json.dump(result, f, cls=_NumpyEncoder, indent=2)


def load_run(path):
    with open(path, "r") as f:
        return json.load(f)


def save_trajectory(path, x, N, n, h, t0=0.0):
    """Write a time-major trajectory as text columns ``t x_0 ... x_{N-1}``.

    One row per time index; the format plots directly with gnuplot.
    """
    if x.size != N * n:
        raise ValueError(f"Trajectory has {x.size} values, expected N*n = {N * n}")
    t = t0 + h * np.arange(n)
    table = np.column_stack([t, np.reshape(x, (n, N))])
    header = "t " + " ".join(f"x{i}" for i in range(N))
    np.savetxt(path, table, fmt="%.17g", header=header)


def load_trajectory(path):
    """Read a file written by ``save_trajectory``.

    Returns:
        (t, states) with t of shape (n,) and states of shape (n, N).
    """
    table = np.loadtxt(path, ndmin=2)
    return table[:, 0], table[:, 1:]
