# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

from dataclasses import dataclass

import numpy as np

from odestep.methods import Scheme


@dataclass(frozen=True)
class ButcherTableau:
    """Coefficients of an explicit Runge-Kutta scheme.

        c_1 |
        c_2 | a_21
        ... | ...
        c_s | a_s1  ...  a_s,s-1
        ----+---------------------
            | b_1   ...  b_s

    Stage j probes the vector field at u + h * sum_{m<j} a_jm k_m, and the
    step increment is h * sum_j b_j k_j.

    Attributes:
        name: display name of the scheme
        a: strictly lower-triangular stage matrix, shape (s, s)
        b: combination weights, shape (s,)
        c: nodes, shape (s,). Vector fields here are autonomous, so the
            nodes are informational; they still satisfy c_j = sum_m a_jm.
        order: formal order of accuracy
    """

    name: str
    a: np.ndarray
    b: np.ndarray
    c: np.ndarray
    order: int

    @property
    def stages(self):
        return len(self.b)


def _tableau(name, a, b, order):
    a = np.array(a, dtype=np.float64)
    b = np.array(b, dtype=np.float64)
    if a.shape != (len(b), len(b)):
        raise ValueError(f"Stage matrix must be {len(b)}x{len(b)}, got {a.shape}")
    if np.any(np.triu(a) != 0.0):
        raise ValueError("Stage matrix must be strictly lower triangular (explicit scheme)")
    c = a.sum(axis=1)
    a.setflags(write=False)
    b.setflags(write=False)
    c.setflags(write=False)
    return ButcherTableau(name=name, a=a, b=b, c=c, order=order)


EULER = _tableau("Euler", [[0.0]], [1.0], order=1)

HEUN = _tableau(
    "Heun",
    [[0.0, 0.0],
     [1.0, 0.0]],
    [0.5, 0.5],
    order=2,
)

RK4 = _tableau(
    "RK4",
    [[0.0, 0.0, 0.0, 0.0],
     [0.5, 0.0, 0.0, 0.0],
     [0.0, 0.5, 0.0, 0.0],
     [0.0, 0.0, 1.0, 0.0]],
    [1.0 / 6.0, 1.0 / 3.0, 1.0 / 3.0, 1.0 / 6.0],
    order=4,
)

_TABLEAUX = {Scheme.EULER: EULER, Scheme.HEUN: HEUN, Scheme.RK4: RK4}


def tableau_for(scheme):
    """Return the Butcher tableau of a real scheme."""
    try:
        return _TABLEAUX[scheme]
    except KeyError:
        raise ValueError(f"Unknown scheme: {scheme!r}") from None
