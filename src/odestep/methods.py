# Copyright (c) 2026 Shmuel Link
# SPDX-License-Identifier: MIT

"""Registry of the supported explicit time-stepping schemes."""

from enum import IntEnum


class Scheme(IntEnum):
    """Fixed-step explicit schemes.

    Integer values double as the numeric solver selector accepted on the
    command line. ``UNKNOWN`` is only ever produced by ``parse``; the
    steppers reject it.
    """

    EULER = 0
    HEUN = 1
    RK4 = 2
    UNKNOWN = 3

    @property
    def stages(self):
        """Vector-field evaluations per step."""
        return _STAGES[self]

    @property
    def order(self):
        """Formal order of accuracy."""
        return _ORDERS[self]


SCHEMES = (Scheme.EULER, Scheme.HEUN, Scheme.RK4)

_NAMES = {
    Scheme.EULER: "Euler",
    Scheme.HEUN: "Heun",
    Scheme.RK4: "RK4",
}
_STAGES = {Scheme.EULER: 1, Scheme.HEUN: 2, Scheme.RK4: 4, Scheme.UNKNOWN: 0}
_ORDERS = {Scheme.EULER: 1, Scheme.HEUN: 2, Scheme.RK4: 4, Scheme.UNKNOWN: 0}
_LOOKUP = {name.lower(): scheme for scheme, name in _NAMES.items()}


def parse(name):
    """Map a scheme name (any case) to a ``Scheme``.

    Returns ``Scheme.UNKNOWN`` for anything unrecognised, including
    non-string input. Never raises.
    """
    if not isinstance(name, str):
        return Scheme.UNKNOWN
    return _LOOKUP.get(name.strip().lower(), Scheme.UNKNOWN)


def display_name(scheme):
    """Canonical display name of a real scheme."""
    try:
        return _NAMES[scheme]
    except KeyError:
        raise ValueError(f"No display name for scheme {scheme!r}") from None
