"""Kepler's equation and small numeric helpers."""

from __future__ import annotations

import math
import sys

from .constants import PI

__all__ = ["ConvergenceError", "ecc_anom", "sign"]

_MAX_ITERATIONS = 15
_EPSILON = 1e2 * sys.float_info.epsilon


class ConvergenceError(RuntimeError):
    """Raised when an iteration fails to converge."""


def ecc_anom(m: float, e: float) -> float:
    """Eccentric anomaly [rad] for mean anomaly ``m`` [rad] and eccentricity ``e``.

    Solves Kepler's equation by Newton's method.
    """
    m = math.fmod(m, 2.0 * PI)
    big_e = m if e < 0.8 else PI

    f = big_e - e * math.sin(big_e) - m
    big_e -= f / (1.0 - e * math.cos(big_e))

    iterations = 1
    while abs(f) > 1e2 * _EPSILON:
        f = big_e - e * math.sin(big_e) - m
        big_e -= f / (1.0 - e * math.cos(big_e))
        iterations += 1
        if iterations == _MAX_ITERATIONS:
            raise ConvergenceError("convergence problems in eccentric anomaly")
    return big_e


def sign(a: float, b: float) -> float:
    """The absolute value of ``a`` with the sign of ``b``."""
    return abs(a) if b >= 0.0 else -abs(a)