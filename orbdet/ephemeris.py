"""Chebyshev approximation and planetary ephemerides from DE430 coefficients."""

from __future__ import annotations

import math
from collections.abc import Iterable
from dataclasses import dataclass
from typing import NamedTuple

from .matrix import Matrix, transpose

__all__ = [
    "BodyPositions",
    "EphemerisRangeError",
    "cheb3d",
    "jpl_eph_de430",
]

_EMRAT = 81.30056907419062
_EMRAT1 = 1.0 / (1.0 + _EMRAT)
_RECORD_DAYS = 32.0
_JD_OFFSET = 2400000.5


class EphemerisRangeError(LookupError):
    """Raised when no coefficient record covers the requested epoch."""


class BodyPositions(NamedTuple):
    """Geocentric equatorial positions [m] as 3x1 matrices."""

    mercury: Matrix
    venus: Matrix
    earth: Matrix
    mars: Matrix
    jupiter: Matrix
    saturn: Matrix
    uranus: Matrix
    neptune: Matrix
    pluto: Matrix
    moon: Matrix
    sun: Matrix


@dataclass(frozen=True)
class _Layout:
    """Where a body's coefficients sit in a DE430 record (1-based column)."""

    start: int
    n_coeff: int
    subintervals: int


_LAYOUTS = {
    "mercury": _Layout(3, 14, 4),
    "venus": _Layout(171, 10, 2),
    "earth": _Layout(231, 13, 2),
    "mars": _Layout(309, 11, 1),
    "jupiter": _Layout(342, 8, 1),
    "saturn": _Layout(366, 7, 1),
    "uranus": _Layout(387, 6, 1),
    "neptune": _Layout(405, 6, 1),
    "pluto": _Layout(423, 6, 1),
    "moon": _Layout(441, 13, 8),
    "sun": _Layout(753, 11, 2),
}


def cheb3d(
    t: float,
    n: int,
    ta: float,
    tb: float,
    cx: Iterable[float],
    cy: Iterable[float],
    cz: Iterable[float],
) -> Matrix:
    """Evaluate an ``n``-term Chebyshev approximation of a 3D vector on [ta, tb].

    Returns a 1x3 matrix.
    """
    if t < ta or tb < t:
        raise ValueError(f"time {t} out of range [{ta}, {tb}]")

    tau = (2 * t - ta - tb) / (tb - ta)
    coeffs = (list(cx), list(cy), list(cz))
    f1 = [0.0, 0.0, 0.0]
    f2 = [0.0, 0.0, 0.0]

    for i in range(n - 1, 0, -1):
        f1, f2 = [2 * tau * a - b + c[i] for a, b, c in zip(f1, f2, coeffs)], f1

    return Matrix.from_rows([[tau * a - b + c[0] for a, b, c in zip(f1, f2, coeffs)]])


def _body_position(
    record: list[float], t1: float, mjd_tdb: float, layout: _Layout
) -> Matrix:
    length = _RECORD_DAYS / layout.subintervals
    dt = mjd_tdb - t1
    if dt <= length:
        j = 0
    else:
        j = min(layout.subintervals - 1, math.ceil(dt / length) - 1)

    n = layout.n_coeff
    base = layout.start - 1 + 3 * n * j
    cx = record[base : base + n]
    cy = record[base + n : base + 2 * n]
    cz = record[base + 2 * n : base + 3 * n]
    mjd0 = t1 + length * j
    return transpose(cheb3d(mjd_tdb, n, mjd0, mjd0 + length, cx, cy, cz)) * 1e3


def jpl_eph_de430(mjd_tdb: float, pc: Matrix) -> BodyPositions:
    """Positions of the planets, Moon and Sun relative to the Earth.

    ``pc`` holds DE430 coefficient records, one per row; columns 1 and 2 are
    the Julian dates the record covers.
    """
    jd = mjd_tdb + _JD_OFFSET
    record = next((row for row in pc.tolist() if row[0] <= jd <= row[1]), None)
    if record is None:
        raise EphemerisRangeError(f"no coefficient record covers JD {jd}")

    t1 = record[0] - _JD_OFFSET
    raw = {
        name: _body_position(record, t1, mjd_tdb, layout)
        for name, layout in _LAYOUTS.items()
    }

    moon = raw.pop("moon")
    earth = raw.pop("earth") - moon * _EMRAT1
    relative = {name: position - earth for name, position in raw.items()}
    return BodyPositions(earth=earth, moon=moon, **relative)