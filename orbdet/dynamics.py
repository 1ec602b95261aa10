"""Equations of motion of an Earth satellite and its variational equations."""

from __future__ import annotations

from .constants import (
    GM_JUPITER,
    GM_MARS,
    GM_MERCURY,
    GM_MOON,
    GM_NEPTUNE,
    GM_PLUTO,
    GM_SATURN,
    GM_SUN,
    GM_URANUS,
    GM_VENUS,
    MJD_J2000,
)
from .data import ForceModel
from .ephemeris import jpl_eph_de430
from .gravity import accel_harmonic, accel_point_mass, g_accel_harmonic
from .iers import Interpolation, iers
from .matrix import Matrix, transpose
from .nutation import gha_matrix, nut_matrix, prec_matrix
from .rotations import pole_matrix
from .timescales import mjday_tdb, timediff

__all__ = ["accel", "var_eqn"]

_SECONDS_PER_DAY = 86400


def _earth_rotation(x_pole: float, y_pole: float, mjd_ut1: float, mjd_tt: float) -> Matrix:
    """Transformation from the inertial to the Earth-fixed frame."""
    t = nut_matrix(mjd_tt) * prec_matrix(MJD_J2000, mjd_tt)
    return pole_matrix(x_pole, y_pole) * gha_matrix(mjd_ut1) * t


def _column(values) -> Matrix:
    return Matrix.from_rows([v] for v in values)


def accel(x: float, y: Matrix, model: ForceModel) -> Matrix:
    """Time derivative of the state ``y`` (position and velocity, 6 elements).

    ``x`` is the time in seconds since the epoch ``model.aux.mjd_utc``.
    Returns a 6x1 matrix of velocity and acceleration.
    """
    aux = model.aux
    eo = iers(model.eop, aux.mjd_utc + x / _SECONDS_PER_DAY, Interpolation.LINEAR)
    td = timediff(eo.ut1_utc, eo.tai_utc)
    mjd_ut1 = aux.mjd_utc + x / _SECONDS_PER_DAY + eo.ut1_utc / _SECONDS_PER_DAY
    mjd_tt = aux.mjd_utc + x / _SECONDS_PER_DAY + td.tt_utc / _SECONDS_PER_DAY

    e = _earth_rotation(eo.x_pole, eo.y_pole, mjd_ut1, mjd_tt)
    bodies = jpl_eph_de430(mjday_tdb(mjd_tt), model.pc)

    r = y.extract(1, 3)
    a = accel_harmonic(r, e, aux.n, aux.m, model.cnm, model.snm)

    perturbers = []
    if aux.sun:
        perturbers.append((bodies.sun, GM_SUN))
    if aux.moon:
        perturbers.append((bodies.moon, GM_MOON))
    if aux.planets:
        perturbers.extend(
            [
                (bodies.mercury, GM_MERCURY),
                (bodies.venus, GM_VENUS),
                (bodies.mars, GM_MARS),
                (bodies.jupiter, GM_JUPITER),
                (bodies.saturn, GM_SATURN),
                (bodies.uranus, GM_URANUS),
                (bodies.neptune, GM_NEPTUNE),
                (bodies.pluto, GM_PLUTO),
            ]
        )
    for body, gm in perturbers:
        a = a + transpose(accel_point_mass(r, transpose(body), gm))

    return _column([*y.extract(4, 6), *a])


def var_eqn(x: float, y_phi: Matrix, model: ForceModel) -> Matrix:
    """Derivative of the combined state and state transition matrix.

    ``y_phi`` holds 42 elements: position, velocity and the 6x6 transition
    matrix stored column by column. ``x`` is the time in seconds since
    ``model.aux.mjd_tt``. Returns a 42x1 matrix in the same layout.
    """
    aux = model.aux
    eo = iers(model.eop, aux.mjd_utc, Interpolation.LINEAR)
    td = timediff(eo.ut1_utc, eo.tai_utc)
    mjd_ut1 = aux.mjd_tt + (eo.ut1_utc - td.tt_utc) / _SECONDS_PER_DAY
    mjd_tt = aux.mjd_tt + x / _SECONDS_PER_DAY

    e = _earth_rotation(eo.x_pole, eo.y_pole, mjd_ut1, mjd_tt)

    r = y_phi.extract(1, 3)
    v = y_phi.extract(4, 6)
    phi = transpose(
        Matrix.from_rows(list(y_phi.extract(6 * i + 1, 6 * i + 6)) for i in range(1, 7))
    )

    a = accel_harmonic(r, e, aux.n, aux.m, model.cnm, model.snm)
    g = g_accel_harmonic(r, e, aux.n, aux.m, model.cnm, model.snm)

    upper = ([0.0] * 3 + [1.0 if k == i else 0.0 for k in range(3)] for i in range(3))
    lower = (list(g.row(i)) + [0.0] * 3 for i in range(1, 4))
    dfdy = Matrix.from_rows([*upper, *lower])

    phip = dfdy * phi
    return _column([*v, *a, *transpose(phip)])