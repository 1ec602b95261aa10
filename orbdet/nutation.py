"""Precession, nutation and Greenwich hour angle transformations."""

from __future__ import annotations

import math

from .constants import ARCS, MJD_J2000, PI2
from .matrix import Matrix
from .rotations import r_x, r_y, r_z
from .timescales import gmst, mean_obliquity

__all__ = [
    "nut_angles",
    "eqn_equinox",
    "nut_matrix",
    "prec_matrix",
    "gast",
    "gha_matrix",
]

# IAU 1980 nutation series:
# l, l', F, D, Om, dpsi, dpsi*T, deps, deps*T  (units of 1e-5 arcsec)
_NUTATION_TERMS = (
    (0, 0, 0, 0, 1, -1719960, -1742, 920250, 89),
    (0, 0, 0, 0, 2, 20620, 2, -8950, 5),
    (-2, 0, 2, 0, 1, 460, 0, -240, 0),
    (2, 0, -2, 0, 0, 110, 0, 0, 0),
    (-2, 0, 2, 0, 2, -30, 0, 10, 0),
    (1, -1, 0, -1, 0, -30, 0, 0, 0),
    (0, -2, 2, -2, 1, -20, 0, 10, 0),
    (2, 0, -2, 0, 1, 10, 0, 0, 0),
    (0, 0, 2, -2, 2, -131870, -16, 57360, -31),
    (0, 1, 0, 0, 0, 14260, -34, 540, -1),
    (0, 1, 2, -2, 2, -5170, 12, 2240, -6),
    (0, -1, 2, -2, 2, 2170, -5, -950, 3),
    (0, 0, 2, -2, 1, 1290, 1, -700, 0),
    (2, 0, 0, -2, 0, 480, 0, 10, 0),
    (0, 0, 2, -2, 0, -220, 0, 0, 0),
    (0, 2, 0, 0, 0, 170, -1, 0, 0),
    (0, 1, 0, 0, 1, -150, 0, 90, 0),
    (0, 2, 2, -2, 2, -160, 1, 70, 0),
    (0, -1, 0, 0, 1, -120, 0, 60, 0),
    (-2, 0, 0, 2, 1, -60, 0, 30, 0),
    (0, -1, 2, -2, 1, -50, 0, 30, 0),
    (2, 0, 0, -2, 1, 40, 0, -20, 0),
    (0, 1, 2, -2, 1, 40, 0, -20, 0),
    (1, 0, 0, -1, 0, -40, 0, 0, 0),
    (2, 1, 0, -2, 0, 10, 0, 0, 0),
    (0, 0, -2, 2, 1, 10, 0, 0, 0),
    (0, 1, -2, 2, 0, -10, 0, 0, 0),
    (0, 1, 0, 0, 2, 10, 0, 0, 0),
    (-1, 0, 0, 1, 1, 10, 0, 0, 0),
    (0, 1, 2, -2, 0, -10, 0, 0, 0),
    (0, 0, 2, 0, 2, -22740, -2, 9770, -5),
    (1, 0, 0, 0, 0, 7120, 1, -70, 0),
    (0, 0, 2, 0, 1, -3860, -4, 2000, 0),
    (1, 0, 2, 0, 2, -3010, 0, 1290, -1),
    (1, 0, 0, -2, 0, -1580, 0, -10, 0),
    (-1, 0, 2, 0, 2, 1230, 0, -530, 0),
    (0, 0, 0, 2, 0, 630, 0, -20, 0),
    (1, 0, 0, 0, 1, 630, 1, -330, 0),
    (-1, 0, 0, 0, 1, -580, -1, 320, 0),
    (-1, 0, 2, 2, 2, -590, 0, 260, 0),
    (1, 0, 2, 0, 1, -510, 0, 270, 0),
    (0, 0, 2, 2, 2, -380, 0, 160, 0),
    (2, 0, 0, 0, 0, 290, 0, -10, 0),
    (1, 0, 2, -2, 2, 290, 0, -120, 0),
    (2, 0, 2, 0, 2, -310, 0, 130, 0),
    (0, 0, 2, 0, 0, 260, 0, -10, 0),
    (-1, 0, 2, 0, 1, 210, 0, -100, 0),
    (-1, 0, 0, 2, 1, 160, 0, -80, 0),
    (1, 0, 0, -2, 1, -130, 0, 70, 0),
    (-1, 0, 2, 2, 1, -100, 0, 50, 0),
    (1, 1, 0, -2, 0, -70, 0, 0, 0),
    (0, 1, 2, 0, 2, 70, 0, -30, 0),
    (0, -1, 2, 0, 2, -70, 0, 30, 0),
    (1, 0, 2, 2, 2, -80, 0, 30, 0),
    (1, 0, 0, 2, 0, 60, 0, 0, 0),
    (2, 0, 2, -2, 2, 60, 0, -30, 0),
    (0, 0, 0, 2, 1, -60, 0, 30, 0),
    (0, 0, 2, 2, 1, -70, 0, 30, 0),
    (1, 0, 2, -2, 1, 60, 0, -30, 0),
    (0, 0, 0, -2, 1, -50, 0, 30, 0),
    (1, -1, 0, 0, 0, 50, 0, 0, 0),
    (2, 0, 2, 0, 1, -50, 0, 30, 0),
    (0, 1, 0, -2, 0, -40, 0, 0, 0),
    (1, 0, -2, 0, 0, 40, 0, 0, 0),
    (0, 0, 0, 1, 0, -40, 0, 0, 0),
    (1, 1, 0, 0, 0, -30, 0, 0, 0),
    (1, 0, 2, 0, 0, 30, 0, 0, 0),
    (1, -1, 2, 0, 2, -30, 0, 10, 0),
    (-1, -1, 2, 2, 2, -30, 0, 10, 0),
    (-2, 0, 0, 0, 1, -20, 0, 10, 0),
    (3, 0, 2, 0, 2, -30, 0, 10, 0),
    (0, -1, 2, 2, 2, -30, 0, 10, 0),
    (1, 1, 2, 0, 2, 20, 0, -10, 0),
    (-1, 0, 2, -2, 1, -20, 0, 10, 0),
    (2, 0, 0, 0, 1, 20, 0, -10, 0),
    (1, 0, 0, 0, 2, -20, 0, 10, 0),
    (3, 0, 0, 0, 0, 20, 0, 0, 0),
    (0, 0, 2, 1, 2, 20, 0, -10, 0),
    (-1, 0, 0, 0, 2, 10, 0, -10, 0),
    (1, 0, 0, -4, 0, -10, 0, 0, 0),
    (-2, 0, 2, 2, 2, 10, 0, -10, 0),
    (-1, 0, 2, 4, 2, -20, 0, 10, 0),
    (2, 0, 0, -4, 0, -10, 0, 0, 0),
    (1, 1, 2, -2, 2, 10, 0, -10, 0),
    (1, 0, 2, 2, 1, -10, 0, 10, 0),
    (-2, 0, 2, 4, 2, -10, 0, 10, 0),
    (-1, 0, 4, 0, 2, 10, 0, 0, 0),
    (1, -1, 0, -2, 0, 10, 0, 0, 0),
    (2, 0, 2, -2, 1, 10, 0, -10, 0),
    (2, 0, 2, 2, 2, -10, 0, 0, 0),
    (1, 0, 0, 2, 1, -10, 0, 0, 0),
    (0, 0, 4, -2, 2, 10, 0, 0, 0),
    (3, 0, 2, -2, 2, 10, 0, 0, 0),
    (1, 0, 2, -2, 0, -10, 0, 0, 0),
    (0, 1, 2, 0, 1, 10, 0, 0, 0),
    (-1, -1, 0, 2, 1, 10, 0, 0, 0),
    (0, 0, -2, 0, 1, -10, 0, 0, 0),
    (0, 0, 2, -1, 2, -10, 0, 0, 0),
    (0, 1, 0, 2, 0, -10, 0, 0, 0),
    (1, 0, -2, -2, 0, -10, 0, 0, 0),
    (0, -1, 2, 0, 1, -10, 0, 0, 0),
    (1, 1, 0, -2, 1, -10, 0, 0, 0),
    (1, 0, -2, 2, 0, -10, 0, 0, 0),
    (2, 0, 0, 2, 0, 10, 0, 0, 0),
    (0, 0, 2, 4, 2, -10, 0, 0, 0),
    (0, 1, 0, 1, 0, 10, 0, 0, 0),
)

_REV = 360 * 3600


def _fundamental_argument(value: float) -> float:
    """Reduce an angle in arcseconds to one revolution, keeping its sign."""
    return math.modf(value / _REV)[0] * _REV


def nut_angles(mjd_tt: float) -> tuple[float, float]:
    """Nutation in longitude and obliquity [rad] (IAU 1980)."""
    t = (mjd_tt - MJD_J2000) / 36525
    t2 = t * t
    t3 = t2 * t

    l = _fundamental_argument(
        485866.733 + (1325.0 * _REV + 715922.633) * t + 31.310 * t2 + 0.064 * t3
    )
    lp = _fundamental_argument(
        1287099.804 + (99.0 * _REV + 1292581.224) * t - 0.577 * t2 - 0.012 * t3
    )
    f = _fundamental_argument(
        335778.877 + (1342.0 * _REV + 295263.137) * t - 13.257 * t2 + 0.011 * t3
    )
    d = _fundamental_argument(
        1072261.307 + (1236.0 * _REV + 1105601.328) * t - 6.891 * t2 + 0.019 * t3
    )
    om = _fundamental_argument(
        450160.280 - (5.0 * _REV + 482890.539) * t + 7.455 * t2 + 0.008 * t3
    )

    dpsi = 0.0
    deps = 0.0
    for cl, clp, cf, cd, com, ps, pst, ep, ept in _NUTATION_TERMS:
        arg = (cl * l + clp * lp + cf * f + cd * d + com * om) / ARCS
        dpsi += (ps + pst * t) * math.sin(arg)
        deps += (ep + ept * t) * math.cos(arg)

    return 1.0e-5 * dpsi / ARCS, 1.0e-5 * deps / ARCS


def eqn_equinox(mjd_tt: float) -> float:
    """Equation of the equinoxes [rad]."""
    dpsi, _ = nut_angles(mjd_tt)
    return dpsi * math.cos(mean_obliquity(mjd_tt))


def nut_matrix(mjd_tt: float) -> Matrix:
    """Transformation from mean to true equator and equinox."""
    eps = mean_obliquity(mjd_tt)
    dpsi, deps = nut_angles(mjd_tt)
    return r_x(-eps - deps) * r_z(-dpsi) * r_x(eps)


def prec_matrix(mjd_1: float, mjd_2: float) -> Matrix:
    """Precession transformation of equatorial coordinates from epoch 1 to epoch 2."""
    t = (mjd_1 - MJD_J2000) / 36525
    dt = (mjd_2 - mjd_1) / 36525

    zeta = (
        (2306.2181 + (1.39656 - 0.000139 * t) * t)
        + ((0.30188 - 0.000344 * t) + 0.017998 * dt) * dt
    ) * dt / ARCS
    z = zeta + ((0.79280 + 0.000411 * t) + 0.000205 * dt) * dt * dt / ARCS
    theta = (
        (2004.3109 - (0.85330 + 0.000217 * t) * t)
        - ((0.42665 + 0.000217 * t) + 0.041833 * dt) * dt
    ) * dt / ARCS

    return r_z(-z) * r_y(theta) * r_z(-zeta)


def gast(mjd_ut1: float) -> float:
    """Greenwich Apparent Sidereal Time [rad]."""
    return math.fmod(gmst(mjd_ut1) + eqn_equinox(mjd_ut1), PI2)


def gha_matrix(mjd_ut1: float) -> Matrix:
    """Transformation from true equator and equinox to Earth equator and Greenwich meridian."""
    return r_z(gast(mjd_ut1))