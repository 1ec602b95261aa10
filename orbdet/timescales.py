"""Calendar dates, time scale differences and sidereal time."""

from __future__ import annotations

import math
from typing import NamedTuple

from .constants import MJD_J2000, PI2, RAD

__all__ = [
    "TimeDifferences",
    "mjday",
    "mjday_tdb",
    "frac",
    "timediff",
    "gmst",
    "mean_obliquity",
]


class TimeDifferences(NamedTuple):
    """Differences between time scales, in seconds."""

    ut1_tai: float
    utc_gps: float
    ut1_gps: float
    tt_utc: float
    gps_utc: float


def mjday(
    yr: int,
    mon: int,
    day: int,
    hr: int = 0,
    minute: int = 0,
    sec: float = 0.0,
) -> float:
    """Modified Julian Date of a calendar date and universal time."""
    jd = (
        367.0 * yr
        - math.floor((7 * (yr + math.floor((mon + 9) / 12.0))) * 0.25)
        + math.floor(275 * mon / 9.0)
        + day
        + 1721013.5
        + ((sec / 60.0 + minute) / 60.0 + hr) / 24.0
    )
    return jd - 2400000.5


def mjday_tdb(mjd_tt: float) -> float:
    """Modified Julian Date in Barycentric Dynamical Time from Terrestrial Time."""
    t_tt = (mjd_tt - 51544.5) / 36525
    return mjd_tt + (
        0.001658 * math.sin(628.3076 * t_tt + 6.2401)
        + 0.000022 * math.sin(575.3385 * t_tt + 4.2970)
        + 0.000014 * math.sin(1256.6152 * t_tt + 6.1969)
        + 0.000005 * math.sin(606.9777 * t_tt + 4.0212)
        + 0.000005 * math.sin(52.9691 * t_tt + 0.4444)
        + 0.000002 * math.sin(21.3299 * t_tt + 5.5431)
        + 0.000010 * math.sin(628.3076 * t_tt + 4.2490)
    ) / 86400


def frac(x: float) -> float:
    """Fractional part of ``x``: ``x - floor(x)``."""
    return x - math.floor(x)


def timediff(ut1_utc: float, tai_utc: float) -> TimeDifferences:
    """Time differences derived from UT1-UTC and TAI-UTC [s]."""
    tt_tai = 32.184
    gps_tai = -19.0
    ut1_tai = ut1_utc - tai_utc
    utc_tai = -tai_utc
    return TimeDifferences(
        ut1_tai=ut1_tai,
        utc_gps=utc_tai - gps_tai,
        ut1_gps=ut1_tai - gps_tai,
        tt_utc=tt_tai - utc_tai,
        gps_utc=gps_tai - utc_tai,
    )


def gmst(mjd_ut1: float) -> float:
    """Greenwich Mean Sidereal Time [rad] for a UT1 Modified Julian Date."""
    secs = 86400
    mjd_0 = math.floor(mjd_ut1)
    ut1 = secs * (mjd_ut1 - mjd_0)
    t_0 = (mjd_0 - MJD_J2000) / 36525
    t = (mjd_ut1 - MJD_J2000) / 36525
    seconds = (
        24110.54841
        + 8640184.812866 * t_0
        + 1.002737909350795 * ut1
        + (0.093104 - 6.2e-6 * t) * t * t
    )
    return PI2 * frac(seconds / secs)


def mean_obliquity(mjd_tt: float) -> float:
    """Mean obliquity of the ecliptic [rad]."""
    t = (mjd_tt - MJD_J2000) / 36525
    return RAD * (84381.448 / 3600 - (46.8150 + (0.00059 - 0.001813 * t) * t) * t / 3600)