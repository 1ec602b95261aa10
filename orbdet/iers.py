"""Earth orientation parameters taken from IERS tables."""

from __future__ import annotations

import math
from enum import Enum
from typing import NamedTuple

from .constants import ARCS
from .matrix import Matrix, transpose

__all__ = [
    "EarthOrientation",
    "Interpolation",
    "MissingEopDataError",
    "iers",
]

# Rows of an EOP table (0-based), one column per day.
_MJD_ROW = 3
_FIRST_PARAMETER_ROW = 4
_TAI_UTC_ROW = 12


class MissingEopDataError(LookupError):
    """Raised when the EOP table holds no record for the requested day."""


class Interpolation(str, Enum):
    """How parameters between two daily records are obtained."""

    LINEAR = "l"
    NONE = "n"


class EarthOrientation(NamedTuple):
    """Earth orientation parameters; angles in radians, times in seconds."""

    x_pole: float
    y_pole: float
    ut1_utc: float
    lod: float
    dpsi: float
    deps: float
    dx_pole: float
    dy_pole: float
    tai_utc: float


def _from_values(values: list[float], tai_utc: float) -> EarthOrientation:
    x_pole, y_pole, ut1_utc, lod, dpsi, deps, dx_pole, dy_pole = values
    return EarthOrientation(
        x_pole=x_pole / ARCS,
        y_pole=y_pole / ARCS,
        ut1_utc=ut1_utc,
        lod=lod,
        dpsi=dpsi / ARCS,
        deps=deps / ARCS,
        dx_pole=dx_pole / ARCS,
        dy_pole=dy_pole / ARCS,
        tai_utc=tai_utc,
    )


def iers(
    eop: Matrix,
    mjd_utc: float,
    interp: Interpolation | str = Interpolation.NONE,
) -> EarthOrientation:
    """Earth orientation parameters for a UTC Modified Julian Date.

    ``eop`` holds one day per column with 13 rows; row 4 is the MJD, rows
    5 to 12 the pole coordinates, UT1-UTC, LOD, nutation corrections and
    pole offsets (angles in arcseconds), and row 13 TAI-UTC.
    With linear interpolation the record of the following day is used too.
    """
    mode = Interpolation(interp)
    mjd = math.floor(mjd_utc)
    records = transpose(eop).tolist()

    index = next(
        (i for i, record in enumerate(records) if record[_MJD_ROW] == mjd), None
    )
    if index is None:
        raise MissingEopDataError(f"MJD {mjd} not found in EOP data")

    current = records[index]
    params = current[_FIRST_PARAMETER_ROW:_TAI_UTC_ROW]

    if mode is Interpolation.LINEAR:
        if index + 1 >= len(records):
            raise MissingEopDataError(
                f"no EOP record after MJD {mjd} to interpolate with"
            )
        following = records[index + 1][_FIRST_PARAMETER_ROW:_TAI_UTC_ROW]
        fraction = mjd_utc - mjd
        params = [a + (b - a) * fraction for a, b in zip(params, following)]

    return _from_values(params, current[_TAI_UTC_ROW])