"""Geodetic positions and topocentric angles."""

from __future__ import annotations

import math

from .constants import F_EARTH, PI2, R_EARTH
from .matrix import Matrix

__all__ = ["position", "az_el_pa"]


def position(lon: float, lat: float, h: float) -> Matrix:
    """Earth-fixed position (1x3, metres) from geodetic longitude, latitude and height."""
    e2 = F_EARTH * (2.0 - F_EARTH)
    cos_lat = math.cos(lat)
    sin_lat = math.sin(lat)
    n = R_EARTH / math.sqrt(1.0 - e2 * sin_lat * sin_lat)
    return Matrix.from_rows(
        [[
            (n + h) * cos_lat * math.cos(lon),
            (n + h) * cos_lat * math.sin(lon),
            ((1.0 - e2) * n + h) * sin_lat,
        ]]
    )


def az_el_pa(s: Matrix) -> tuple[float, float, Matrix, Matrix]:
    """Azimuth, elevation and their partials from a 1x3 local tangent vector.

    Returns ``(az, el, dAds, dEds)`` with angles in radians.
    """
    sx, sy, sz = s[1, 1], s[1, 2], s[1, 3]
    rho = math.sqrt(sx * sx + sy * sy)

    az = math.atan2(sx, sy)
    if az < 0.0:
        az += PI2
    el = math.atan(sz / rho)

    d_ads = Matrix.from_rows([[sy / (rho * rho), -sx / (rho * rho), 0.0]])
    d_eds = Matrix.from_rows([[-sx * sz / rho, -sy * sz / rho, rho]]) / s.dot(s)
    return az, el, d_ads, d_eds