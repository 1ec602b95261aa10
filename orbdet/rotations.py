"""Elementary rotation matrices and frames built from them."""

from __future__ import annotations

import math

from .matrix import Matrix

__all__ = ["r_x", "r_y", "r_z", "ltc", "pole_matrix"]


def r_x(angle: float) -> Matrix:
    """Rotation matrix for a rotation of ``angle`` radians about the x axis."""
    c, s = math.cos(angle), math.sin(angle)
    return Matrix.from_rows([[1.0, 0.0, 0.0], [0.0, c, s], [0.0, -s, c]])


def r_y(angle: float) -> Matrix:
    """Rotation matrix for a rotation of ``angle`` radians about the y axis."""
    c, s = math.cos(angle), math.sin(angle)
    return Matrix.from_rows([[c, 0.0, -s], [0.0, 1.0, 0.0], [s, 0.0, c]])


def r_z(angle: float) -> Matrix:
    """Rotation matrix for a rotation of ``angle`` radians about the z axis."""
    c, s = math.cos(angle), math.sin(angle)
    return Matrix.from_rows([[c, s, 0.0], [-s, c, 0.0], [0.0, 0.0, 1.0]])


def ltc(lon: float, lat: float) -> Matrix:
    """Transformation from Greenwich meridian system to local tangent coordinates.

    Rows are the east, north and zenith unit vectors.
    """
    m = r_y(-lat) * r_z(lon)
    first, second, third = m.row(1), m.row(2), m.row(3)
    m.set_row(1, second)
    m.set_row(2, third)
    m.set_row(3, first)
    return m


def pole_matrix(xp: float, yp: float) -> Matrix:
    """Transformation from pseudo Earth-fixed to Earth-fixed coordinates."""
    return r_y(-xp) * r_x(-yp)