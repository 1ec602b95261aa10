"""Gravity field models: Legendre functions, spherical harmonics and point masses."""

from __future__ import annotations

import math

from .matrix import Matrix, transpose

__all__ = [
    "GM",
    "R_REF",
    "legendre",
    "accel_harmonic",
    "g_accel_harmonic",
    "accel_point_mass",
]

R_REF = 6378.1363e3
"""Reference radius of the gravity field model [m]."""
GM = 398600.4415e9
"""Gravitational coefficient of the gravity field model [m^3/s^2]."""

_GRADIENT_STEP = 1.0


def _vector3(v: Matrix, what: str) -> list[float]:
    if v.shape not in ((1, 3), (3, 1)):
        raise ValueError(f"{what} must be a 1x3 or 3x1 vector, got {v.n_row}x{v.n_column}")
    return list(v)


def legendre(n: int, m: int, fi: float) -> tuple[Matrix, Matrix]:
    """Fully normalised associated Legendre functions and their derivatives.

    Returns ``(pnm, dpnm)``, both (n+1)x(m+1), where element ``[i+1, j+1]``
    holds the function of degree ``i`` and order ``j`` at latitude ``fi``
    and its derivative with respect to ``fi``.
    """
    if n < 1 or m < n:
        raise ValueError(f"legendre needs 1 <= n <= m, got n={n}, m={m}")

    c, s = math.cos(fi), math.sin(fi)
    p = [[0.0] * (m + 1) for _ in range(n + 1)]
    dp = [[0.0] * (m + 1) for _ in range(n + 1)]

    p[0][0] = 1.0
    p[1][1] = math.sqrt(3) * c
    dp[1][1] = -math.sqrt(3) * s

    # Diagonal terms.
    for i in range(2, n + 1):
        factor = math.sqrt((2.0 * i + 1) / (2.0 * i))
        p[i][i] = factor * c * p[i - 1][i - 1]
    for i in range(2, n + 1):
        factor = math.sqrt((2.0 * i + 1) / (2.0 * i))
        dp[i][i] = factor * (c * dp[i - 1][i - 1] - s * p[i - 1][i - 1])

    # First sub-diagonal.
    for i in range(1, n + 1):
        p[i][i - 1] = math.sqrt(2.0 * i + 1) * s * p[i - 1][i - 1]
    for i in range(1, n + 1):
        dp[i][i - 1] = math.sqrt(2.0 * i + 1) * (c * p[i - 1][i - 1] + s * dp[i - 1][i - 1])

    # Remaining terms by recursion in degree.
    for j in range(m + 1):
        for i in range(j + 2, n + 1):
            a = math.sqrt((2.0 * i + 1) / ((i - j) * (i + j)))
            b = math.sqrt((i + j - 1) * (i - j - 1) / (2.0 * i - 3))
            p[i][j] = a * (math.sqrt(2.0 * i - 1) * s * p[i - 1][j] - b * p[i - 2][j])
    for j in range(m + 1):
        for i in range(j + 2, n + 1):
            a = math.sqrt((2.0 * i + 1) / ((i - j) * (i + j)))
            b = math.sqrt((i + j - 1) * (i - j - 1) / (2.0 * i - 3))
            root = math.sqrt(2.0 * i - 1)
            dp[i][j] = a * (
                root * s * dp[i - 1][j] + root * c * p[i - 1][j] - b * dp[i - 2][j]
            )

    return Matrix.from_rows(p), Matrix.from_rows(dp)


def accel_harmonic(
    r: Matrix,
    e: Matrix,
    n_max: int,
    m_max: int,
    cnm: Matrix,
    snm: Matrix,
) -> Matrix:
    """Acceleration [m/s^2] from a spherical harmonic gravity field.

    ``r`` is the inertial position (3 elements), ``e`` the transformation to
    the body-fixed frame, and ``cnm``/``snm`` the normalised coefficients with
    degree ``n`` and order ``m`` at ``[n+1, m+1]``. Returns a 3x1 matrix in
    the inertial frame.
    """
    r_col = Matrix.from_rows([v] for v in _vector3(r, "position"))
    x, y, z = e * r_col
    d = math.sqrt(x * x + y * y + z * z)

    latgc = math.asin(z / d)
    lon = math.atan2(y, x)
    pnm, dpnm = legendre(n_max, m_max, latgc)

    du_dr = 0.0
    du_dlat = 0.0
    du_dlon = 0.0
    for n in range(n_max + 1):
        scale = (R_REF / d) ** n
        b1 = (-GM / (d * d)) * scale * (n + 1)
        b2 = (GM / d) * scale
        q1 = q2 = q3 = 0.0
        for m in range(m_max + 1):
            cos_ml = math.cos(m * lon)
            sin_ml = math.sin(m * lon)
            c = cnm[n + 1, m + 1]
            s = snm[n + 1, m + 1]
            p = pnm[n + 1, m + 1]
            q1 += p * (c * cos_ml + s * sin_ml)
            q2 += dpnm[n + 1, m + 1] * (c * cos_ml + s * sin_ml)
            q3 += m * p * (s * cos_ml - c * sin_ml)
        du_dr += q1 * b1
        du_dlat += q2 * b2
        du_dlon += q3 * b2

    r2xy = x * x + y * y
    rxy = math.sqrt(r2xy)
    radial = du_dr / d - z / (d * d * rxy) * du_dlat
    ax = radial * x - du_dlon / r2xy * y
    ay = radial * y + du_dlon / r2xy * x
    az = du_dr / d * z + rxy / (d * d) * du_dlat

    return transpose(e) * Matrix.from_rows([[ax], [ay], [az]])


def g_accel_harmonic(
    r: Matrix,
    u: Matrix,
    n_max: int,
    m_max: int,
    cnm: Matrix,
    snm: Matrix,
) -> Matrix:
    """Gradient (3x3) of the harmonic acceleration with respect to position.

    Computed by central differences with a 1 m step.
    """
    base = _vector3(r, "position")
    columns = []
    for axis in range(3):
        offset = [_GRADIENT_STEP / 2 if k == axis else 0.0 for k in range(3)]
        plus = Matrix.from_rows([[b + o for b, o in zip(base, offset)]])
        minus = Matrix.from_rows([[b - o for b, o in zip(base, offset)]])
        da = accel_harmonic(plus, u, n_max, m_max, cnm, snm) - accel_harmonic(
            minus, u, n_max, m_max, cnm, snm
        )
        columns.append(list(da / _GRADIENT_STEP))
    return transpose(Matrix.from_rows(columns))


def accel_point_mass(r: Matrix, s: Matrix, gm: float) -> Matrix:
    """Perturbing acceleration of a point mass at ``s`` on a body at ``r``.

    Both positions are 1x3 matrices relative to the central body; the
    result is a 1x3 matrix [m/s^2].
    """
    if r.shape != (1, 3) or s.shape != (1, 3):
        raise ValueError("accel_point_mass: r and s must be 1x3 vectors")
    d = r - s
    return (d / d.norm() ** 3 + s / s.norm() ** 3) * (-gm)