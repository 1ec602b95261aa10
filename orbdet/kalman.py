"""Kalman filter measurement and time updates."""

from __future__ import annotations

from .matrix import Matrix, eye, transpose

__all__ = ["measurement_update", "time_update"]


def measurement_update(
    x: Matrix,
    z: float,
    g: float,
    s: float,
    g_matrix: Matrix,
    p: Matrix,
    n: int,
) -> tuple[Matrix, Matrix, Matrix]:
    """Update state and covariance with a scalar measurement.

    ``z`` is the observation, ``g`` its modelled value, ``s`` its standard
    deviation and ``g_matrix`` the 1xn partials. Returns ``(K, x, P)`` with
    the gain as a 1xn matrix and the updated state and covariance.
    """
    inv_w = s * s
    g_t = transpose(g_matrix)
    gain = p * g_t * (g_matrix * p * g_t + inv_w).inverse()
    k = transpose(gain)

    step = gain if x.shape == gain.shape else k
    x_new = x + step * (z - g)
    p_new = (eye(n) - gain * g_matrix) * p
    return k, x_new, p_new


def time_update(p: Matrix, phi: Matrix, qdt: float = 0.0) -> Matrix:
    """Propagate covariance ``p`` with transition matrix ``phi`` and process noise."""
    return phi * p * transpose(phi) + qdt