"""Orbit determination toolkit: matrices, frames, time scales, ephemerides, gravity and Kalman steps."""

__version__ = "0.1.0"