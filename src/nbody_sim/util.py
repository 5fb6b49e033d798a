# MIT License (see LICENSE)
"""
Vector math helpers for the simulation.

Vectors are float64 numpy arrays of shape (2,). They are immutable by
convention: every helper here returns a new array and leaves its arguments
untouched, so a vector can be shared freely between bodies, frames and
snapshots. Arithmetic (+, -, scalar * and /) is plain numpy.
"""
from __future__ import annotations

import numpy as np

Vec2 = np.ndarray  # Shape (2,), dtype float64


def f64(x) -> np.ndarray:
    """
    Convert any array-like to a float64 numpy array.

    Always copies, so callers never alias the input.
    """
    return np.array(x, dtype=np.float64)


def vec2(x, y: float | None = None) -> Vec2:
    """
    Build a 2D vector from two scalars or from a single array-like.

    Raises:
        ValueError: If the result is not shape (2,) or has non-finite components.
    """
    v = f64(x) if y is None else np.array([x, y], dtype=np.float64)
    if v.shape != (2,):
        raise ValueError(f"Expected a 2D vector, got shape {v.shape}")
    if not np.all(np.isfinite(v)):
        raise ValueError(f"Vector components must be finite, got {v.tolist()}")
    return v


def zero() -> Vec2:
    return np.zeros(2, dtype=np.float64)


def magnitude2(v: Vec2) -> float:
    """Squared magnitude of a 2D vector. Avoids sqrt."""
    return float(v[0] * v[0] + v[1] * v[1])


def magnitude(v: Vec2) -> float:
    """Magnitude (length) of a 2D vector."""
    return float(np.hypot(v[0], v[1]))


def normalized(v: Vec2, eps: float = 1e-12) -> Vec2:
    """
    Return a unit vector in the same direction as v.

    Returns the zero vector if |v| < eps to avoid division by zero.
    """
    n = magnitude(v)
    if n < eps:
        return zero()
    return v / n


def perpendicular(v: Vec2) -> Vec2:
    """Rotate v by +90 degrees (counterclockwise): (x, y) -> (-y, x)."""
    return np.array([-v[1], v[0]], dtype=np.float64)


def angle(v: Vec2) -> float:
    """Angle of v in radians, counterclockwise from +x, in (-pi, pi]."""
    return float(np.arctan2(v[1], v[0]))


def lerp(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Linear interpolation: a at t=0, b at t=1. t is not clamped."""
    return a + (b - a) * t


def rotate(v: Vec2, theta: float) -> Vec2:
    """Rotate v counterclockwise by theta radians."""
    c, s = np.cos(theta), np.sin(theta)
    return np.array([v[0] * c - v[1] * s, v[0] * s + v[1] * c], dtype=np.float64)
