"""
Closed-form scalar fields for the time and tensor modes.

All functions take scalars or numpy arrays and broadcast. The 2D
variants are evaluated along a line x; the 3D variants take the rotated
grid coordinates and use the radius r = sqrt(x² + y²).

These are illustrative curves, not solutions of the field equations.
"""

from __future__ import annotations

import numpy as np

from spacetimeviz.core.params import ParameterSet


def time_sign(t: float) -> float:
    """Sign of the time value with sign(0) = +1."""
    return -1.0 if t < 0 else 1.0


def time_curvature_2d(x, t: float, lam: float):
    """y = sign(t)·(x - t)²/10 + Λ·cos(x/2)"""
    x = np.asarray(x, dtype=np.float64)
    return ((x - t) ** 2 / 10) * time_sign(t) + lam * np.cos(x / 2)


def tensor_curvature_2d(x, tensor: float, lam: float):
    """y = T·x²/10 + Λ·sin(x/2)"""
    x = np.asarray(x, dtype=np.float64)
    return (tensor * x ** 2 / 10) + lam * np.sin(x / 2)


def radius(x, y):
    """Distance from the grid origin."""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    return np.sqrt(x * x + y * y)


def time_curvature_3d(x, y, t: float, lam: float):
    """
    z = (r - t)²/5 + Λ·cos(r/2)

    Unlike the 2D curve there is no sign(t) factor: the surface is a
    bowl centred on the ring r = t for either sign of t.
    """
    r = radius(x, y)
    return (r - t) ** 2 / 5 + lam * np.cos(r / 2)


def tensor_curvature_3d(x, y, tensor: float, lam: float):
    """z = T·r²/5 + Λ·sin(r/2)"""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    r = radius(x, y)
    return (tensor * (x * x + y * y) / 5) + lam * np.sin(r / 2)


def rotate(x, y, angle_degrees: float):
    """
    Rotate grid coordinates counter-clockwise by `angle_degrees`.

    Returns:
        (rot_x, rot_y) with rot_x = x·cosθ - y·sinθ, rot_y = x·sinθ + y·cosθ
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    rad = angle_degrees * np.pi / 180
    cos_t, sin_t = np.cos(rad), np.sin(rad)
    return x * cos_t - y * sin_t, x * sin_t + y * cos_t


def curvature_2d(mode: str, x, params: ParameterSet):
    """Evaluate the 2D curve for `mode` ("time" or "tensor") at x."""
    if mode == "time":
        return time_curvature_2d(x, params.time, params.lam)
    elif mode == "tensor":
        return tensor_curvature_2d(x, params.tensor, params.lam)
    raise ValueError(f"Unknown mode: {mode}")


def curvature_3d(mode: str, x, y, params: ParameterSet):
    """Evaluate the 3D surface for `mode` ("time" or "tensor") at rotated (x, y)."""
    if mode == "time":
        return time_curvature_3d(x, y, params.time, params.lam)
    elif mode == "tensor":
        return tensor_curvature_3d(x, y, params.tensor, params.lam)
    raise ValueError(f"Unknown mode: {mode}")
