"""
Simplified warp bubble metric.

A Gaussian ring of radius 10·W stands in for the Alcubierre shape
function f(r). It is not the physical shape function and is not meant
to be: the profile is only used to draw a bubble-like bump.
"""

from __future__ import annotations
from dataclasses import dataclass

import numpy as np

WARP_SIGMA = 2.0
# Bubble wall thickness. Not used by the shape formula.
WARP_THICKNESS = 1.0
WARP_RADIUS_SCALE = 10.0


@dataclass(frozen=True)
class WarpMetric:
    """Shape function value and the (display-only) energy density."""

    shape: float | np.ndarray
    energy_density: float | np.ndarray


def warp_shape(x, y, warp_strength: float):
    """shape = exp(-(R - 10W)² / (2σ²)), R = sqrt(x² + y²)"""
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    R = np.sqrt(x * x + y * y)
    return np.exp(
        -((R - warp_strength * WARP_RADIUS_SCALE) ** 2)
        / (2 * WARP_SIGMA * WARP_SIGMA)
    )


def warp_metric(x, y, warp_strength: float) -> WarpMetric:
    """
    Evaluate the bubble at (x, y).

    Args:
        x, y: Point (or arrays of points) relative to the bubble centre
        warp_strength: W; sets both the ring radius (10·W) and, in the
            samplers, the amplitude

    Returns:
        WarpMetric with shape in (0, 1] and energy_density = -|W|·shape/(8π) ≤ 0
    """
    shape = warp_shape(x, y, warp_strength)
    energy_density = -abs(warp_strength) * shape / (8 * np.pi)
    if np.ndim(shape) == 0:
        return WarpMetric(float(shape), float(energy_density))
    return WarpMetric(shape, energy_density)


def warp_height(x, y, warp_strength: float):
    """Plotted height of the bubble: shape·W·5."""
    return warp_shape(x, y, warp_strength) * warp_strength * 5
