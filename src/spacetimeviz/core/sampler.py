"""
Metric sampler: turns a ParameterSet into plottable points.

Two samplers, both pure:
- sample_2d: one value per integer x on [-10, 10] (21 points)
- sample_3d: one value per integer (i, j) on [-5, 5]² (121 points, row-major)

No state is kept between calls. Every call regenerates the sequence from
the ParameterSet, so identical inputs give bit-identical output.

The sampler keeps full float precision. The two-decimal text the chart
displays is produced on demand (DataPoint2D.y_text) with the same
rounding rules as JavaScript's toFixed(2).
"""

from __future__ import annotations
import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Iterator, Sequence

import numpy as np

from spacetimeviz.core.params import ParameterSet, check_mode
from spacetimeviz.core.fields import curvature_2d, curvature_3d, rotate
from spacetimeviz.core.warp import warp_height

DISPLAY_DECIMALS = 2
SCALE_3D = 20.0


@dataclass(frozen=True)
class GridDomain:
    """Inclusive integer sampling range start, start + step, ..., stop."""

    start: int
    stop: int
    step: int = 1

    def __post_init__(self):
        if self.step <= 0:
            raise ValueError(f"GridDomain step must be positive, got {self.step}")
        if self.start > self.stop:
            raise ValueError(
                f"GridDomain start {self.start} is greater than stop {self.stop}"
            )

    def coords(self) -> np.ndarray:
        """Grid coordinates in increasing order."""
        return np.arange(self.start, self.stop + 1, self.step, dtype=np.int64)

    def __iter__(self) -> Iterator[int]:
        return iter(int(c) for c in self.coords())

    def __len__(self) -> int:
        return (self.stop - self.start) // self.step + 1


DOMAIN_2D = GridDomain(-10, 10)
DOMAIN_3D = GridDomain(-5, 5)


def format_fixed(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Format like JavaScript's Number.prototype.toFixed.

    Rounds the exact binary value, ties away from zero. -0.0 prints as
    "0.00" but a small negative value prints as "-0.00".
    """
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        value = 0.0  # drop the sign of -0.0
    with localcontext() as ctx:
        # Wide enough for the exact expansion of any finite double
        ctx.prec = 800
        quantum = Decimal(1).scaleb(-decimals)
        return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class DataPoint2D:
    """One sample of a 2D curve."""

    x: int
    y: float

    @property
    def y_text(self) -> str:
        """y rounded to two decimals for display."""
        return format_fixed(self.y)

    def to_record(self) -> dict:
        """Chart record {"x": int, "y": "d.dd"}."""
        return {"x": self.x, "y": self.y_text}


@dataclass(frozen=True)
class DataPoint3D:
    """
    One sample of a 3D surface.

    (i, j) is the raw grid coordinate, (rot_x, rot_y) the rotated
    coordinate the field was evaluated at, z the field value.
    """

    i: int
    j: int
    z: float
    rot_x: float
    rot_y: float
    scale: float = SCALE_3D

    @property
    def raw(self) -> tuple[int, int, float]:
        return self.i, self.j, self.z

    @property
    def scaled(self) -> tuple[float, float, float]:
        """Coordinates in drawing units, as consumed by the projection."""
        return self.i * self.scale, self.j * self.scale, self.z * self.scale


def sample_2d(
    mode: str,
    params: ParameterSet,
    domain: GridDomain = DOMAIN_2D,
) -> list[DataPoint2D]:
    """
    Sample the 2D curve for `mode` on every grid x, in increasing x.

    Args:
        mode: "time", "tensor" or "warp"
        params: Slider snapshot (not clamped here)
        domain: Grid to sample, [-10, 10] by default

    Returns:
        List of DataPoint2D, one per grid coordinate
    """
    check_mode(mode)
    xs = domain.coords()

    if mode == "warp":
        ys = warp_height(xs, 0.0, params.warp_strength)
    else:
        ys = curvature_2d(mode, xs, params)

    return [DataPoint2D(int(x), float(y)) for x, y in zip(xs, ys)]


def sample_3d(
    mode: str,
    params: ParameterSet,
    domain: GridDomain = DOMAIN_3D,
    scale: float = SCALE_3D,
) -> list[DataPoint3D]:
    """
    Sample the 3D surface for `mode` over domain × domain.

    The grid is rotated by params.rotation_angle before evaluation, but
    the returned (i, j) stay on the unrotated grid. Points come out
    row-major: index k = i_index * len(domain) + j_index.

    Args:
        mode: "time", "tensor" or "warp"
        params: Slider snapshot (not clamped here)
        domain: Grid for both axes, [-5, 5] by default
        scale: Factor applied by DataPoint3D.scaled

    Returns:
        List of DataPoint3D
    """
    check_mode(mode)
    coords = domain.coords()
    # indexing="ij" keeps i on the outer loop once flattened
    ii, jj = np.meshgrid(coords, coords, indexing="ij")
    ii, jj = ii.ravel(), jj.ravel()

    rot_x, rot_y = rotate(ii, jj, params.rotation_angle)

    if mode == "warp":
        zs = warp_height(rot_x, rot_y, params.warp_strength)
    else:
        zs = curvature_3d(mode, rot_x, rot_y, params)

    return [
        DataPoint3D(int(i), int(j), float(z), float(rx), float(ry), scale)
        for i, j, z, rx, ry in zip(ii, jj, zs, rot_x, rot_y)
    ]


def points_to_array(
    points: Sequence[DataPoint2D] | Sequence[DataPoint3D],
    scaled: bool = True,
) -> np.ndarray:
    """
    Stack sampled points into an array for plotting.

    Returns:
        shape (N, 2) of (x, y) for 2D points, shape (N, 3) for 3D points
        (scaled drawing units unless scaled=False)
    """
    if len(points) == 0:
        return np.empty((0, 2), dtype=np.float64)
    if isinstance(points[0], DataPoint2D):
        return np.array([(p.x, p.y) for p in points], dtype=np.float64)
    return np.array(
        [p.scaled if scaled else p.raw for p in points], dtype=np.float64
    )
