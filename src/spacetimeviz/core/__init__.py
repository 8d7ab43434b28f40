"""
Sampling engine.

Pure functions only: no clamping, no I/O, no state between calls.
- params: ParameterSet snapshot, slider ranges, mode names
- fields: time and tensor curvature formulas, grid rotation
- warp: simplified warp bubble shape and energy density
- sampler: 2D curve and 3D point-cloud samplers
"""

from spacetimeviz.core.params import (
    Mode,
    ViewMode,
    MODES,
    VIEW_MODES,
    ParameterRange,
    ParameterSet,
    PARAMETER_RANGES,
    default_parameters,
)
from spacetimeviz.core.warp import WarpMetric, warp_metric, WARP_SIGMA, WARP_THICKNESS
from spacetimeviz.core.sampler import (
    GridDomain,
    DataPoint2D,
    DataPoint3D,
    DOMAIN_2D,
    DOMAIN_3D,
    SCALE_3D,
    sample_2d,
    sample_3d,
    format_fixed,
    points_to_array,
)

__all__ = [
    "Mode",
    "ViewMode",
    "MODES",
    "VIEW_MODES",
    "ParameterRange",
    "ParameterSet",
    "PARAMETER_RANGES",
    "default_parameters",
    "WarpMetric",
    "warp_metric",
    "WARP_SIGMA",
    "WARP_THICKNESS",
    "GridDomain",
    "DataPoint2D",
    "DataPoint3D",
    "DOMAIN_2D",
    "DOMAIN_3D",
    "SCALE_3D",
    "sample_2d",
    "sample_3d",
    "format_fixed",
    "points_to_array",
]
