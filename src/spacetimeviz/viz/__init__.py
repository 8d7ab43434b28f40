"""
Visualization utilities.

- 2D curve plots
- 3D point clouds
- Side-by-side mode overview
"""

from spacetimeviz.viz.plots import (
    CMAP_SPACETIME,
    plot_curve_2d,
    plot_point_cloud_3d,
    plot_state,
    plot_mode_overview,
    save_figure,
)

__all__ = [
    "CMAP_SPACETIME",
    "plot_curve_2d",
    "plot_point_cloud_3d",
    "plot_state",
    "plot_mode_overview",
    "save_figure",
]
