"""
Drawing of sampled curves and point clouds.

- 2D: line chart of y against x with reference lines through the origin
- 3D: scatter of the scaled (20i, 20j, 20z) points on a matplotlib 3d axes,
  coloured by height

The helpers only draw what the sampler returns; they never evaluate
fields themselves.
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.figure import Figure
from matplotlib.axes import Axes

from spacetimeviz.core.params import MODES
from spacetimeviz.core.sampler import DataPoint2D, DataPoint3D, points_to_array, sample_2d

if TYPE_CHECKING:
    from spacetimeviz.controls.state import ControlState


def _create_spacetime_cmap():
    """Blue → violet → magenta, following the hue ramp hsl(240 + z, 70%, 50%)."""
    colors = [
        (0.150, 0.150, 0.850),   # Blue (hue 240)
        (0.400, 0.150, 0.850),   # Indigo
        (0.650, 0.150, 0.850),   # Violet
        (0.850, 0.150, 0.750),   # Magenta
        (0.850, 0.150, 0.400),   # Rose
    ]
    return LinearSegmentedColormap.from_list("spacetime", colors)


CMAP_SPACETIME = _create_spacetime_cmap()
LINE_COLOR = "#8884d8"

MODE_TITLES = {
    "time": "Time-based Curvature",
    "tensor": "Tensor-based Curvature",
    "warp": "Warp Bubble Profile",
}


def plot_curve_2d(
    points: Sequence[DataPoint2D],
    mode: str = "time",
    title: str | None = None,
    ax: Axes | None = None,
    figsize: tuple[float, float] = (8, 5),
    rounded: bool = True,
) -> tuple[Figure, Axes]:
    """
    Plot a sampled 2D curve.

    Args:
        points: Output of sample_2d
        mode: Mode the points were sampled in (used for the title)
        title: Plot title (defaults to the mode's name)
        ax: Existing axes to plot on (creates new figure if None)
        figsize: Figure size if creating new figure
        rounded: Plot the two-decimal display values instead of full precision

    Returns:
        (fig, ax) tuple
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    xs = [p.x for p in points]
    if rounded:
        ys = [float(p.y_text) for p in points]
    else:
        ys = [p.y for p in points]

    ax.plot(xs, ys, color=LINE_COLOR, linewidth=2.0)
    ax.axhline(y=0.0, color="#666666", linewidth=1.0)
    ax.axvline(x=0.0, color="#666666", linewidth=1.0)
    ax.grid(True, linestyle="--", alpha=0.5)

    ax.set_title(title if title is not None else MODE_TITLES.get(mode, mode))
    ax.set_xlabel("x")
    ax.set_ylabel("y")

    return fig, ax


def plot_point_cloud_3d(
    points: Sequence[DataPoint3D],
    mode: str = "time",
    title: str | None = None,
    ax: Axes | None = None,
    cmap=None,
    figsize: tuple[float, float] = (7, 7),
    colorbar: bool = True,
    marker_size: float = 12.0,
) -> tuple[Figure, Axes]:
    """
    Plot a sampled 3D point cloud in drawing units.

    Args:
        points: Output of sample_3d
        mode: Mode the points were sampled in (used for the title)
        title: Plot title (defaults to the mode's name)
        ax: Existing 3d axes (creates new figure if None)
        cmap: Colormap for height (defaults to CMAP_SPACETIME)
        colorbar: Whether to add a colorbar
        marker_size: Scatter marker size

    Returns:
        (fig, ax) tuple
    """
    if cmap is None:
        cmap = CMAP_SPACETIME

    if ax is None:
        fig = plt.figure(figsize=figsize)
        ax = fig.add_subplot(projection="3d")
    else:
        fig = ax.figure

    xyz = points_to_array(points, scaled=True)
    if xyz.shape[0] == 0:
        xyz = np.empty((0, 3), dtype=np.float64)

    sc = ax.scatter(
        xyz[:, 0], xyz[:, 1], xyz[:, 2],
        c=xyz[:, 2], cmap=cmap, s=marker_size, depthshade=True,
    )

    if colorbar and xyz.shape[0] > 0:
        fig.colorbar(sc, ax=ax, fraction=0.046, pad=0.08, label="20·z")

    ax.set_title(title if title is not None else MODE_TITLES.get(mode, mode))
    ax.set_xlabel("20·i")
    ax.set_ylabel("20·j")
    ax.set_zlabel("20·z")

    return fig, ax


def plot_state(
    state: "ControlState",
    ax: Axes | None = None,
    **kwargs,
) -> tuple[Figure, Axes]:
    """Sample the control state and draw it in its active view."""
    points = state.sample()
    if state.view == "2d":
        return plot_curve_2d(points, mode=state.mode, ax=ax, **kwargs)
    return plot_point_cloud_3d(points, mode=state.mode, ax=ax, **kwargs)


def plot_mode_overview(
    state: "ControlState",
    figsize: tuple[float, float] = (15, 4.5),
) -> Figure:
    """
    Plot the 2D curve of every mode side by side for the current sliders.

    Returns:
        Figure with three subplots
    """
    fig, axes = plt.subplots(1, len(MODES), figsize=figsize)
    for ax, mode in zip(axes, MODES):
        plot_curve_2d(sample_2d(mode, state.params), mode=mode, ax=ax)

    fig.tight_layout()
    return fig


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
