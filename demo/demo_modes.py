#!/usr/bin/env python3
"""
Demo: the three curvature modes in the 2D view.

For a few slider settings:
1. Sample the time, tensor and warp curves on x ∈ [-10, 10]
2. Print the two-decimal chart records and the status line
3. Save a side-by-side plot of all three modes
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from spacetimeviz.controls import ControlState
from spacetimeviz.core import sample_2d
from spacetimeviz.logging_config import setup_logging
from spacetimeviz.viz import plot_mode_overview, save_figure

SETTINGS = [
    {"time": 0.0, "tensor": 0.0, "lam": 0.0, "warp_strength": 0.0},
    {"time": 5.0, "tensor": 1.5, "lam": 2.0, "warp_strength": 0.5},
    {"time": -3.0, "tensor": -2.0, "lam": -1.5, "warp_strength": 0.8},
]


def main():
    setup_logging(logging.DEBUG)

    output_dir = Path("output/demo_modes")
    output_dir.mkdir(parents=True, exist_ok=True)

    print("=" * 60)
    print("  SPACETIME CURVATURE MODES (2D)")
    print("=" * 60)

    for n, setting in enumerate(SETTINGS):
        state = ControlState()
        for name, value in setting.items():
            state.set_parameter(name, value)

        print(f"\nSetting {n}: {state.params.as_dict()}")
        for mode in ("time", "tensor", "warp"):
            state.set_mode(mode)
            records = [p.to_record() for p in sample_2d(mode, state.params)]
            ys = ", ".join(r["y"] for r in records[::5])
            print(f"  {mode:>6}: y(x=-10,-5,0,5,10) = {ys}")
            print(f"          {state.status_message()}")

        fig = plot_mode_overview(state)
        output_path = output_dir / f"modes_{n}.png"
        save_figure(fig, output_path)
        plt.close(fig)
        print(f"   Saved: {output_path}")


if __name__ == "__main__":
    main()
