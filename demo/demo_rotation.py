#!/usr/bin/env python3
"""
Demo: auto-rotating 3D point cloud.

Drives the animation loop by hand: every tick advances the grid
rotation by one degree, and every 45th frame is saved as a PNG.
"""

import logging
from pathlib import Path

import matplotlib.pyplot as plt

from spacetimeviz.controls import ControlState
from spacetimeviz.logging_config import setup_logging
from spacetimeviz.viz import plot_state, save_figure


def main(mode: str = "warp", n_frames: int = 360, save_every: int = 45):
    logger = setup_logging(logging.INFO)

    state = ControlState(view="3d", mode=mode)
    state.set_parameter("warp_strength", 0.3)
    state.set_parameter("tensor", 1.0)
    state.set_parameter("time", 2.0)
    state.set_parameter("lam", 1.0)
    state.toggle_animation()

    output_dir = Path("output/demo_rotation")
    output_dir.mkdir(parents=True, exist_ok=True)

    for frame in range(n_frames):
        if frame % save_every == 0:
            fig, _ = plot_state(state)
            output_path = output_dir / f"{mode}_{int(state.params.rotation_angle):03d}.png"
            save_figure(fig, output_path)
            plt.close(fig)
            logger.info("Saved %s", output_path)
        state.tick()

    logger.info("Final angle after %d frames: %s", n_frames, state.params.rotation_angle)
    print(state.status_message())


if __name__ == "__main__":
    main()
