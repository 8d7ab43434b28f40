"""
Presentation-layer state.

Owns what the sliders, selectors and rotate button hold, and is the
only place parameters are clamped before they reach the sampler.
"""

from spacetimeviz.controls.state import (
    ControlState,
    WARP_WARNING_THRESHOLD,
    format_number,
)

__all__ = [
    "ControlState",
    "WARP_WARNING_THRESHOLD",
    "format_number",
]
