"""
ControlState: what the widget's controls currently hold.

The sampler is pure and never clamps, so every change goes through
here first:
- slider values are clamped to their range and snapped to the step
- rotation wraps modulo 360 instead of clamping
- the ParameterSet is replaced on each change, never mutated

The animation loop is modelled as repeated tick() calls, one per frame.
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field

from spacetimeviz.core.params import (
    ParameterSet,
    PARAMETER_RANGES,
    default_parameters,
    check_mode,
    check_view,
)
from spacetimeviz.core.sampler import DataPoint2D, DataPoint3D, sample_2d, sample_3d

logger = logging.getLogger(__name__)

# Above this |W| the widget warns about the negative energy required
WARP_WARNING_THRESHOLD = 5.0
ROTATION_STEP_DEGREES = 1.0


def format_number(value: float) -> str:
    """Render a slider value the way JavaScript stringifies numbers (1, not 1.0)."""
    value = float(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


@dataclass
class ControlState:
    """
    Current selections of the widget.

    Attributes:
        params: Clamped slider snapshot handed to the sampler
        view: "2d" line chart or "3d" point cloud
        mode: "time", "tensor" or "warp"
        animating: Auto-rotation toggle (only effective in the 3D view)
        show_math: Whether the formula panel is expanded
    """

    params: ParameterSet = field(default_factory=default_parameters)
    view: str = "2d"
    mode: str = "time"
    animating: bool = False
    show_math: bool = False

    def __post_init__(self):
        check_view(self.view)
        check_mode(self.mode)
        self.params = self.params.clamped()

    # ------------------------------------------------------------------
    # Control changes
    # ------------------------------------------------------------------

    def set_parameter(self, name: str, value: float) -> float:
        """
        Set one slider, clamped and snapped to its range.

        Args:
            name: ParameterSet field name
            value: Requested value

        Returns:
            The value actually stored

        Raises:
            KeyError: If `name` is not a slider parameter
        """
        if name not in PARAMETER_RANGES:
            raise KeyError(f"Unknown parameter: {name}")

        stored = PARAMETER_RANGES[name].clamp(value)
        if stored != value:
            logger.debug("Clamped %s from %r to %r", name, value, stored)
        self.params = self.params.with_changes(**{name: stored})
        return stored

    def set_view(self, view: str) -> None:
        self.view = check_view(view)

    def set_mode(self, mode: str) -> None:
        self.mode = check_mode(mode)

    def toggle_animation(self) -> bool:
        """Flip auto-rotation. Returns the new state."""
        self.animating = not self.animating
        logger.debug("Animation %s", "started" if self.animating else "stopped")
        return self.animating

    def toggle_math(self) -> bool:
        self.show_math = not self.show_math
        return self.show_math

    def reset(self) -> None:
        """Return every slider to its default. View and mode are kept."""
        self.params = default_parameters()
        self.animating = False

    @property
    def rotation_active(self) -> bool:
        return self.animating and self.view == "3d"

    def tick(self) -> bool:
        """
        Advance one animation frame.

        Rotates the 3D grid by one degree (mod 360) while animating in
        the 3D view, otherwise does nothing.

        Returns:
            True if the rotation angle changed
        """
        if not self.rotation_active:
            return False
        angle = (self.params.rotation_angle + ROTATION_STEP_DEGREES) % 360
        self.params = self.params.with_changes(rotation_angle=angle)
        return True

    # ------------------------------------------------------------------
    # Sampling and display text
    # ------------------------------------------------------------------

    def sample(self) -> list[DataPoint2D] | list[DataPoint3D]:
        """Sample the active mode for the active view."""
        if self.view == "2d":
            return sample_2d(self.mode, self.params)
        return sample_3d(self.mode, self.params)

    @property
    def warp_warning_active(self) -> bool:
        return abs(self.params.warp_strength) > WARP_WARNING_THRESHOLD

    def warp_warning_message(self) -> str | None:
        """Alert shown under the warp slider, or None below the threshold."""
        if not self.warp_warning_active:
            return None
        return (
            "Warning: High warp bubble strength requires significant "
            "negative energy density"
        )

    def math_details(self) -> list[str]:
        """Lines of the formula panel (shown when show_math is on)."""
        lines = [
            "Einstein's Field Equations:",
            "Gμν + Λgμν = 8πG/c⁴ Tμν",
        ]
        if self.mode == "warp":
            lines += [
                "Alcubierre Metric:",
                "ds² = -c²dt² + [dx - v(t)f(r)dt]² + dy² + dz²",
                "Where f(r) is the shape function and v(t) is the velocity of the bubble.",
                "Required negative energy density:",
                "ρ = -(c²/8πG)(v²/4r²)(df/dr)²",
            ]
        else:
            p = self.params
            lines += [
                "Current Parameters:",
                f"Time (t): {format_number(p.time)}",
                f"Tensor (T): {format_number(p.tensor)}",
                f"Lambda (Λ): {format_number(p.lam)}",
            ]
        return lines

    def status_message(self) -> str:
        """Explanatory one-liner shown under the chart for the active mode."""
        p = self.params
        lam = format_number(p.lam)

        if self.mode == "warp":
            if self.warp_warning_active:
                detail = "Warning: Significant negative energy density required."
            else:
                detail = "Moderate spacetime distortion within acceptable parameters."
            return f"Warp bubble strength: {format_number(p.warp_strength)}. {detail}"

        if self.mode == "time":
            if p.time == 0:
                when = "at the present moment"
            elif p.time > 0:
                when = "in the future"
            else:
                when = "in the past"

            if p.lam > 0:
                effect = "expands"
            elif p.lam < 0:
                effect = "contracts"
            else:
                effect = "maintains"
            return (
                f"Time value (t={format_number(p.time)}) affects spacetime "
                f"curvature {when}. Λ={lam} {effect} space."
            )

        if p.tensor == 0:
            matter = "empty space"
        elif p.tensor > 0:
            matter = "normal matter"
        else:
            matter = "exotic matter"
        return (
            f"Tensor value (T={format_number(p.tensor)}) represents {matter}. "
            f"Λ={lam} affects large-scale structure."
        )
