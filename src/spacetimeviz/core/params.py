"""
ParameterSet: the immutable slider snapshot the sampler evaluates.

The engine never clamps. Ranges, steps and defaults live here so the
presentation layer (and tests) can enforce them before sampling.
"""

from __future__ import annotations
import math
from dataclasses import dataclass, replace
from typing import Literal, get_args

Mode = Literal["time", "tensor", "warp"]
ViewMode = Literal["2d", "3d"]

MODES: tuple[str, ...] = get_args(Mode)
VIEW_MODES: tuple[str, ...] = get_args(ViewMode)


@dataclass(frozen=True)
class ParameterRange:
    """Inclusive slider range with a step grid anchored at `minimum`."""

    minimum: float
    maximum: float
    step: float
    default: float = 0.0
    wraps: bool = False  # Periodic range [minimum, maximum) instead of clamped

    def clamp(self, value: float) -> float:
        """Clamp (or wrap) a value into range and snap it to the step grid."""
        if not math.isfinite(value):
            raise ValueError(f"Cannot clamp non-finite value: {value}")
        span = self.maximum - self.minimum
        if self.wraps:
            value = self.minimum + (value - self.minimum) % span
        else:
            value = min(self.maximum, max(self.minimum, value))

        # Ties go up, as a browser range input snaps them
        n_steps = math.floor((value - self.minimum) / self.step + 0.5)
        snapped = self.minimum + n_steps * self.step
        # Trim float noise from the step multiplication (0.30000000000000004)
        snapped = round(snapped, _decimals(self.step))

        if self.wraps:
            if snapped >= self.maximum:
                snapped = self.minimum
            return snapped
        return min(self.maximum, max(self.minimum, snapped))

    def contains(self, value: float) -> bool:
        if self.wraps:
            return self.minimum <= value < self.maximum
        return self.minimum <= value <= self.maximum


def _decimals(step: float) -> int:
    """Number of decimals needed to represent multiples of `step`."""
    text = repr(float(step))
    if "e" in text or "E" in text:
        return 10
    _, _, frac = text.partition(".")
    frac = frac.rstrip("0")
    return len(frac)


PARAMETER_RANGES: dict[str, ParameterRange] = {
    "time": ParameterRange(-10.0, 10.0, 0.1),
    "tensor": ParameterRange(-10.0, 10.0, 0.1),
    "lam": ParameterRange(-5.0, 5.0, 0.1),
    "warp_strength": ParameterRange(-10.0, 10.0, 0.1),
    "rotation_angle": ParameterRange(0.0, 360.0, 1.0, wraps=True),
}


@dataclass(frozen=True)
class ParameterSet:
    """
    Snapshot of every slider value.

    Fields:
        time: t, centre of the time-mode curvature
        tensor: T, stress-energy scale of the tensor mode
        lam: Λ, cosmological-constant ripple amplitude
        warp_strength: W, bubble radius (×10) and amplitude
        rotation_angle: rotation of the 3D grid, in degrees
    """

    time: float = 0.0
    tensor: float = 0.0
    lam: float = 0.0
    warp_strength: float = 0.0
    rotation_angle: float = 0.0

    def with_changes(self, **changes: float) -> ParameterSet:
        """Copy with some fields replaced. No clamping."""
        return replace(self, **changes)

    def clamped(self) -> ParameterSet:
        """Copy with every field clamped and snapped to PARAMETER_RANGES."""
        return ParameterSet(**{
            name: PARAMETER_RANGES[name].clamp(getattr(self, name))
            for name in PARAMETER_RANGES
        })

    def in_range(self) -> bool:
        """True if every field lies inside its documented range."""
        return all(
            PARAMETER_RANGES[name].contains(getattr(self, name))
            for name in PARAMETER_RANGES
        )

    def as_dict(self) -> dict[str, float]:
        return {name: getattr(self, name) for name in PARAMETER_RANGES}


def default_parameters() -> ParameterSet:
    """ParameterSet with every field at its documented default."""
    return ParameterSet(**{
        name: bounds.default for name, bounds in PARAMETER_RANGES.items()
    })


def check_mode(mode: str) -> str:
    """Return `mode` if it names a sampler mode, else raise ValueError."""
    if mode not in MODES:
        raise ValueError(f"Unknown mode: {mode}")
    return mode


def check_view(view: str) -> str:
    """Return `view` if it names a view dimension, else raise ValueError."""
    if view not in VIEW_MODES:
        raise ValueError(f"Unknown view mode: {view}")
    return view
