"""
Pytest configuration and shared fixtures.
"""

import matplotlib

matplotlib.use("Agg")

import pytest


@pytest.fixture
def default_params():
    """All sliders at their defaults."""
    from spacetimeviz.core import ParameterSet
    return ParameterSet()


@pytest.fixture
def busy_params():
    """Every slider away from zero, rotation included."""
    from spacetimeviz.core import ParameterSet
    return ParameterSet(
        time=-3.7,
        tensor=2.4,
        lam=-1.3,
        warp_strength=0.6,
        rotation_angle=37.0,
    )


@pytest.fixture
def state_3d():
    """Control state in the 3D view."""
    from spacetimeviz.controls import ControlState
    return ControlState(view="3d", mode="tensor")
