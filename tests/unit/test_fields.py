"""Unit tests for the curvature fields and the warp metric."""

import numpy as np
import pytest

from spacetimeviz.core.fields import (
    time_sign,
    time_curvature_2d,
    tensor_curvature_2d,
    time_curvature_3d,
    tensor_curvature_3d,
    rotate,
    radius,
)
from spacetimeviz.core.warp import (
    WarpMetric,
    warp_metric,
    warp_height,
    WARP_SIGMA,
    WARP_THICKNESS,
)


class TestTimeCurvature:
    """Tests for the time-mode formula."""

    def test_sign_tie_break_is_positive(self):
        assert time_sign(0.0) == 1.0
        assert time_sign(-0.0) == 1.0
        assert time_sign(0.1) == 1.0
        assert time_sign(-0.1) == -1.0

    @pytest.mark.parametrize("t", [-10.0, -3.5, 0.0, 2.0, 7.3])
    def test_zero_at_x_equals_t(self, t):
        assert time_curvature_2d(t, t, 0.0) == 0.0

    def test_negative_time_flips_parabola(self):
        # t = -2: y(0) = -(0 + 2)²/10 = -0.4
        assert np.isclose(time_curvature_2d(0.0, -2.0, 0.0), -0.4)
        assert np.isclose(time_curvature_2d(0.0, 2.0, 0.0), 0.4)

    def test_lambda_adds_cosine(self):
        assert np.isclose(time_curvature_2d(0.0, 0.0, 1.5), 1.5)
        assert np.isclose(time_curvature_2d(4.0, 0.0, 1.0), 1.6 + np.cos(2.0))

    def test_3d_has_no_sign_factor(self):
        # r = 5 for (3, 4)
        assert time_curvature_3d(3.0, 4.0, 5.0, 0.0) == 0.0
        assert np.isclose(time_curvature_3d(3.0, 4.0, -5.0, 0.0), 20.0)

    def test_broadcasts(self):
        x = np.arange(-3, 4)
        y = time_curvature_2d(x, 1.0, 0.5)
        assert y.shape == x.shape


class TestTensorCurvature:
    """Tests for the tensor-mode formula."""

    @pytest.mark.parametrize("T, lam", [(0.0, 0.0), (3.0, -2.0), (-10.0, 5.0)])
    def test_zero_at_origin(self, T, lam):
        assert tensor_curvature_2d(0.0, T, lam) == 0.0

    def test_even_without_lambda(self):
        x = np.arange(1, 11)
        assert np.array_equal(
            tensor_curvature_2d(x, 2.7, 0.0), tensor_curvature_2d(-x, 2.7, 0.0)
        )

    def test_lambda_adds_sine(self):
        assert np.isclose(tensor_curvature_2d(2.0, 0.0, 1.0), np.sin(1.0))

    def test_3d_uses_radius(self):
        assert np.isclose(tensor_curvature_3d(3.0, 4.0, 1.0, 0.0), 5.0)
        assert np.isclose(tensor_curvature_3d(3.0, 4.0, 0.0, 2.0), 2.0 * np.sin(2.5))


class TestRotation:
    """Tests for grid rotation."""

    def test_identity_at_zero(self):
        x = np.arange(-5, 6, dtype=float)
        y = x[::-1].copy()
        rx, ry = rotate(x, y, 0.0)
        assert np.array_equal(rx, x)
        assert np.array_equal(ry, y)

    def test_quarter_turn(self):
        rx, ry = rotate(1.0, 0.0, 90.0)
        assert np.isclose(rx, 0.0, atol=1e-12)
        assert np.isclose(ry, 1.0)

    def test_preserves_radius(self):
        x, y = np.array([3.0, -2.0]), np.array([4.0, 5.0])
        rx, ry = rotate(x, y, 123.0)
        assert np.allclose(radius(rx, ry), radius(x, y))


class TestWarpMetric:
    """Tests for the simplified warp bubble."""

    def test_constants(self):
        assert WARP_SIGMA == 2.0
        assert WARP_THICKNESS == 1.0

    def test_flat_when_strength_zero(self):
        m = warp_metric(0.0, 0.0, 0.0)
        assert isinstance(m, WarpMetric)
        assert m.shape == 1.0
        assert m.energy_density == 0.0

    @pytest.mark.parametrize("W", [-0.5, 0.1, 0.3, 1.0])
    def test_shape_at_origin(self, W):
        expected = np.exp(-((0.0 - 10 * W) ** 2) / 8)
        assert np.isclose(warp_metric(0.0, 0.0, W).shape, expected)

    def test_peak_on_ring(self):
        # W = 0.5: ring radius 5, (3, 4) lies on it
        assert warp_metric(3.0, 4.0, 0.5).shape == 1.0
        assert warp_metric(5.0, 0.0, 0.5).shape == 1.0

    def test_energy_density_non_positive(self):
        for W in (-2.0, -0.4, 0.4, 2.0):
            m = warp_metric(1.0, 1.0, W)
            assert m.energy_density <= 0.0
            assert np.isclose(m.energy_density, -abs(W) * m.shape / (8 * np.pi))

    def test_energy_density_symmetric_in_sign(self):
        # Negative W puts the ring at negative radius, so shape differs;
        # at the same shape the density only depends on |W|
        a = warp_metric(0.0, 0.0, 0.2)
        b = warp_metric(0.0, 0.0, -0.2)
        assert a.shape == b.shape
        assert a.energy_density == b.energy_density

    def test_underflows_to_zero(self):
        assert warp_metric(0.0, 0.0, 10.0).shape == 0.0

    def test_array_input(self):
        m = warp_metric(np.array([0.0, 2.0]), np.array([0.0, 0.0]), 0.2)
        assert m.shape.shape == (2,)
        assert m.shape[1] == 1.0

    def test_height(self):
        assert warp_height(2.0, 0.0, 0.2) == pytest.approx(1.0)
        assert warp_height(0.0, 0.0, 0.0) == 0.0
