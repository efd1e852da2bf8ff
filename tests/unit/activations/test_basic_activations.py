"""
Unit tests for basic activation functions.

Tests the library-backed functions in src/activation_viewer/activations/basic_activations.py
"""

import math
import warnings

import pytest
import numpy as np
from activation_viewer.activations.basic_activations import (
    SELU_ALPHA,
    SELU_SCALE,
    ARCSINH_SCALE,
    logistic_steep_activation,
    logistic_sigmoid_activation,
    soft_sign_activation,
    arctan_activation,
    tanh_activation,
    arcsinh_activation,
    selu_activation,
    bent_identity_activation,
)


def _no_warnings(fn, z):
    """Evaluate fn(z), failing on any floating point warning."""
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        return fn(z)


class TestLogisticSteepActivation:
    """Test logistic_steep_activation function."""

    def test_zero(self):
        """Test steep logistic at zero (should be 0.5)."""
        assert logistic_steep_activation(0.0) == 0.5

    def test_known_value(self):
        """Test steep logistic at a known value."""
        expected = 1.0 / (1.0 + math.exp(-4.9))
        assert logistic_steep_activation(1.0) == pytest.approx(expected, abs=1e-15)

    def test_symmetry(self):
        """Test that f(z) + f(-z) = 1."""
        for z in [0.1, 0.5, 1.0, 2.0]:
            total = logistic_steep_activation(z) + logistic_steep_activation(-z)
            assert total == pytest.approx(1.0, abs=1e-12)

    def test_output_range(self, wide_grid):
        """Test that output stays in [0, 1] over [-1000, 1000] without warnings."""
        result = _no_warnings(logistic_steep_activation, wide_grid)
        assert np.all((result >= 0.0) & (result <= 1.0))

    def test_saturates_to_zero(self):
        """Test that exp overflow saturates to exactly 0."""
        assert _no_warnings(logistic_steep_activation, -1000.0) == 0.0

    def test_2d_array(self, sample_2d_array):
        """Test steep logistic with 2D array."""
        result = logistic_steep_activation(sample_2d_array)
        assert result.shape == sample_2d_array.shape


class TestLogisticSigmoidActivation:
    """Test logistic_sigmoid_activation function."""

    def test_zero(self):
        """Test sigmoid at zero (should be 0.5)."""
        assert logistic_sigmoid_activation(0.0) == 0.5

    def test_known_value(self):
        """Test sigmoid at a known value."""
        # sigmoid(1) ≈ 0.7310585786
        assert abs(logistic_sigmoid_activation(1.0) - 0.7310585786) < 1e-9

    def test_clamped_below(self):
        """Test that inputs below -40 return exactly 0."""
        assert logistic_sigmoid_activation(-41.0) == 0.0
        assert logistic_sigmoid_activation(-1e300) == 0.0

    def test_clamped_above(self):
        """Test that inputs above 40 return exactly 1."""
        assert logistic_sigmoid_activation(41.0) == 1.0
        assert logistic_sigmoid_activation(1e300) == 1.0

    def test_boundary_not_clamped(self):
        """Test that -40 itself is computed, not clamped."""
        result = logistic_sigmoid_activation(-40.0)
        assert 0.0 < result < 1e-17

    def test_strictly_inside_unit_interval(self):
        """Test that values on (-30, 30) lie strictly in (0, 1)."""
        z = np.linspace(-30.0, 30.0, 601)
        result = logistic_sigmoid_activation(z)
        assert np.all((result > 0.0) & (result < 1.0))

    def test_monotonic(self):
        """Test that the sigmoid is non-decreasing on (-40, 40)."""
        z = np.linspace(-39.9, 39.9, 1000)
        assert np.all(np.diff(logistic_sigmoid_activation(z)) >= 0.0)

    def test_output_range(self, wide_grid):
        """Test that output stays in [0, 1] over [-1000, 1000] without warnings."""
        result = _no_warnings(logistic_sigmoid_activation, wide_grid)
        assert np.all((result >= 0.0) & (result <= 1.0))

    def test_1d_array(self):
        """Test sigmoid with 1D array spanning the clamp."""
        z = np.array([-50.0, 0.0, 50.0])
        np.testing.assert_array_equal(logistic_sigmoid_activation(z), [0.0, 0.5, 1.0])


class TestSoftSignActivation:
    """Test soft_sign_activation function."""

    def test_zero(self):
        """Test soft sign at zero (should be 0.5)."""
        assert soft_sign_activation(0.0) == 0.5

    def test_known_values(self):
        """Test soft sign at known values."""
        assert soft_sign_activation(1.0) == pytest.approx(0.5 + 1.0 / 2.4)
        assert soft_sign_activation(-1.0) == pytest.approx(0.5 - 1.0 / 2.4)

    def test_output_range(self, wide_grid):
        """Test that soft sign output is in (0, 1) over [-1000, 1000]."""
        result = _no_warnings(soft_sign_activation, wide_grid)
        assert np.all((result > 0.0) & (result < 1.0))


class TestArcTanActivation:
    """Test arctan_activation function."""

    def test_zero(self):
        """Test shifted arctan at zero (should be 0.5)."""
        assert arctan_activation(0.0) == pytest.approx(0.5)

    def test_known_value(self):
        """Test shifted arctan at 1 (atan(1) = pi/4, so 0.75)."""
        assert arctan_activation(1.0) == pytest.approx(0.75)

    def test_output_range(self, wide_grid):
        """Test that output is in [0, 1] over [-1000, 1000]."""
        result = arctan_activation(wide_grid)
        assert np.all((result >= 0.0) & (result <= 1.0))


class TestTanhActivation:
    """Test tanh_activation function."""

    def test_zero(self):
        """Test shifted tanh at zero (should be 0.5)."""
        assert tanh_activation(0.0) == 0.5

    def test_known_value(self):
        """Test shifted tanh at a known value."""
        # tanh(1) ≈ 0.7615941559
        assert abs(tanh_activation(1.0) - (0.7615941559 + 1.0) / 2.0) < 1e-9

    def test_saturation(self):
        """Test that shifted tanh saturates to 0 and 1."""
        assert tanh_activation(100.0) == 1.0
        assert tanh_activation(-100.0) == 0.0

    def test_output_range(self, wide_grid):
        """Test that output is in [0, 1] over [-1000, 1000]."""
        result = tanh_activation(wide_grid)
        assert np.all((result >= 0.0) & (result <= 1.0))


class TestArcSinHActivation:
    """Test arcsinh_activation function."""

    def test_scale_constant(self):
        """Test the normalization constant to full precision."""
        assert ARCSINH_SCALE == 1.2567348023993685

    def test_zero(self):
        """Test scaled arcsinh at zero (asinh(0) = 0)."""
        assert arcsinh_activation(0.0) == pytest.approx(ARCSINH_SCALE * 0.5, abs=1e-15)

    def test_matches_math_asinh(self):
        """Test against math.asinh for moderate inputs."""
        for z in [-5.0, -1.0, -0.25, 0.25, 1.0, 5.0, 100.0]:
            expected = ARCSINH_SCALE * ((math.asinh(z) + 1.0) * 0.5)
            assert arcsinh_activation(z) == pytest.approx(expected, rel=1e-9)

    def test_monotonic(self):
        """Test that the curve is increasing on [-2, 2]."""
        z = np.linspace(-2.0, 2.0, 2000)
        assert np.all(np.diff(arcsinh_activation(z)) > 0.0)

    def test_large_negative_cancellation(self):
        """Test that the explicit log form returns -inf where x + sqrt(x^2+1) cancels."""
        result = _no_warnings(arcsinh_activation, -1e9)
        assert np.isneginf(result)


class TestSeluActivation:
    """Test selu_activation function."""

    def test_constants(self):
        """Test alpha and scale to full double precision."""
        assert SELU_ALPHA == 1.6732632423543772848170429916717
        assert SELU_SCALE == 1.0507009873554804934193349852946

    def test_zero(self):
        """Test SELU(0) = 0."""
        assert selu_activation(0.0) == 0.0

    def test_one(self):
        """Test SELU(1) = scale."""
        assert selu_activation(1.0) == 1.0507009873554804934193349852946

    def test_minus_one(self):
        """Test SELU(-1) = scale * (alpha * e^-1 - alpha)."""
        expected = SELU_SCALE * (SELU_ALPHA * math.exp(-1.0) - SELU_ALPHA)
        assert abs(selu_activation(-1.0) - expected) < 1e-12

    def test_floor(self):
        """Test that large negative inputs approach -scale * alpha."""
        assert selu_activation(-1000.0) == pytest.approx(-SELU_SCALE * SELU_ALPHA)

    def test_large_positive_no_warning(self):
        """Test that the discarded exp branch does not warn."""
        assert _no_warnings(selu_activation, 1000.0) == pytest.approx(SELU_SCALE * 1000.0)

    def test_output_floor_over_wide_grid(self, wide_grid):
        """Test that output never drops below -scale * alpha."""
        result = _no_warnings(selu_activation, wide_grid)
        assert np.all(result >= -SELU_SCALE * SELU_ALPHA - 1e-12)


class TestBentIdentityActivation:
    """Test bent_identity_activation function."""

    def test_zero(self):
        """Test bent identity at zero (should be exactly 0)."""
        assert bent_identity_activation(0.0) == 0.0

    def test_known_values(self):
        """Test bent identity at +-1."""
        assert bent_identity_activation(1.0) == pytest.approx((math.sqrt(2.0) - 1.0) / 2.0 + 1.0)
        assert bent_identity_activation(-1.0) == pytest.approx((math.sqrt(2.0) - 1.0) / 2.0 - 1.0)

    def test_1d_array(self, sample_1d_array):
        """Test bent identity with 1D array."""
        expected = (np.sqrt(sample_1d_array ** 2 + 1.0) - 1.0) / 2.0 + sample_1d_array
        np.testing.assert_array_almost_equal(bent_identity_activation(sample_1d_array), expected)
