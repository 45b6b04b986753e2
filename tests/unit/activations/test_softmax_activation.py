"""
Unit tests for SoftmaxActivation.
"""

import math
import pytest
import numpy as np
from neatsynapse.activations import ActivationFunction, SoftmaxActivation, create_activation


@pytest.fixture
def softmax():
    return SoftmaxActivation()


class TestSoftmaxApply:
    """Test the normalized exponential."""

    def test_equal_inputs_coarse(self, softmax):
        values = np.array([1.0, 1.0, 1.0, 1.0])
        softmax.apply(values, 0, len(values))
        assert values[0] == pytest.approx(0.25, abs=0.1)
        assert values[1] == pytest.approx(0.25, abs=0.1)

    @pytest.mark.parametrize("value", [-50.0, 0.0, 1.0, 700.0])
    def test_equal_inputs_uniform(self, softmax, value):
        values = np.full(4, value)
        softmax.apply(values)
        np.testing.assert_allclose(values, 0.25, rtol=0, atol=1e-9)

    def test_known_values(self, softmax):
        values = np.array([0.0, math.log(2.0)])
        softmax.apply(values)
        np.testing.assert_allclose(values, [1 / 3, 2 / 3], rtol=0, atol=1e-12)

    def test_single_value_is_one(self, softmax):
        values = np.array([-123.4])
        softmax.apply(values)
        assert values[0] == 1.0

    @pytest.mark.parametrize("values", [
        [1000.0, 999.0, 1001.0],
        [-1000.0, -1001.0, -1002.0],
        [1e308, -1e308],
        [-1e308, -1e308, -1e308],
        [3.0, -2.5, 0.0, 12.0, -7.0],
    ])
    def test_sums_to_one_and_finite(self, softmax, values):
        values = np.array(values)
        softmax.apply(values)
        assert np.all(np.isfinite(values))
        assert np.all(values >= 0.0)
        assert np.sum(values) == pytest.approx(1.0, abs=1e-12)

    def test_random_inputs(self, softmax):
        rng = np.random.default_rng(0)
        for _ in range(20):
            values = rng.normal(scale=100.0, size=rng.integers(1, 30))
            softmax.apply(values)
            assert np.all(values >= 0.0)
            assert np.sum(values) == pytest.approx(1.0, abs=1e-9)

    def test_largest_input_gets_largest_output(self, softmax):
        values = np.array([0.1, 2.0, -1.0])
        softmax.apply(values)
        assert np.argmax(values) == 1

    def test_only_slice_is_modified(self, softmax):
        values = np.array([5.0, 1.0, 1.0, 9.0])
        softmax.apply(values, 1, 2)
        np.testing.assert_allclose(values, [5.0, 0.5, 0.5, 9.0])

    def test_slice_to_end(self, softmax):
        values = np.array([5.0, 2.0, 2.0])
        softmax.apply(values, 1)
        np.testing.assert_allclose(values, [5.0, 0.5, 0.5])

    def test_python_list(self, softmax):
        values = [2.0, 2.0]
        softmax.apply(values)
        assert values == pytest.approx([0.5, 0.5])

    def test_empty_slice_is_noop(self, softmax):
        values = np.array([3.0, 4.0])
        softmax.apply(values, 1, 0)
        np.testing.assert_array_equal(values, [3.0, 4.0])

    @pytest.mark.parametrize("start, size", [(2, 5), (-1, 1), (1, -1)])
    def test_slice_out_of_range(self, softmax, start, size):
        with pytest.raises(IndexError):
            softmax.apply(np.zeros(3), start, size)

    @pytest.mark.parametrize("values", [np.array([1, 1, 1, 1]), np.array([True, False])])
    def test_rejects_non_float_array(self, softmax, values):
        original = values.copy()
        with pytest.raises(TypeError, match="floating point"):
            softmax.apply(values)
        np.testing.assert_array_equal(values, original)

    def test_float32_array(self, softmax):
        values = np.ones(4, dtype=np.float32)
        softmax.apply(values)
        np.testing.assert_allclose(values, 0.25, rtol=1e-6)

    def test_python_list_of_ints(self, softmax):
        values = [1, 1]
        softmax.apply(values)
        assert values == pytest.approx([0.5, 0.5])


class TestSoftmaxDerivative:
    """Test the per element derivative."""

    def test_has_derivative(self, softmax):
        assert softmax.has_derivative() is True

    @pytest.mark.parametrize("x, fx", [(0.25, 0.25), (0.0, 0.0), (-3.0, 1e-5), (50.0, 1.0)])
    def test_derivative_does_not_fail(self, softmax, x, fx):
        assert math.isfinite(softmax.derivative(x, fx))

    def test_derivative_after_apply(self, softmax):
        values = np.array([1.0, 1.0, 1.0, 1.0])
        softmax.apply(values, 0, len(values))
        values[0] = softmax.derivative(values[0], values[0])
        assert values[0] == 1.0


class TestSoftmaxClone:
    """Test that clones are independent and equivalent."""

    def test_clone_not_none(self, softmax):
        clone = softmax.clone()
        assert clone is not None
        assert clone is not softmax
        assert isinstance(clone, SoftmaxActivation)

    def test_clone_same_output(self, softmax):
        original_values = np.array([0.3, -1.2, 4.0, 0.0])
        clone_values    = original_values.copy()

        softmax.apply(original_values)
        softmax.clone().apply(clone_values)
        np.testing.assert_array_equal(original_values, clone_values)

    def test_is_activation_function(self, softmax):
        assert isinstance(softmax, ActivationFunction)
        assert softmax.name == "softmax"

    def test_created_by_name(self):
        assert isinstance(create_activation("softmax"), SoftmaxActivation)

    def test_repr(self, softmax):
        assert repr(softmax) == "SoftmaxActivation()"
