"""
Tests for elementwise sequence algebra.

Every binary operation returns None on a length mismatch; everything else
is checked against plain numpy.
"""

import numpy as np
import pytest

from pylinalg import sequence


class TestArithmetic:

    def test_add(self):
        np.testing.assert_array_equal(sequence.add([1, 2, 3], [4, 5, 6]), [5, 7, 9])

    def test_scale(self):
        np.testing.assert_array_equal(sequence.scale([1, -2, 3], 2.5), [2.5, -5.0, 7.5])

    def test_dot(self):
        assert sequence.dot([1, 2, 3], [4, 5, 6]) == 32

    def test_elementwise_product(self):
        np.testing.assert_array_equal(
            sequence.elementwise_product([1, 2, 3], [4, 5, 6]), [4, 10, 18]
        )

    def test_cross_is_elementwise_product(self):
        assert sequence.cross is sequence.elementwise_product

    def test_inputs_not_modified(self):
        a = np.array([1.0, 2.0])
        b = np.array([3.0, 4.0])
        sequence.add(a, b)
        sequence.scale(a, 3)
        np.testing.assert_array_equal(a, [1.0, 2.0])
        np.testing.assert_array_equal(b, [3.0, 4.0])


class TestLengthMismatch:

    @pytest.mark.parametrize("op", [
        sequence.add,
        sequence.dot,
        sequence.elementwise_product,
        sequence.equals,
        sequence.proportional,
    ])
    def test_returns_none(self, op):
        assert op([1, 2, 3], [1, 2]) is None


class TestEquals:

    def test_equal(self):
        assert sequence.equals([1, 2, 3], [1.0, 2.0, 3.0]) is True

    def test_not_equal(self):
        assert sequence.equals([1, 2, 3], [1, 2, 4]) is False


class TestProportional:

    def test_scalar_multiple(self):
        assert sequence.proportional([1, 2, 3], [-2, -4, -6]) is True

    def test_not_proportional(self):
        assert sequence.proportional([1, 2, 3], [2, 4, 7]) is False

    def test_leading_zero(self):
        assert sequence.proportional([0, 1, 2], [0, 3, 6]) is True
        assert sequence.proportional([0, 1, 2], [1, 3, 6]) is False

    def test_both_zero(self):
        assert sequence.proportional([0, 0], [0, 0]) is True

    def test_zero_is_proportional_to_anything(self):
        assert sequence.proportional([0, 0, 0], [1, 2, 3]) is True

    def test_tolerance(self):
        a = [1.0, 2.0, 3.0]
        b = [2.0, 4.0, 6.0 + 1e-12]
        assert sequence.proportional(a, b) is False
        assert sequence.proportional(a, b, rtol=1e-9) is True
