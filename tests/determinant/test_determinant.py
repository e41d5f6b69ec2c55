"""
Tests for Determinant.

Validates:
    - Both evaluation paths on pinned inputs
    - Agreement between the paths and with scipy.linalg.det
    - Minors and signed minors
    - Row swaps flip the sign
    - Scale-aware zero detection
"""

import numpy as np
import pytest
from scipy import linalg as sp_linalg

from pylinalg.core.compute import CPU_FP64, CPU_FP64_ILL_CONDITIONED, EXACT
from pylinalg.core.exceptions import DimensionError, ValidationError
from pylinalg.determinant import Determinant


# ═══════════════════════════════════════════════════════════════════════
# Pinned values
# ═══════════════════════════════════════════════════════════════════════


class TestPinnedValues:

    def test_order_two(self):
        d = Determinant(2, [3, 2, -2, 1])
        np.testing.assert_array_equal(d.to_array(), [[3, -2], [2, 1]])
        np.testing.assert_allclose(d.general_calculate(), 7, rtol=EXACT.rtol, atol=EXACT.atol)
        assert d.elimination_calculate() == pytest.approx(7)

    def test_order_four(self):
        d = Determinant(4, [6, 6, 6, 6, 1, 3, 1, 1, 1, 1, 3, 1, 1, 1, 1, 3])
        assert d.general_calculate() == 48
        assert d.elimination_calculate() == pytest.approx(48)

    def test_order_one(self):
        d = Determinant(1, [-5])
        assert d.calculate('general') == -5
        assert d.calculate('elimination') == -5

    def test_default(self):
        assert Determinant().calculate() == 1

    def test_integer_dtype_does_not_truncate(self):
        d = Determinant.from_array([[2, 1], [1, 2]], dtype=np.int64)
        assert d.elimination_calculate() == pytest.approx(3.0)
        assert d.dtype == np.int64

    def test_calculate_leaves_table_unchanged(self):
        d = Determinant.from_array([[2, 1], [4, 5]])
        before = d.to_array()
        d.calculate('elimination')
        d.calculate('general')
        np.testing.assert_array_equal(d.to_array(), before)

    def test_float(self):
        assert float(Determinant(2, [3, 2, -2, 1])) == pytest.approx(7)


class TestMethodAgreement:

    @pytest.mark.parametrize("n", [2, 3, 4, 5, 6])
    def test_general_matches_elimination(self, rng, n):
        A = rng.standard_normal((n, n))
        d = Determinant.from_array(A)
        np.testing.assert_allclose(
            d.general_calculate(), d.elimination_calculate(),
            rtol=CPU_FP64.rtol, atol=CPU_FP64.atol,
        )

    def test_matches_scipy(self, random_square):
        d = Determinant.from_array(random_square)
        np.testing.assert_allclose(
            d.calculate(), sp_linalg.det(random_square),
            rtol=CPU_FP64.rtol, atol=CPU_FP64.atol,
        )

    def test_transpose_has_same_value(self, random_square):
        d = Determinant.from_array(random_square)
        np.testing.assert_allclose(
            d.transpose().calculate(), d.calculate(),
            rtol=CPU_FP64.rtol,
        )

    def test_unknown_method_raises(self):
        with pytest.raises(ValidationError, match="Unknown method"):
            Determinant().calculate('laplace')


# ═══════════════════════════════════════════════════════════════════════
# Construction and shape
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_array_requires_square(self):
        with pytest.raises(DimensionError, match="square"):
            Determinant.from_array([[1, 2, 3], [4, 5, 6]])

    def test_bad_order_raises(self):
        with pytest.raises(DimensionError):
            Determinant(0)

    def test_set_N(self):
        d = Determinant.from_array([[1, 2], [3, 4]])
        d.set_N(3)
        assert d.get_N() == 3
        np.testing.assert_array_equal(d.to_array(), [[1, 2, 0], [3, 4, 0], [0, 0, 0]])
        d.set_N(1)
        np.testing.assert_array_equal(d.to_array(), [[1]])

    def test_release(self):
        d = Determinant.from_array([[1, 2], [3, 4]])
        moved = d.release()
        assert moved.get_N() == 2
        assert d.get_N() == 1
        assert d.calculate() == 1

    def test_copy_is_independent(self):
        d = Determinant.from_array([[1, 2], [3, 4]])
        clone = d.copy()
        clone.set_element(1, 1, 10)
        assert d.get_element(1, 1) == 1
        assert clone != d


# ═══════════════════════════════════════════════════════════════════════
# Minors
# ═══════════════════════════════════════════════════════════════════════


class TestMinors:

    def test_minor(self):
        d = Determinant.from_array([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        np.testing.assert_array_equal(d.m_i_j(2, 2).to_array(), [[1, 3], [7, 10]])
        np.testing.assert_array_equal(d.m_i_j(1, 3).to_array(), [[4, 5], [7, 8]])
        np.testing.assert_array_equal(d.m_i_j(3, 1).to_array(), [[2, 3], [5, 6]])

    def test_signed_minor(self):
        d = Determinant.from_array([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        np.testing.assert_array_equal(
            d.algebraic_complement_minor(1, 2).to_array(), [[-4, -6], [-7, -10]]
        )
        np.testing.assert_array_equal(
            d.algebraic_complement_minor(2, 2).to_array(), [[1, 3], [7, 10]]
        )

    def test_signed_minor_of_order_two(self):
        # order-1 minors: negating the single entry negates the value
        d = Determinant(2, [3, 2, -2, 1])
        assert d.algebraic_complement_minor(1, 2).calculate() == -2
        assert d.algebraic_complement_minor(2, 1).calculate() == 2

    def test_source_unchanged(self):
        d = Determinant.from_array([[1, 2], [3, 4]])
        d.algebraic_complement_minor(1, 2)
        np.testing.assert_array_equal(d.to_array(), [[1, 2], [3, 4]])

    @pytest.mark.parametrize("i, j", [(0, 1), (1, 0), (4, 1), (1, 4)])
    def test_out_of_range_is_none(self, i, j):
        d = Determinant.from_array(np.eye(3))
        assert d.m_i_j(i, j) is None
        assert d.algebraic_complement_minor(i, j) is None

    def test_order_one_has_no_minor(self):
        assert Determinant().m_i_j(1, 1) is None

    def test_laplace_expansion(self, random_square):
        d = Determinant.from_array(random_square)
        n = d.get_N()
        expansion = sum(
            (-1) ** (1 + j) * d.get_element(1, j) * d.m_i_j(1, j).calculate()
            for j in range(1, n + 1)
        )
        np.testing.assert_allclose(expansion, d.calculate(), rtol=CPU_FP64.rtol)

    def test_signed_minor_value_for_even_order(self, random_square):
        # order 4: three negated rows flip the value once
        d = Determinant.from_array(random_square)
        np.testing.assert_allclose(
            d.algebraic_complement_minor(1, 2).calculate(),
            -d.m_i_j(1, 2).calculate(),
            rtol=CPU_FP64.rtol,
        )

    def test_signed_minor_value_for_odd_order(self):
        # order 3: two negated rows cancel
        d = Determinant.from_array([[1, 2, 3], [4, 5, 6], [7, 8, 10]])
        assert d.algebraic_complement_minor(1, 2).calculate('general') == pytest.approx(
            d.m_i_j(1, 2).calculate('general')
        )


# ═══════════════════════════════════════════════════════════════════════
# Elimination
# ═══════════════════════════════════════════════════════════════════════


class TestElimination:

    def test_upper_triangular(self):
        d = Determinant.from_array([[2.0, 1.0, 1.0], [4.0, 3.0, 3.0], [8.0, 7.0, 9.0]])
        swaps = d.elimination()
        assert swaps == 0
        np.testing.assert_allclose(np.tril(d.to_array(), -1), 0.0)

    def test_zero_pivot_swaps(self):
        d = Determinant.from_array([[0.0, 1.0], [1.0, 0.0]])
        assert d.elimination() == 1
        np.testing.assert_array_equal(d.to_array(), [[1, 0], [0, 1]])

    def test_swap_flips_sign(self):
        d = Determinant.from_array([[0.0, 1.0], [1.0, 0.0]])
        assert d.general_calculate() == -1
        assert d.elimination_calculate() == -1

    def test_swap_row_flips_value(self, random_square):
        d = Determinant.from_array(random_square)
        swapped = d.copy()
        swapped.swap_row(1, 3)
        np.testing.assert_allclose(swapped.calculate(), -d.calculate(), rtol=CPU_FP64.rtol)

    def test_pivot_search_checks_pivot_column(self):
        # first column is zero below row 1 except at row 3
        A = [[0.0, 2.0, 1.0], [0.0, 1.0, 3.0], [5.0, 1.0, 1.0]]
        d = Determinant.from_array(A)
        np.testing.assert_allclose(d.elimination_calculate(), np.linalg.det(A), rtol=CPU_FP64.rtol)
        np.testing.assert_allclose(d.general_calculate(), np.linalg.det(A), rtol=CPU_FP64.rtol)

    def test_zero_column(self):
        d = Determinant.from_array([[0.0, 1.0], [0.0, 2.0]])
        assert d.elimination_calculate() == 0


# ═══════════════════════════════════════════════════════════════════════
# Zero detection
# ═══════════════════════════════════════════════════════════════════════


class TestIsZero:

    def test_proportional_rows(self):
        d = Determinant.from_array([[1, 2, 3], [2, 4, 6], [0, 1, 5]])
        assert d.has_proportional_lines()
        assert d.is_zero()
        assert d.general_calculate() == 0

    def test_proportional_columns(self):
        d = Determinant.from_array([[1, 3, 2], [2, 1, 4], [3, 0, 6]])
        assert d.has_proportional_lines()
        assert d.is_zero()

    def test_zero_row(self):
        assert Determinant.from_array([[0, 0], [1, 2]]).is_zero()

    def test_dependent_without_proportional_lines(self):
        d = Determinant.from_array([[1.0, 2.0, 3.0], [4.0, 5.0, 6.0], [7.0, 8.0, 9.0]])
        assert not d.has_proportional_lines()
        assert d.is_zero()

    def test_nonsingular(self, random_square):
        assert not Determinant.from_array(random_square).is_zero()

    def test_small_scale_is_not_zero(self):
        # det = 1e-9, but the matrix is perfectly conditioned
        d = Determinant.from_array(1e-3 * np.eye(3))
        assert not d.is_zero()

    def test_order_one(self):
        assert Determinant(1, [0]).is_zero()
        assert not Determinant(1, [1e-300]).is_zero()


class TestIsZeroIllConditioned:
    """Invertible but badly conditioned inputs must not count as zero."""

    @pytest.mark.parametrize("n", [6, 7, 8])
    def test_hilbert_is_not_zero(self, n):
        assert not Determinant.from_array(sp_linalg.hilbert(n)).is_zero()

    @pytest.mark.parametrize("n", [6, 7])
    def test_hilbert_value(self, n):
        H = sp_linalg.hilbert(n)
        np.testing.assert_allclose(
            Determinant.from_array(H).elimination_calculate(),
            sp_linalg.det(H),
            rtol=CPU_FP64_ILL_CONDITIONED.rtol,
        )

    def test_vandermonde_is_not_zero(self):
        V = np.vander(np.linspace(1.0, 2.0, 7), increasing=True)
        assert not Determinant.from_array(V).is_zero()

    def test_badly_scaled_rows(self):
        assert not Determinant.from_array([[1e20, 0.0], [0.0, 1.0]]).is_zero()
        assert not Determinant.from_array([[1e-20, 0.0], [0.0, 1e20]]).is_zero()


class TestIsZeroFloat32:

    def test_dependent_rows(self):
        d = Determinant.from_array(
            [[0.1, 0.2, 0.7], [0.3, 0.5, 0.1], [0.4, 0.7, 0.8]], dtype=np.float32,
        )
        assert d.dtype == np.float32
        assert d.is_zero()

    def test_nonsingular(self):
        d = Determinant.from_array([[2.0, 1.0], [1.0, 3.0]], dtype=np.float32)
        assert not d.is_zero()
        assert d.elimination_calculate() == pytest.approx(5.0, rel=1e-6)

    def test_elimination_stays_float32(self):
        d = Determinant.from_array([[2.0, 1.0], [1.0, 3.0]], dtype=np.float32)
        d.elimination()
        assert d.dtype == np.float32
        assert d.get_element(2, 2) == pytest.approx(2.5, rel=1e-6)
