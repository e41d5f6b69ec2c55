"""
Tests for the pylinalg exception hierarchy.

Validates:
    - Inheritance chain (all exceptions catchable via PyLinalgError)
    - Diagnostic attributes on SingularMatrixError
    - Default attribute values (None for optional attributes)
"""

import pytest

from pylinalg.core.exceptions import (
    DimensionError,
    NumericalError,
    PyLinalgError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Inheritance hierarchy
# ═══════════════════════════════════════════════════════════════════════


class TestInheritance:
    """Every exception is catchable via PyLinalgError."""

    def test_validation_error_is_pylinalg_error(self):
        with pytest.raises(PyLinalgError):
            raise ValidationError("bad input")

    def test_dimension_error_is_validation_error(self):
        with pytest.raises(ValidationError):
            raise DimensionError("M == 0")

    def test_numerical_error_is_pylinalg_error(self):
        with pytest.raises(PyLinalgError):
            raise NumericalError("computation failed")

    def test_singular_matrix_error_is_numerical_error(self):
        with pytest.raises(NumericalError):
            raise SingularMatrixError("singular")

    def test_singular_matrix_error_is_not_validation_error(self):
        err = SingularMatrixError("singular")
        assert not isinstance(err, ValidationError)


# ═══════════════════════════════════════════════════════════════════════
# SingularMatrixError
# ═══════════════════════════════════════════════════════════════════════


class TestSingularMatrixError:
    """SingularMatrixError carries matrix diagnostic attributes."""

    def test_all_attributes(self):
        err = SingularMatrixError(
            "A is singular",
            matrix_name="A",
            determinant=0.0,
            order=3,
        )
        assert str(err) == "A is singular"
        assert err.matrix_name == "A"
        assert err.determinant == 0.0
        assert err.order == 3

    def test_defaults_are_none(self):
        err = SingularMatrixError("singular")
        assert err.matrix_name is None
        assert err.determinant is None
        assert err.order is None

    def test_catchable_with_attributes(self):
        with pytest.raises(SingularMatrixError) as exc_info:
            raise SingularMatrixError("singular", matrix_name="A", order=2)
        assert exc_info.value.matrix_name == "A"
        assert exc_info.value.order == 2
