"""
Input validation utilities for pylinalg.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

They guard construction and the solver front-end only. Element, row and
column accessors never call them: out-of-range access is answered with
None, not an exception.
"""

import numbers

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray
from typing import Any

from pylinalg.core.exceptions import ValidationError, DimensionError


def check_array(
    array: ArrayLike,
    name: str,
    dtype: DTypeLike = np.float64,
) -> NDArray[Any]:
    """
    Validate and convert input to a numpy array of the requested dtype.

    Rejects inputs that result in object dtype (indicating mixed types or
    non-numeric data) and non-numeric dtypes such as strings.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Numeric dtype to convert to

    Returns:
        numpy.ndarray with the requested dtype

    Raises:
        ValidationError: If input cannot be converted to a numeric array
    """
    try:
        raw = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if raw.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # bool is accepted as 0/1, everything else must be a number
    if not (np.issubdtype(raw.dtype, np.number) or raw.dtype == np.bool_):
        raise ValidationError(
            f"{name}: non-numeric dtype {raw.dtype}, expected numeric data"
        )

    target = np.dtype(dtype)
    if not np.issubdtype(target, np.number):
        raise ValidationError(f"{name}: dtype {target} is not numeric")

    try:
        return raw.astype(target)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to {target}: {e}") from e


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_dimension(value: Any, name: str) -> int:
    """
    Verify a row/column count is a positive integer.

    Args:
        value: Requested count
        name: Parameter name for error messages

    Returns:
        The count as a plain int

    Raises:
        DimensionError: If value is not an integer or is less than 1
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise DimensionError(
            f"{name}: expected a positive integer, got {type(value).__name__} {value!r}"
        )
    if value < 1:
        raise DimensionError(f"{name} == {value}, must be at least 1")
    return int(value)


def check_method(method: str, allowed: tuple[str, ...], name: str = "method") -> str:
    """
    Verify a string option is one of the allowed choices.

    Raises:
        ValidationError: If method is not in allowed
    """
    if method not in allowed:
        choices = ", ".join(repr(a) for a in allowed)
        raise ValidationError(f"Unknown {name}: {method!r}. Must be one of {choices}.")
    return method
