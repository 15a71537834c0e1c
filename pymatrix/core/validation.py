"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent padding or truncation of literals
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

import numbers
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pymatrix.core.exceptions import ValidationError, DimensionError


def check_dimension(value: Any, name: str) -> int:
    """
    Validate a row or column count.

    Args:
        value: Candidate dimension
        name: Parameter name for error messages

    Returns:
        The dimension as a Python int

    Raises:
        ValidationError: If value is not a non-negative integer
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__} {value!r}"
        )
    value = int(value)
    if value < 0:
        raise ValidationError(f"{name}: must be non-negative, got {value}")
    return value


def check_dtype(dtype: DTypeLike, name: str) -> np.dtype:
    """
    Validate an element type.

    Accepts numeric and boolean dtypes, plus object dtype for Python
    number types (Fraction, Decimal, ...) that support +, - and *.

    Args:
        dtype: Anything numpy accepts as a dtype
        name: Parameter name for error messages

    Returns:
        The normalized numpy dtype

    Raises:
        ValidationError: If dtype is unknown or not arithmetic
    """
    try:
        result = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"{name}: not a valid dtype: {e}") from e

    if result == object:
        return result
    if not (np.issubdtype(result, np.number) or np.issubdtype(result, np.bool_)):
        raise ValidationError(
            f"{name}: non-numeric dtype {result}, expected an arithmetic element type"
        )
    return result


def check_literal(
    literal: ArrayLike,
    name: str,
    dtype: DTypeLike | None = None,
) -> NDArray[Any]:
    """
    Validate and convert a rectangular 2D literal.

    Accepts nested sequences and 2D arrays. The literal must be exactly
    two-dimensional and every row must have the same length.

    Args:
        literal: Rows of element values
        name: Parameter name for error messages
        dtype: Element type, or None to infer it from the values

    Returns:
        numpy.ndarray of shape (rows, cols)

    Raises:
        DimensionError: If the literal is ragged or not 2D
        ValidationError: If the values are not numeric
    """
    if dtype is not None:
        dtype = check_dtype(dtype, "dtype")

    try:
        result = np.asarray(literal, dtype=dtype)
    except ValueError as e:
        # numpy refuses inhomogeneous nesting unless dtype=object
        if 'sequence' in str(e) or 'inhomogeneous' in str(e):
            raise DimensionError(f"{name}: rows have different lengths: {e}") from e
        raise ValidationError(f"{name}: cannot convert to {dtype}: {e}") from e
    except (TypeError, OverflowError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if dtype is None and result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or "
            f"mixed types; pass dtype=object explicitly for Python number types"
        )

    # [] is an empty literal with no rows
    if result.ndim == 1 and result.size == 0:
        return result.reshape(0, 0)

    if result.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D literal, got {result.ndim}D with shape {result.shape}",
            actual=result.shape,
        )

    if dtype == object:
        ragged = [i for i, row in enumerate(result) if any(
            isinstance(v, (list, tuple, np.ndarray)) for v in row
        )]
        if ragged:
            raise DimensionError(f"{name}: rows {ragged} are nested or ragged")

    check_dtype(result.dtype, name)
    return result


def check_same_shape(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
    operation: str,
) -> None:
    """
    Verify two operands of an elementwise operation have identical shapes.

    Args:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
        operation: Operator symbol for error messages

    Raises:
        DimensionError: If shapes differ
    """
    if left_shape != right_shape:
        raise DimensionError(
            f"{operation}: operand shapes differ, left={left_shape}, right={right_shape}",
            expected=left_shape,
            actual=right_shape,
        )


def check_inner_dimensions(
    left_shape: tuple[int, int],
    right_shape: tuple[int, int],
) -> None:
    """
    Verify the inner dimensions of a matrix product agree.

    Args:
        left_shape: (m, k) of the left operand
        right_shape: (k', n) of the right operand

    Raises:
        DimensionError: If k != k'
    """
    if left_shape[1] != right_shape[0]:
        raise DimensionError(
            f"matrix product: left has {left_shape[1]} columns but right has "
            f"{right_shape[0]} rows (left={left_shape}, right={right_shape})",
            expected=(left_shape[1],),
            actual=(right_shape[0],),
        )
