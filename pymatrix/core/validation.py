"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent truncation or padding of mismatched shapes
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import operator
from collections.abc import Sequence
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
    IndexOutOfRangeError,
)
from pymatrix.core.protocols import Scalar


def check_array(array: ArrayLike, name: str) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    Unlike a statistics pipeline, integer dtypes are kept as they are.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with numeric dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    return result


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


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_non_negative(value: Any, name: str) -> int:
    """
    Verify a dimension argument is a non-negative integer.

    Accepts anything usable as an index (int, numpy integers).

    Args:
        value: Dimension to check
        name: Parameter name for error messages

    Returns:
        The value as a plain int

    Raises:
        ValidationError: If value is not an integer or is negative
    """
    try:
        n = operator.index(value)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a non-negative integer, got {type(value).__name__}"
        ) from e

    if n < 0:
        raise ValidationError(f"{name}: expected a non-negative integer, got {n}")
    return n


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> tuple[int, int]:
    """
    Verify every row has the same length as the first row.

    An empty outer sequence is rectangular with shape (0, 0).

    Args:
        rows: Sequence of rows
        name: Parameter name for error messages

    Returns:
        (n_rows, n_cols) of the input

    Raises:
        DimensionMismatchError: If any row's length differs from the first row's
    """
    if len(rows) == 0:
        return 0, 0

    n_cols = len(rows[0])
    for i, row in enumerate(rows):
        if len(row) != n_cols:
            raise DimensionMismatchError(
                f"{name}: all rows must have the same length; row 0 has "
                f"{n_cols} elements, row {i} has {len(row)}",
                expected=n_cols,
                actual=len(row),
                matrix_name=name,
            )
    return len(rows), n_cols


def is_scalar(value: Any) -> bool:
    """
    True if value satisfies Scalar and is not itself a sequence.

    str, bytes, lists and tuples define + and * as concatenation and
    repetition, so the structural check alone would let them through.
    """
    if isinstance(value, (str, bytes, bytearray, Sequence)):
        return False
    return isinstance(value, Scalar)


def check_elements(rows: Sequence[Sequence[Any]], name: str) -> None:
    """
    Verify every element is a Scalar (supports + and *).

    Strings, lists and None are rejected here instead of failing midway
    through an arithmetic operation. Subtraction is not required.

    Raises:
        ValidationError: If an element lacks + or *, or is a sequence
    """
    for i, row in enumerate(rows):
        for j, value in enumerate(row):
            if not is_scalar(value):
                raise ValidationError(
                    f"{name}: element ({i}, {j}) of type {type(value).__name__} "
                    f"is not a scalar supporting + and *"
                )


def check_shape(
    data: Sequence[Sequence[Any]],
    n_rows: int,
    n_cols: int,
    name: str,
) -> None:
    """
    Verify stored data agrees with a recorded (rows, cols) shape.

    This is a self-consistency check on one matrix, not a cross-object check.

    Raises:
        DimensionMismatchError: If the row count or any row length disagrees
            with the recorded shape
    """
    if len(data) != n_rows:
        raise DimensionMismatchError(
            f"{name}: recorded {n_rows} rows but stores {len(data)}",
            expected=(n_rows, n_cols),
            actual=len(data),
            matrix_name=name,
        )

    for i, row in enumerate(data):
        if len(row) != n_cols:
            raise DimensionMismatchError(
                f"{name}: recorded {n_cols} columns but row {i} has {len(row)}",
                expected=(n_rows, n_cols),
                actual=len(row),
                matrix_name=name,
            )


def check_same_shape(
    left: tuple[int, int],
    right: tuple[int, int],
    names: tuple[str, str],
) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        DimensionMismatchError: If the shapes differ
    """
    if left != right:
        raise DimensionMismatchError(
            f"Matrices must have the same shape: "
            f"{names[0]}={left[0]}x{left[1]}, {names[1]}={right[0]}x{right[1]}",
            expected=left,
            actual=right,
        )


def check_inner_dims(left: tuple[int, int], right: tuple[int, int]) -> None:
    """
    Verify left.cols == right.rows for a matrix product.

    Raises:
        IncompatibleDimensionsError: If the inner dimensions differ
    """
    if left[1] != right[0]:
        raise IncompatibleDimensionsError(
            f"Incompatible dimensions for matrix product: "
            f"{left[0]}x{left[1]} @ {right[0]}x{right[1]} "
            f"(left has {left[1]} columns, right has {right[0]} rows)",
            left_shape=left,
            right_shape=right,
        )


def check_index(index: Any, bound: int, axis: str, name: str) -> int:
    """
    Verify 0 <= index < bound.

    Negative indices are rejected rather than wrapped around.

    Args:
        index: Index to check (int or numpy integer)
        bound: Number of rows or columns
        axis: 'row' or 'column', used in the message
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        TypeError: If index is not an integer
        IndexOutOfRangeError: If index < 0 or index >= bound
    """
    try:
        i = operator.index(index)
    except TypeError as e:
        raise TypeError(
            f"{name}: {axis} index must be an integer, got {type(index).__name__}"
        ) from e

    if i < 0 or i >= bound:
        raise IndexOutOfRangeError(
            f"{name}: {axis} index {i} out of range for {bound} {axis}s",
            index=i,
            bound=bound,
            axis=axis,
        )
    return i
