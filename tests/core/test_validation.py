"""
Tests for input validation utilities.

Validates every function in core/validation.py:
    - check_array / check_ndim / check_2d: numpy conversion and dimensionality
    - check_non_negative: dimension arguments
    - check_rectangular / check_elements: row input
    - check_shape: recorded shape vs stored data
    - check_same_shape / check_inner_dims: operand compatibility
    - check_index: bounds, negatives, non-integers
"""

from fractions import Fraction

import numpy as np
import pytest

from pymatrix.core.exceptions import (
    DimensionError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
    IndexOutOfRangeError,
    ValidationError,
)
from pymatrix.core.validation import (
    check_2d,
    check_array,
    check_elements,
    check_index,
    check_inner_dims,
    check_ndim,
    check_non_negative,
    check_rectangular,
    check_same_shape,
    check_shape,
    is_scalar,
)


# ═══════════════════════════════════════════════════════════════════════
# check_array / check_ndim / check_2d
# ═══════════════════════════════════════════════════════════════════════


class TestCheckArray:
    """check_array converts to ndarray and rejects non-numeric data."""

    def test_int_dtype_preserved(self):
        result = check_array([[1, 2], [3, 4]], "X")
        assert np.issubdtype(result.dtype, np.integer)

    def test_float_passthrough(self):
        arr = np.array([[1.0, 2.0]], dtype=np.float32)
        assert check_array(arr, "X").dtype == np.float32

    def test_rejects_mixed_types(self):
        with pytest.raises(ValidationError, match="object dtype"):
            check_array([None, 1, 2.0], "X")

    def test_rejects_strings(self):
        with pytest.raises(ValidationError, match="non-numeric dtype"):
            check_array([["a", "b"]], "X")

    def test_error_message_includes_name(self):
        with pytest.raises(ValidationError, match="my_var"):
            check_array(["a"], "my_var")


class TestCheckNdim:
    """check_ndim and check_2d enforce dimensionality."""

    def test_2d_passes(self):
        check_2d(np.ones((2, 3)), "X")

    def test_1d_rejected(self):
        with pytest.raises(DimensionError, match="expected 2D.*got 1D"):
            check_2d(np.ones(3), "X")

    def test_error_includes_shape(self):
        with pytest.raises(DimensionError, match=r"shape \(2, 3, 4\)"):
            check_ndim(np.ones((2, 3, 4)), 2, "X")


# ═══════════════════════════════════════════════════════════════════════
# check_non_negative
# ═══════════════════════════════════════════════════════════════════════


class TestCheckNonNegative:

    def test_zero_passes(self):
        assert check_non_negative(0, "n") == 0

    def test_numpy_integer_accepted(self):
        result = check_non_negative(np.int64(3), "n")
        assert result == 3
        assert type(result) is int

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="n: .*got -1"):
            check_non_negative(-1, "n")

    def test_float_rejected(self):
        with pytest.raises(ValidationError, match="float"):
            check_non_negative(2.0, "p")


# ═══════════════════════════════════════════════════════════════════════
# check_rectangular / check_elements
# ═══════════════════════════════════════════════════════════════════════


class TestCheckRectangular:
    """Every row must have the first row's length."""

    def test_rectangular_returns_shape(self):
        assert check_rectangular(((1, 2, 3), (4, 5, 6)), "rows") == (2, 3)

    def test_empty_is_zero_by_zero(self):
        assert check_rectangular((), "rows") == (0, 0)

    def test_empty_rows_are_rectangular(self):
        assert check_rectangular(((), (), ()), "rows") == (3, 0)

    def test_ragged_raises(self):
        with pytest.raises(DimensionMismatchError, match="row 1 has 2") as exc_info:
            check_rectangular(((1, 2, 3), (4, 5)), "rows")
        assert exc_info.value.expected == 3
        assert exc_info.value.actual == 2

    def test_longer_later_row_raises(self):
        """Longer rows are rejected too, never truncated."""
        with pytest.raises(DimensionMismatchError):
            check_rectangular(((1,), (2, 3)), "rows")


class TestCheckElements:

    def test_numeric_types_pass(self):
        check_elements(((1, 2.5, Fraction(1, 3), 1j, np.int32(4)),), "rows")

    def test_string_rejected(self):
        with pytest.raises(ValidationError, match=r"element \(0, 1\) of type str"):
            check_elements(((1, "2"),), "rows")

    def test_none_rejected(self):
        with pytest.raises(ValidationError, match="NoneType"):
            check_elements(((None,),), "rows")

    def test_nested_list_rejected(self):
        with pytest.raises(ValidationError, match="of type list"):
            check_elements(((1, [2]),), "rows")

    def test_add_and_mul_only_passes(self):
        class MinPlus:
            def __add__(self, other):
                return self

            def __mul__(self, other):
                return self

        check_elements(((MinPlus(),),), "rows")


class TestIsScalar:
    """Sequences define + and * but are never matrix elements."""

    @pytest.mark.parametrize("value", ["abc", b"ab", [1, 2], (1,)])
    def test_sequences_rejected(self, value):
        assert not is_scalar(value)

    @pytest.mark.parametrize("value", [3, 0.5, Fraction(1, 2), np.float32(1.0)])
    def test_numbers_accepted(self, value):
        assert is_scalar(value)


# ═══════════════════════════════════════════════════════════════════════
# check_shape / check_same_shape / check_inner_dims
# ═══════════════════════════════════════════════════════════════════════


class TestCheckShape:
    """Recorded shape must agree with stored data."""

    def test_consistent_passes(self):
        check_shape(((1, 2), (3, 4)), 2, 2, "m")

    def test_zero_rows_with_columns_passes(self):
        check_shape((), 0, 3, "m")

    def test_wrong_row_count(self):
        with pytest.raises(DimensionMismatchError, match="recorded 3 rows but stores 2"):
            check_shape(((1, 2), (3, 4)), 3, 2, "m")

    def test_wrong_row_length(self):
        with pytest.raises(DimensionMismatchError, match="row 1 has 1"):
            check_shape(((1, 2), (3,)), 2, 2, "m")


class TestCheckSameShape:

    def test_same_passes(self):
        check_same_shape((2, 3), (2, 3), ("a", "b"))

    def test_different_raises(self):
        with pytest.raises(DimensionMismatchError, match=r"a=2x3, b=3x2"):
            check_same_shape((2, 3), (3, 2), ("a", "b"))


class TestCheckInnerDims:

    def test_compatible_passes(self):
        check_inner_dims((2, 3), (3, 4))

    def test_incompatible_raises(self):
        with pytest.raises(IncompatibleDimensionsError, match=r"2x3 @ 2x3") as exc_info:
            check_inner_dims((2, 3), (2, 3))
        assert exc_info.value.left_shape == (2, 3)
        assert exc_info.value.right_shape == (2, 3)


# ═══════════════════════════════════════════════════════════════════════
# check_index
# ═══════════════════════════════════════════════════════════════════════


class TestCheckIndex:

    def test_last_valid_index(self):
        assert check_index(2, 3, "row", "row") == 2

    def test_bound_rejected(self):
        with pytest.raises(IndexOutOfRangeError, match="row index 3 out of range for 3 rows"):
            check_index(3, 3, "row", "row")

    def test_negative_rejected(self):
        with pytest.raises(IndexOutOfRangeError) as exc_info:
            check_index(-1, 3, "column", "col")
        assert exc_info.value.index == -1
        assert exc_info.value.axis == "column"

    def test_numpy_integer_accepted(self):
        assert check_index(np.int64(1), 3, "row", "row") == 1

    def test_non_integer_is_type_error(self):
        with pytest.raises(TypeError, match="must be an integer"):
            check_index(1.0, 3, "row", "row")
