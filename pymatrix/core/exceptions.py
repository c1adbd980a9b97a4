"""
Exception hierarchy for pymatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Every shape violation is a ValidationError:
malformed dimensions are caller bugs, never coerced or silently repaired.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Base class for the shape errors below. Also raised directly when an
    array-like has the wrong number of dimensions.
    """
    pass


class DimensionMismatchError(DimensionError):
    """
    Recorded shape disagrees with stored data, or two shapes must match and don't.

    Raised for ragged input rows, for a Matrix whose row count or row
    lengths disagree with its rows/cols, and by elementwise operations
    whose operands differ in shape.

    Attributes:
        expected: Expected shape or length
        actual: Shape or length actually found
        matrix_name: Name/description of the problematic matrix
    """

    def __init__(
        self,
        message: str,
        expected: tuple[int, ...] | int | None = None,
        actual: tuple[int, ...] | int | None = None,
        matrix_name: str | None = None
    ):
        super().__init__(message)
        self.expected = expected
        self.actual = actual
        self.matrix_name = matrix_name


class IncompatibleDimensionsError(DimensionError):
    """
    Inner dimensions of a matrix product disagree.

    Attributes:
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class IndexOutOfRangeError(ValidationError, IndexError):
    """
    Row or column index at or beyond the matrix bound.

    Also an IndexError, so plain Python iteration idioms keep working.

    Attributes:
        index: The offending index
        bound: Number of rows or columns available
        axis: 'row' or 'column'
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bound: int | None = None,
        axis: str | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bound = bound
        self.axis = axis
