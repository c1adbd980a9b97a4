"""
Matrix: a minimal dense, row-major matrix over a generic numeric element.

Immutable after construction. Every arithmetic operation validates its
operands first and returns a new Matrix; nothing is computed on malformed
shapes and no storage is ever shared with the caller.
"""

from __future__ import annotations

import cmath
import operator
from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field
from typing import Any, Generic

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.protocols import ElementType, T
from pymatrix.core.tolerances import ToleranceTier, select_tolerance
from pymatrix.core.validation import (
    check_rectangular,
    check_elements,
    check_non_negative,
    check_shape,
    check_same_shape,
    check_inner_dims,
    check_index,
    is_scalar,
)
from pymatrix.dense import _kernels
from pymatrix.dense._interop import rows_from_array, rows_to_array


def _as_rows(rows: Sequence[Sequence[Any]], name: str) -> _kernels.Rows:
    """Copy a sequence of sequences into row tuples."""
    try:
        return tuple(tuple(row) for row in rows)
    except TypeError as e:
        raise ValidationError(
            f"{name}: expected a sequence of row sequences: {e}"
        ) from e


def _infer_dtype(data: _kernels.Rows, fallback: ElementType) -> ElementType:
    for row in data:
        for value in row:
            return type(value)
    return fallback


def _require_matrix(other: Any, op: str) -> None:
    if not isinstance(other, Matrix):
        raise TypeError(f"{op} expects a Matrix, got {type(other).__name__}")


def _plain(value: Any) -> Any:
    """numpy scalars render as their Python value, not np.int64(2)."""
    return value.item() if isinstance(value, np.generic) else value


def _check_dtype(dtype: Any) -> None:
    if not callable(dtype):
        raise ValidationError(
            f"dtype: expected an element constructor such as int or float, "
            f"got {dtype!r}"
        )


@dataclass(frozen=True, repr=False)
class Matrix(Generic[T]):
    """
    Rectangular, row-major matrix of Scalar elements.

    Construction:
        Matrix.from_rows([[1, 2, 1], [4, 1, 3]])
        Matrix.zeros(n, p, dtype=int)
        Matrix.ones(n, p, dtype=int)
        Matrix.identity(n, dtype=int)
        Matrix.from_array(numpy_array)

    Operators:
        a + b, a - b    elementwise (same shape required)
        a @ b           matrix product (a.cols == b.rows required)
        k * a, a * k    scalar product, k on the left of each multiplication

    Invariants: len(data) == rows and every row has exactly cols elements.
    Zero extents are allowed; from_rows([]) is 0x0 and zeros(0, 3) is 0x3.
    """
    _data: tuple[tuple[T, ...], ...]
    _rows: int
    _cols: int
    _dtype: ElementType[T] = field(default=int, compare=False)

    # numpy scalars on the left defer to __rmul__ instead of broadcasting
    __array_ufunc__ = None

    # --- Construction ---

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[T]],
        dtype: ElementType[T] | None = None,
    ) -> Matrix[T]:
        """
        Build a Matrix from a sequence of rows.

        Parameters
        ----------
        rows : sequence of sequences
            Row-major element values. Every row must have the length of
            the first row.
        dtype : callable, optional
            Element constructor used for the zero/one literals. Defaults to
            the type of the first element, or int for an empty matrix.

        Raises
        ------
        DimensionMismatchError
            If the rows are ragged.
        ValidationError
            If an element is not a scalar supporting + and *.
        """
        data = _as_rows(rows, "rows")
        n_rows, n_cols = check_rectangular(data, "rows")
        check_elements(data, "rows")
        if dtype is None:
            dtype = _infer_dtype(data, int)
        else:
            _check_dtype(dtype)
        return cls._build(data, n_rows, n_cols, dtype)

    @classmethod
    def zeros(cls, n: int, p: int, dtype: ElementType[T] = int) -> Matrix[T]:
        """n x p matrix filled with dtype(0)."""
        return cls._filled(n, p, 0, dtype)

    @classmethod
    def ones(cls, n: int, p: int, dtype: ElementType[T] = int) -> Matrix[T]:
        """n x p matrix filled with dtype(1)."""
        return cls._filled(n, p, 1, dtype)

    @classmethod
    def identity(cls, n: int, dtype: ElementType[T] = int) -> Matrix[T]:
        """n x n matrix with dtype(1) on the diagonal and dtype(0) elsewhere."""
        n = check_non_negative(n, "n")
        _check_dtype(dtype)
        data = tuple(
            tuple(dtype(1) if i == j else dtype(0) for j in range(n))
            for i in range(n)
        )
        check_elements(data, "identity")
        return cls._build(data, n, n, dtype)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix[Any]:
        """
        Build a Matrix from a 2-D numeric array-like.

        Elements are converted to Python scalars. The array's shape is kept
        even when one extent is zero.
        """
        data, n_rows, n_cols, dtype = rows_from_array(array, "array")
        return cls._build(data, n_rows, n_cols, dtype)

    @classmethod
    def _filled(cls, n: int, p: int, literal: int, dtype: ElementType[T]) -> Matrix[T]:
        n = check_non_negative(n, "n")
        p = check_non_negative(p, "p")
        _check_dtype(dtype)
        data = tuple(tuple(dtype(literal) for _ in range(p)) for _ in range(n))
        check_elements(data, "dtype")
        return cls._build(data, n, p, dtype)

    @classmethod
    def _build(
        cls,
        data: tuple[tuple[T, ...], ...],
        n_rows: int,
        n_cols: int,
        dtype: ElementType[T],
    ) -> Matrix[T]:
        """Internal builder; refuses to produce a structurally invalid Matrix."""
        check_shape(data, n_rows, n_cols, "result")
        return cls(_data=data, _rows=n_rows, _cols=n_cols, _dtype=dtype)

    # --- Validation ---

    def _check_valid_dims(self, name: str = "matrix") -> None:
        """Raise DimensionMismatchError if stored data disagrees with rows/cols."""
        check_shape(self._data, self._rows, self._cols, name)

    def _check_same_dims(self, other: Matrix[Any]) -> None:
        """Validate both operands, then require identical shapes."""
        self._check_valid_dims("left")
        other._check_valid_dims("right")
        check_same_shape(self.shape, other.shape, ("left", "right"))

    # --- Accessors ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def cols(self) -> int:
        """Number of columns."""
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def dtype(self) -> ElementType[T]:
        """Element constructor used for the zero and one literals."""
        return self._dtype

    @property
    def data(self) -> list[list[T]]:
        """Fresh list-of-lists copy of the elements."""
        return [list(row) for row in self._data]

    def row(self, i: int) -> list[T]:
        """Copy of row i. Raises IndexOutOfRangeError if i >= rows."""
        i = check_index(i, self._rows, "row", "row")
        return list(self._data[i])

    def col(self, i: int) -> list[T]:
        """Copy of column i. Raises IndexOutOfRangeError if i >= cols."""
        i = check_index(i, self._cols, "column", "col")
        return list(_kernels.column(self._data, i))

    def __getitem__(self, key: tuple[int, int]) -> T:
        if not isinstance(key, tuple) or len(key) != 2:
            raise TypeError(
                "Matrix indices must be a (row, column) pair; "
                "use row(i) or col(j) for slices"
            )
        i = check_index(key[0], self._rows, "row", "matrix")
        j = check_index(key[1], self._cols, "column", "matrix")
        return self._data[i][j]

    def __iter__(self) -> Iterator[list[T]]:
        for row in self._data:
            yield list(row)

    # --- Arithmetic ---

    def add(self, other: Matrix[T]) -> Matrix[T]:
        """Elementwise sum. Raises DimensionMismatchError unless shapes match."""
        _require_matrix(other, "add")
        self._check_same_dims(other)
        data = _kernels.elementwise(self._data, other._data, operator.add)
        return self._build(data, self._rows, self._cols, _infer_dtype(data, self._dtype))

    def sub(self, other: Matrix[T]) -> Matrix[T]:
        """
        Elementwise difference. Raises DimensionMismatchError unless shapes match.

        The only operation that needs element subtraction; element types
        without it raise TypeError here.
        """
        _require_matrix(other, "sub")
        self._check_same_dims(other)
        data = _kernels.elementwise(self._data, other._data, operator.sub)
        return self._build(data, self._rows, self._cols, _infer_dtype(data, self._dtype))

    def dot(self, other: Matrix[T]) -> Matrix[T]:
        """
        Matrix product self @ other.

        Entry (n, p) is the sum over increasing k of self[n, k] * other[k, p].
        An empty inner dimension gives dtype(0) in every cell.

        Raises
        ------
        IncompatibleDimensionsError
            If self.cols != other.rows.
        """
        _require_matrix(other, "dot")
        self._check_valid_dims("left")
        other._check_valid_dims("right")
        check_inner_dims(self.shape, other.shape)
        # dtype(0) only fills cells of an empty inner dimension
        zero = self._dtype(0) if self._cols == 0 else None
        data = _kernels.matmul(self._data, other._data, other._cols, zero)
        return self._build(data, self._rows, other._cols, _infer_dtype(data, self._dtype))

    def dot_scalar(self, scalar: T) -> Matrix[T]:
        """Multiply every element by scalar, with scalar as the left operand."""
        if isinstance(scalar, Matrix):
            raise TypeError("dot_scalar expects a scalar; use dot() or @ for matrix products")
        if not is_scalar(scalar):
            raise ValidationError(
                f"scalar: type {type(scalar).__name__} is not a scalar supporting + and *"
            )
        data = _kernels.scale(scalar, self._data)
        return self._build(data, self._rows, self._cols, _infer_dtype(data, self._dtype))

    def transpose(self) -> Matrix[T]:
        """cols x rows matrix whose row i is column i of self."""
        self._check_valid_dims()
        data = _kernels.transpose(self._data, self._cols)
        return self._build(data, self._cols, self._rows, self._dtype)

    def __add__(self, other: Any) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __matmul__(self, other: Any) -> Matrix[T]:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot(other)

    def __mul__(self, scalar: Any) -> Matrix[T]:
        if isinstance(scalar, Matrix):
            raise TypeError("use @ for matrix products; * is scalar multiplication")
        if not is_scalar(scalar):
            return NotImplemented
        return self.dot_scalar(scalar)

    def __rmul__(self, scalar: Any) -> Matrix[T]:
        if not is_scalar(scalar):
            return NotImplemented
        return self.dot_scalar(scalar)

    # --- Comparison ---

    def allclose(self, other: Matrix[Any], tolerance: ToleranceTier | None = None) -> bool:
        """
        Elementwise comparison within a tolerance tier.

        The tier defaults to the one matching self.dtype. EXACT compares
        with ==, so rationals are never rounded through floats.

        Raises
        ------
        DimensionMismatchError
            If the shapes differ.
        """
        _require_matrix(other, "allclose")
        self._check_same_dims(other)
        tier = tolerance if tolerance is not None else select_tolerance(self._dtype)
        for row_a, row_b in zip(self._data, other._data):
            for a, b in zip(row_a, row_b):
                if tier.rtol == 0.0 and tier.atol == 0.0:
                    if a != b:
                        return False
                elif not cmath.isclose(a, b, rel_tol=tier.rtol, abs_tol=tier.atol):
                    return False
        return True

    # --- Conversion & display ---

    def to_numpy(self, dtype: Any = None) -> NDArray[Any]:
        """New (rows, cols) ndarray; warns if numpy falls back to object dtype."""
        return rows_to_array(self._data, self._rows, self._cols, dtype)

    def __str__(self) -> str:
        return "\n".join(repr([_plain(v) for v in row]) for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, data={self.data!r})"
