"""
Pure-Python kernels for dense matrix arithmetic.

Operate on row-major tuples of tuples and return new tuples. No shape
checking happens here; callers validate before calling.

Correctness-first: plain loops, no blocking or vectorization.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any

Rows = tuple[tuple[Any, ...], ...]


def elementwise(left: Rows, right: Rows, op: Callable[[Any, Any], Any]) -> Rows:
    """Apply op to each pair of matching elements."""
    return tuple(
        tuple(op(x, y) for x, y in zip(row_a, row_b))
        for row_a, row_b in zip(left, right)
    )


def scale(scalar: Any, data: Rows) -> Rows:
    """Multiply every element by scalar, scalar on the left."""
    return tuple(tuple(scalar * v for v in row) for row in data)


def column(data: Rows, j: int) -> tuple[Any, ...]:
    """Gather element j of every row."""
    return tuple(row[j] for row in data)


def transpose(data: Rows, n_cols: int) -> Rows:
    """Row i of the result is column i of data."""
    return tuple(column(data, j) for j in range(n_cols))


def fold_products(xs: Iterable[Any], ys: Iterable[Any], zero: Any) -> Any:
    """
    Sum of x * y accumulated left to right.

    The first product seeds the accumulator so no foreign zero is mixed
    into the element type; zero is returned only for empty input.
    """
    acc = None
    for x, y in zip(xs, ys):
        prod = x * y
        acc = prod if acc is None else acc + prod
    return zero if acc is None else acc


def matmul(left: Rows, right: Rows, n_out_cols: int, zero: Any) -> Rows:
    """
    Standard inner-product matrix multiplication.

    Entry (n, p) is the sum over increasing k of left[n][k] * right[k][p].
    """
    right_cols = [column(right, p) for p in range(n_out_cols)]
    return tuple(
        tuple(fold_products(row, col, zero) for col in right_cols)
        for row in left
    )
