"""
Conversion between Matrix storage and numpy arrays.
"""

from __future__ import annotations

import warnings
from typing import Any

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.validation import check_array, check_2d
from pymatrix.dense._kernels import Rows


def rows_from_array(array: ArrayLike, name: str) -> tuple[Rows, int, int, type]:
    """
    Validate a 2-D numeric array-like and unpack it into Python scalars.

    Returns:
        (rows, n_rows, n_cols, dtype); the shape is taken from the array so
        zero extents such as (0, 3) survive, and dtype is the Python scalar
        type numpy converts the array's elements to.
    """
    arr = check_array(array, name)
    check_2d(arr, name)
    n_rows, n_cols = arr.shape
    rows = tuple(tuple(row) for row in arr.tolist())
    dtype = type(arr.dtype.type(0).item())
    return rows, int(n_rows), int(n_cols), dtype


def rows_to_array(data: Rows, n_rows: int, n_cols: int, dtype: Any = None) -> NDArray[Any]:
    """Build a fresh (n_rows, n_cols) ndarray from row tuples."""
    if n_rows == 0 or n_cols == 0:
        return np.empty((n_rows, n_cols), dtype=dtype if dtype is not None else np.float64)

    result = np.array(data, dtype=dtype)
    if result.dtype == object:
        warnings.warn(
            "Matrix elements have no native numpy dtype; "
            "returning an object array",
            UserWarning,
            stacklevel=3,
        )
    return result
