"""
pymatrix: a minimal, correctness-focused dense matrix type for Python.

Generic over the element type: anything supporting +, - and * works,
from int and float to fractions.Fraction and numpy scalars.

Submodules:
    core: Exceptions, validators, numeric protocols, tolerance tiers
    dense: The Matrix value type
    demo: Demonstration program (python -m pymatrix)
"""

__version__ = "0.1.0"

from pymatrix.dense import Matrix
from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
    IndexOutOfRangeError,
)

__all__ = [
    "__version__",
    "Matrix",
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleDimensionsError",
    "IndexOutOfRangeError",
]
