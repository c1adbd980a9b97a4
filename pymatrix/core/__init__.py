"""
Core infrastructure for pymatrix.

This module provides shared abstractions and utilities used by the
dense matrix implementation.

Key components:
    protocols: Scalar, ElementType numeric-capability protocols
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Tolerance tiers for approximate comparison
"""

from pymatrix.core.protocols import Scalar, ElementType
from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    DimensionError,
    DimensionMismatchError,
    IncompatibleDimensionsError,
    IndexOutOfRangeError,
)
from pymatrix.core.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP32,
    DEFAULT_TOLERANCE,
    select_tolerance,
)

__all__ = [
    # Protocols
    "Scalar",
    "ElementType",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "DimensionError",
    "DimensionMismatchError",
    "IncompatibleDimensionsError",
    "IndexOutOfRangeError",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP32",
    "DEFAULT_TOLERANCE",
    "select_tolerance",
]
