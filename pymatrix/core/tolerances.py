"""
Tolerance tiers for approximate matrix comparison.

Defines precision expectations for different element types:
- Exact types (int, Fraction, Decimal): no tolerance at all
- Double precision (float, complex, numpy.float64): machine precision
- Single/half precision (numpy.float32, numpy.float16): relaxed

Used by Matrix.allclose and the test suite.
"""

from dataclasses import dataclass
from typing import Any

import numpy as np


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Integers and rationals: results must be identical
EXACT = ToleranceTier(
    rtol=0.0,
    atol=0.0,
    name='exact',
    description='Exact arithmetic — elements must compare equal',
)

# Python float / complex and numpy double precision
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision — accumulated rounding only',
)

# numpy single and half precision
FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision — relaxed for short mantissas',
)

DEFAULT_TOLERANCE = FP64


def select_tolerance(dtype: Any) -> ToleranceTier:
    """Select appropriate tolerance tier for a given element type."""
    if isinstance(dtype, type) and issubclass(dtype, np.generic):
        if issubclass(dtype, np.inexact):
            if np.finfo(dtype).bits < 64:
                return FP32
            return FP64
        return EXACT
    if dtype in (float, complex):
        return FP64
    return EXACT
