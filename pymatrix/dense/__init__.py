"""
Dense matrix module.

Public API:
    Matrix              - Immutable row-major matrix over a generic element
    Matrix.from_rows    - Build from a sequence of rows
    Matrix.zeros/ones   - Constant-filled factories
    Matrix.identity     - Identity factory
    Matrix.from_array   - Build from a 2-D numpy array
"""

from pymatrix.dense.matrix import Matrix

__all__ = [
    "Matrix",
]
