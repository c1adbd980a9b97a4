"""
Tests for the textual rendering of a Matrix.
"""

from fractions import Fraction

import numpy as np

from pymatrix import Matrix


class TestStr:

    def test_ones(self):
        assert str(Matrix.ones(3, 4)) == "\n".join(["[1, 1, 1, 1]"] * 3)

    def test_no_trailing_newline(self, m1):
        assert not str(m1).endswith("\n")
        assert str(m1).splitlines() == ["[1, 2, 1]", "[4, 1, 3]"]

    def test_floats_use_repr(self):
        assert str(Matrix.from_rows([[0.5, 2.0]])) == "[0.5, 2.0]"

    def test_debug_rendering_of_elements(self):
        assert str(Matrix.from_rows([[Fraction(1, 2)]])) == "[Fraction(1, 2)]"

    def test_numpy_scalars_render_as_python_values(self):
        assert str(np.int64(2) * Matrix.ones(1, 3)) == "[2, 2, 2]"
        assert str(Matrix.ones(1, 2, dtype=np.int32)) == "[1, 1]"
        assert str(Matrix.from_rows([[np.float64(0.5)]])) == "[0.5]"

    def test_empty(self):
        assert str(Matrix.from_rows([])) == ""
        assert str(Matrix.zeros(2, 0)) == "[]\n[]"


class TestRepr:

    def test_repr(self, m1):
        assert repr(m1) == "Matrix(rows=2, cols=3, data=[[1, 2, 1], [4, 1, 3]])"

    def test_repr_keeps_zero_extent(self):
        assert repr(Matrix.zeros(0, 3)) == "Matrix(rows=0, cols=3, data=[])"
