"""
Tests for the Matrix data model.

Validates:
    - Construction (zeros, identity, from_rows, as_matrix)
    - Invariants: positive shape, float64 entries, value semantics
    - Equality and tolerance comparison
    - Python operators delegate to the named operations
"""

import numpy as np
import pytest

from pymatrix import Matrix, as_matrix
from pymatrix.core.compute.tolerances import FP64
from pymatrix.core.exceptions import (
    DimensionError,
    IncompatibleShapesError,
    ParseError,
    ShapeMismatchError,
    SingularMatrixError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_zeros(self):
        m = Matrix.zeros(2, 3)
        assert m.rows == 2
        assert m.cols == 3
        assert m.to_list() == [[0.0, 0.0, 0.0], [0.0, 0.0, 0.0]]

    @pytest.mark.parametrize("rows, cols", [(0, 1), (1, 0), (-2, 2)])
    def test_zeros_rejects_non_positive(self, rows, cols):
        with pytest.raises(ValidationError):
            Matrix.zeros(rows, cols)

    def test_identity(self):
        assert Matrix.identity(3).to_list() == [
            [1.0, 0.0, 0.0],
            [0.0, 1.0, 0.0],
            [0.0, 0.0, 1.0],
        ]

    def test_from_rows_converts_to_float64(self):
        m = Matrix.from_rows([[1, 2], [3, 4]])
        assert m.data.dtype == np.float64
        assert m.shape == (2, 2)

    def test_from_rows_rejects_1d(self):
        with pytest.raises(DimensionError):
            Matrix.from_rows([1.0, 2.0])

    def test_from_rows_rejects_empty(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([[]])

    def test_from_rows_rejects_ragged(self):
        with pytest.raises(ValidationError):
            Matrix.from_rows([[1.0, 2.0], [3.0]])


class TestAsMatrix:

    def test_matrix_passthrough(self, m2):
        assert as_matrix(m2) is m2

    def test_text_is_parsed(self, m2):
        assert as_matrix("1 2\n3 4") == m2

    def test_array_like(self, m2):
        assert as_matrix(np.array([[1, 2], [3, 4]])) == m2

    def test_bad_text_raises_parse_error(self):
        with pytest.raises(ParseError):
            as_matrix("1 x")


# ═══════════════════════════════════════════════════════════════════════
# Value semantics
# ═══════════════════════════════════════════════════════════════════════


class TestValueSemantics:

    def test_source_array_not_aliased(self):
        source = np.array([[1.0, 2.0], [3.0, 4.0]])
        m = Matrix.from_rows(source)
        source[0, 0] = 99.0
        assert m[0, 0] == 1.0

    def test_data_is_read_only(self, m2):
        with pytest.raises(ValueError):
            m2.data[0, 0] = 5.0

    def test_to_list_is_a_copy(self, m2):
        rows = m2.to_list()
        rows[0][0] = 99.0
        assert m2[0, 0] == 1.0

    def test_operation_result_is_independent(self, m2):
        t = m2.transpose()
        assert not np.shares_memory(t.data, m2.data)

    def test_element_access_returns_float(self, m2):
        value = m2[1, 0]
        assert isinstance(value, float)
        assert value == 3.0


# ═══════════════════════════════════════════════════════════════════════
# Comparison
# ═══════════════════════════════════════════════════════════════════════


class TestComparison:

    def test_equal(self, m2):
        assert m2 == Matrix.from_rows([[1, 2], [3, 4]])

    def test_not_equal_values(self, m2):
        assert m2 != Matrix.from_rows([[1, 2], [3, 5]])

    def test_not_equal_shape(self):
        assert Matrix.zeros(2, 2) != Matrix.zeros(2, 3)

    def test_not_equal_other_type(self, m2):
        assert m2 != [[1, 2], [3, 4]]

    def test_isclose_within_tolerance(self, m2):
        nudged = Matrix.from_rows(m2.data + 1e-14)
        assert m2 != nudged
        assert m2.isclose(nudged, tolerance=FP64)

    def test_isclose_different_shape(self):
        assert not Matrix.zeros(1, 2).isclose(Matrix.zeros(2, 1))

    def test_unhashable(self, m2):
        with pytest.raises(TypeError):
            hash(m2)


# ═══════════════════════════════════════════════════════════════════════
# Operators
# ═══════════════════════════════════════════════════════════════════════


class TestOperators:

    def test_add(self, m2):
        ones = Matrix.from_rows([[1, 1], [1, 1]])
        assert (m2 + ones).to_list() == [[2.0, 3.0], [4.0, 5.0]]

    def test_add_mismatch_raises(self, m2):
        with pytest.raises(ShapeMismatchError):
            m2 + Matrix.zeros(2, 3)

    def test_sub(self, m2):
        assert (m2 - m2) == Matrix.zeros(2, 2)

    def test_neg(self, m2):
        assert (-m2).to_list() == [[-1.0, -2.0], [-3.0, -4.0]]

    def test_scalar_mul_both_sides(self, m2):
        assert (m2 * 2).to_list() == [[2.0, 4.0], [6.0, 8.0]]
        assert (2.5 * m2) == m2 * 2.5

    def test_mul_by_matrix_is_type_error(self, m2):
        with pytest.raises(TypeError):
            m2 * m2

    def test_matmul(self, m2):
        other = Matrix.from_rows([[5, 6], [7, 8]])
        assert (m2 @ other).to_list() == [[19.0, 22.0], [43.0, 50.0]]

    def test_matmul_incompatible_raises(self, m2):
        with pytest.raises(IncompatibleShapesError):
            m2 @ Matrix.zeros(3, 2)

    def test_transpose_property(self):
        m = Matrix.from_rows([[1, 2, 3]])
        assert m.T.shape == (3, 1)

    def test_determinant_method(self, m2):
        assert m2.determinant() == -2.0

    def test_inverse_method_singular(self):
        with pytest.raises(SingularMatrixError):
            Matrix.from_rows([[1, 2], [2, 4]]).inverse()


class TestDisplay:

    def test_str_is_formatted_text(self, m2):
        assert str(m2) == " 1  2 \n 3  4 \n"

    def test_repr(self, m2):
        assert repr(m2) == "Matrix(rows=2, cols=2, data=[[1.0, 2.0], [3.0, 4.0]])"
