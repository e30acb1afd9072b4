"""
Tests for determinant() and inverse().

Covers the cofactor and LU methods, the exact-zero singularity rule,
and the algebraic identities both must satisfy.
"""

import warnings

import numpy as np
import pytest

from pymatrix import Matrix
from pymatrix.algebra import determinant, inverse, multiply, transpose
from pymatrix.algebra import solvers as algebra_solvers
from pymatrix.core.compute.tolerances import FP64
from pymatrix.core.exceptions import NotSquareError, SingularMatrixError, ValidationError
from pymatrix.core.methods import COFACTOR_ORDER_LIMIT


# ═══════════════════════════════════════════════════════════════════════
# determinant
# ═══════════════════════════════════════════════════════════════════════


class TestDeterminant:

    def test_1x1(self):
        assert determinant("5") == 5.0

    def test_2x2(self):
        assert determinant("1 2\n3 4") == -2.0

    def test_3x3(self):
        assert determinant("6 1 1\n4 -2 5\n2 8 7") == pytest.approx(-306.0)

    def test_4x4_upper_triangular(self):
        m = Matrix.from_rows(np.triu(np.arange(1.0, 17.0).reshape(4, 4)))
        assert determinant(m) == pytest.approx(1.0 * 6.0 * 11.0 * 16.0)

    @pytest.mark.parametrize("n", [1, 2, 3, 4, 5, 6])
    def test_identity(self, n):
        assert determinant(Matrix.identity(n)) == 1.0

    def test_transpose_invariant(self, rng):
        for n in (2, 3, 4, 5):
            m = Matrix.from_rows(rng.standard_normal((n, n)))
            assert determinant(transpose(m)) == pytest.approx(determinant(m), rel=1e-10)

    def test_row_swap_flips_sign(self):
        assert determinant("3 4\n1 2") == 2.0

    def test_not_square(self):
        with pytest.raises(NotSquareError, match="square matrices"):
            determinant(Matrix.zeros(2, 3))

    def test_returns_python_float(self):
        assert type(determinant("1 2\n3 4")) is float

    def test_unknown_method(self):
        with pytest.raises(ValidationError, match="Unknown determinant method"):
            determinant("1", method="qr")

    def test_large_order_warns(self, monkeypatch):
        # lower the limit so the check stays cheap
        monkeypatch.setattr(algebra_solvers, "COFACTOR_ORDER_LIMIT", 2)
        with pytest.warns(RuntimeWarning, match="method='lu'"):
            assert determinant(Matrix.identity(3)) == 1.0

    def test_large_order_inverse_warns(self, monkeypatch):
        monkeypatch.setattr(algebra_solvers, "COFACTOR_ORDER_LIMIT", 2)
        with pytest.warns(RuntimeWarning, match="impractical"):
            inverse(Matrix.identity(3))

    def test_limit_order_does_not_warn(self):
        m = Matrix.identity(3)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            determinant(m)


class TestDeterminantLU:

    def test_matches_cofactor(self, rng):
        for n in (1, 2, 3, 5):
            m = Matrix.from_rows(rng.standard_normal((n, n)))
            assert determinant(m, method="lu") == pytest.approx(determinant(m), rel=1e-10)

    def test_singular_is_zero(self):
        assert determinant("1 2\n2 4", method="lu") == 0.0

    def test_large_order_no_warning(self):
        m = Matrix.identity(COFACTOR_ORDER_LIMIT + 5)
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert determinant(m, method="lu") == 1.0

    def test_not_square(self):
        with pytest.raises(NotSquareError):
            determinant(Matrix.zeros(3, 2), method="lu")


# ═══════════════════════════════════════════════════════════════════════
# inverse
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_2x2(self):
        assert inverse("1 2\n3 4").to_list() == [[-2.0, 1.0], [1.5, -0.5]]

    def test_1x1(self):
        assert inverse("4").to_list() == [[0.25]]

    def test_identity(self):
        assert inverse(Matrix.identity(3)) == Matrix.identity(3)

    def test_product_is_identity(self, well_conditioned):
        product = multiply(well_conditioned, inverse(well_conditioned))
        assert product.isclose(Matrix.identity(4), FP64)

    def test_inverse_of_inverse(self, well_conditioned):
        assert inverse(inverse(well_conditioned)).isclose(well_conditioned, FP64)

    def test_singular(self):
        with pytest.raises(SingularMatrixError, match="not invertible") as exc_info:
            inverse("1 2\n2 4")
        assert exc_info.value.determinant == 0.0

    def test_singular_1x1(self):
        with pytest.raises(SingularMatrixError):
            inverse("0")

    def test_not_square_propagates(self):
        with pytest.raises(NotSquareError):
            inverse(Matrix.zeros(2, 3))

    def test_nearly_singular_is_not_rejected(self):
        m = Matrix.from_rows([[1.0, 1.0], [1.0, 1.0 + 1e-12]])
        assert np.all(np.isfinite(inverse(m).data))

    def test_unknown_method(self):
        with pytest.raises(ValidationError, match="Unknown inverse method"):
            inverse("1 2\n3 4", method="gauss")


class TestInverseLU:

    def test_matches_adjugate(self, well_conditioned):
        assert inverse(well_conditioned, method="lu").isclose(inverse(well_conditioned), FP64)

    def test_singular(self):
        with pytest.raises(SingularMatrixError):
            inverse("1 2\n2 4", method="lu")

    def test_1x1(self):
        assert inverse("8", method="lu").to_list() == [[0.125]]
