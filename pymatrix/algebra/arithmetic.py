"""
Elementwise and product arithmetic.

Every function validates shapes at the boundary and returns a fresh
Matrix; operands are never modified.
"""

from __future__ import annotations

from numbers import Real

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.matrix import Matrix, MatrixLike, as_matrix
from pymatrix.core.validation import check_same_shape, check_multipliable


def transpose(matrix: MatrixLike) -> Matrix:
    """
    Transpose: result[j, i] = matrix[i, j].

    Never fails for a valid matrix.
    """
    m = as_matrix(matrix)
    return Matrix._build(m.data.T)


def add(left: MatrixLike, right: MatrixLike) -> Matrix:
    """
    Elementwise sum.

    Raises:
        ShapeMismatchError: If the operands' shapes differ
    """
    a, b = as_matrix(left), as_matrix(right)
    check_same_shape(a, b)
    return Matrix._build(a.data + b.data)


def subtract(left: MatrixLike, right: MatrixLike) -> Matrix:
    """
    Elementwise difference left - right.

    Raises:
        ShapeMismatchError: If the operands' shapes differ
    """
    a, b = as_matrix(left), as_matrix(right)
    check_same_shape(a, b)
    return Matrix._build(a.data - b.data)


def scalar_multiply(matrix: MatrixLike, scalar: float) -> Matrix:
    """
    Multiply every entry by a real scalar.

    Raises:
        ValidationError: If scalar is not a real number
    """
    if isinstance(scalar, bool) or not isinstance(scalar, Real):
        raise ValidationError(
            f"scalar: expected a real number, got {type(scalar).__name__}"
        )
    m = as_matrix(matrix)
    return Matrix._build(m.data * float(scalar))


def multiply(left: MatrixLike, right: MatrixLike) -> Matrix:
    """
    Matrix product: result[i, j] = sum_k left[i, k] * right[k, j].

    The result has shape (left.rows, right.cols).

    Raises:
        IncompatibleShapesError: If left.cols != right.rows
    """
    a, b = as_matrix(left), as_matrix(right)
    check_multipliable(a, b)
    return Matrix._build(a.data @ b.data)
