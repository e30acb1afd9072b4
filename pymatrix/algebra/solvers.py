"""
Solver dispatch for determinant and inverse.

Both sit behind a stable signature with a method keyword, so the naive
cofactor algorithms can be swapped for the LU kernels without changing
callers:

    determinant(m)                 # cofactor expansion, O(n!)
    determinant(m, method='lu')    # LU factorisation, O(n^3)
    inverse(m)                     # adjugate / det
    inverse(m, method='lu')        # LU solve against the identity

Singularity is decided by an exact comparison det == 0.0; no tolerance
is applied, so nearly singular matrices invert to very large entries
instead of raising.
"""

from __future__ import annotations

from typing import Callable
import warnings
import numpy as np

from pymatrix.core.exceptions import SingularMatrixError, ValidationError
from pymatrix.core.matrix import Matrix, MatrixLike, as_matrix
from pymatrix.core.methods import (
    METHOD_COFACTOR,
    METHOD_LU,
    METHOD_ADJUGATE,
    DETERMINANT_METHODS,
    INVERSE_METHODS,
    COFACTOR_ORDER_LIMIT,
)
from pymatrix.core.validation import check_square
from pymatrix.core.compute.linalg import (
    cofactor_det,
    adjugate_inverse,
    lu_det,
    lu_inverse,
)


def _get_determinant_kernel(method: str) -> Callable[[np.ndarray], float]:
    if method == METHOD_COFACTOR:
        return cofactor_det
    if method == METHOD_LU:
        return lu_det
    raise ValidationError(
        f"Unknown determinant method: {method!r} "
        f"(expected one of {sorted(DETERMINANT_METHODS)})"
    )


def _warn_if_cofactor_too_large(n: int) -> None:
    if n > COFACTOR_ORDER_LIMIT:
        warnings.warn(
            f"Cofactor expansion of a {n}x{n} matrix costs O(n!) and is "
            f"impractical above order {COFACTOR_ORDER_LIMIT}; "
            f"pass method='lu' instead.",
            RuntimeWarning,
            stacklevel=3,
        )


def determinant(matrix: MatrixLike, *, method: str = METHOD_COFACTOR) -> float:
    """
    Determinant of a square matrix.

    Args:
        matrix: Square matrix (or anything as_matrix accepts)
        method: 'cofactor' (default) or 'lu'

    Returns:
        det(matrix) as a Python float

    Raises:
        NotSquareError: If rows != cols
        ValidationError: If method is unknown, or method='lu' and the
            matrix contains NaN or Inf

    Example:
        >>> determinant("1 2\\n3 4")
        -2.0
    """
    kernel = _get_determinant_kernel(method)
    m = as_matrix(matrix)
    check_square(m)
    if method == METHOD_COFACTOR:
        _warn_if_cofactor_too_large(m.rows)
    return float(kernel(m.data))


def inverse(matrix: MatrixLike, *, method: str = METHOD_ADJUGATE) -> Matrix:
    """
    Inverse of a square, nonsingular matrix.

    The adjugate method computes det(A) by cofactor expansion, builds the
    cofactor matrix C[i, j] = (-1)^(i+j) det(M_ij) and returns
    C^T * (1 / det(A)). A 1x1 matrix inverts to [[1 / det]] directly.

    Args:
        matrix: Square matrix (or anything as_matrix accepts)
        method: 'adjugate' (default) or 'lu'

    Returns:
        A fresh Matrix holding the inverse

    Raises:
        NotSquareError: If rows != cols
        SingularMatrixError: If the determinant is exactly 0
        ValidationError: If method is unknown
    """
    if method not in INVERSE_METHODS:
        raise ValidationError(
            f"Unknown inverse method: {method!r} "
            f"(expected one of {sorted(INVERSE_METHODS)})"
        )
    m = as_matrix(matrix)
    check_square(m)

    det_method = METHOD_LU if method == METHOD_LU else METHOD_COFACTOR
    if det_method == METHOD_COFACTOR:
        _warn_if_cofactor_too_large(m.rows)
    det = float(_get_determinant_kernel(det_method)(m.data))

    if det == 0.0:
        raise SingularMatrixError(
            "Matrix is not invertible (determinant is 0)",
            matrix_name='matrix',
            determinant=det,
        )

    if m.rows == 1:
        return Matrix._build(np.array([[1.0 / det]]))

    if method == METHOD_LU:
        return Matrix._build(lu_inverse(m.data))
    return Matrix._build(adjugate_inverse(m.data, det))
