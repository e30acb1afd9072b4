"""
Cofactor expansion kernels.

Naive recursive Laplace expansion along row 0, and the cofactor matrix
used to build the adjugate inverse. Cost is O(n!) in the order n: these
are practical only for small matrices (n <= 8-10), and recursion depth
grows with n. The LU kernels in pymatrix.core.compute.linalg.lu provide
the O(n^3) alternative behind the same public interface.

All functions take and return plain float64 ndarrays; shape validation
happens in pymatrix.algebra before these are called.
"""

from typing import Any
import numpy as np
from numpy.typing import NDArray


def minor(a: NDArray[np.floating[Any]], row: int, col: int) -> NDArray[np.float64]:
    """Submatrix of a with one row and one column deleted."""
    return np.delete(np.delete(a, row, axis=0), col, axis=1)


def cofactor_det(a: NDArray[np.floating[Any]]) -> float:
    """
    Determinant by cofactor expansion along the first row.

    Base cases:
        1x1: the single entry
        2x2: ad - bc

    General case:
        det(A) = sum_j a[0, j] * det(M_0j) * (+1 if j even else -1)

    Args:
        a: Square matrix (n x n), n >= 1

    Returns:
        The determinant as a Python float
    """
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    det = 0.0
    for j in range(n):
        sign = 1.0 if j % 2 == 0 else -1.0
        det += a[0, j] * cofactor_det(minor(a, 0, j)) * sign
    return float(det)


def cofactor_matrix(a: NDArray[np.floating[Any]]) -> NDArray[np.float64]:
    """
    Matrix of signed minor determinants.

    C[i, j] = det(M_ij) * (+1 if (i + j) even else -1)

    Args:
        a: Square matrix (n x n), n >= 2

    Returns:
        Cofactor matrix (n x n)
    """
    n = a.shape[0]
    cofactors = np.zeros((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            cofactors[i, j] = cofactor_det(minor(a, i, j)) * sign
    return cofactors


def adjugate_inverse(a: NDArray[np.floating[Any]], det: float) -> NDArray[np.float64]:
    """
    Inverse as adj(A) / det(A), adj(A) = C^T.

    The caller is responsible for rejecting det == 0.

    Args:
        a: Square matrix (n x n), n >= 2
        det: det(a), already computed and known to be nonzero

    Returns:
        A^-1 (n x n)
    """
    return cofactor_matrix(a).T * (1.0 / det)
