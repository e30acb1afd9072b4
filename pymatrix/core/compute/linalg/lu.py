"""
LU decomposition kernels (SciPy / LAPACK getrf).

O(n^3) replacements for the cofactor kernels with the same contracts:
lu_det returns det(A), lu_inverse returns A^-1 for nonsingular A.
Used when callers pass method='lu' to determinant() or inverse().
"""

from dataclasses import dataclass
from typing import Any
import warnings
import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgWarning, lu_factor, lu_solve

from pymatrix.core.validation import check_finite


@dataclass(frozen=True)
class LUResult:
    """
    Result of an LU factorisation with partial pivoting.

    Attributes:
        lu: Packed L (unit lower, below diagonal) and U (on and above)
        piv: LAPACK pivot indices (row i was interchanged with row piv[i])
        n_swaps: Number of actual row interchanges
    """
    lu: NDArray[np.float64]
    piv: NDArray[np.int32]
    n_swaps: int

    @property
    def determinant(self) -> float:
        sign = -1.0 if self.n_swaps % 2 else 1.0
        return float(sign * np.prod(np.diag(self.lu)))


def lu_cpu(a: NDArray[np.floating[Any]]) -> LUResult:
    """
    Factor a square matrix as P A = L U.

    Singular input factors fine (a zero lands on U's diagonal); SciPy's
    LinAlgWarning for that case is suppressed since singularity is decided
    by the caller from the determinant.

    Raises:
        ValidationError: If a contains NaN or Inf
    """
    check_finite(a, 'matrix')
    with warnings.catch_warnings():
        warnings.simplefilter('ignore', LinAlgWarning)
        lu, piv = lu_factor(a)
    n_swaps = int(np.sum(piv != np.arange(len(piv))))
    return LUResult(lu=lu, piv=piv, n_swaps=n_swaps)


def lu_det(a: NDArray[np.floating[Any]]) -> float:
    """Determinant from the LU factors: sign(P) * prod(diag(U))."""
    return lu_cpu(a).determinant


def lu_inverse(a: NDArray[np.floating[Any]]) -> NDArray[np.float64]:
    """
    Inverse by solving A X = I with the LU factors.

    The caller is responsible for rejecting singular a.
    """
    factors = lu_cpu(a)
    n = a.shape[0]
    return lu_solve((factors.lu, factors.piv), np.eye(n, dtype=np.float64))
