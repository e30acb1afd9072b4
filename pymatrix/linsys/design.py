"""
Linear system design.

Design wraps an augmented matrix [A|b] describing A x = b with n
equations in n unknowns. It validates the shape once so backends can
trust it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import DimensionError
from pymatrix.core.matrix import Matrix, MatrixLike, as_matrix
from pymatrix.core.validation import check_array, check_augmented, check_square


@dataclass(frozen=True)
class LinearSystemDesign:
    """
    Augmented system specification.

    Immutable after construction.

    Construction:
        LinearSystemDesign.from_matrix("2 3 5 10\\n1 -1 2 3\\n3 2 -1 4")
        LinearSystemDesign.from_parts(A, b)
    """
    _augmented: Matrix
    _n: int

    @classmethod
    def from_matrix(
        cls,
        system: MatrixLike,
        *,
        purpose: str = "Gaussian elimination",
    ) -> LinearSystemDesign:
        """
        Build a design from an augmented matrix.

        Args:
            system: n x (n + 1) augmented matrix, as a Matrix, text or array-like
            purpose: Name of the requesting method, used in the error message

        Raises:
            InvalidAugmentedError: If cols != rows + 1
        """
        m = as_matrix(system)
        check_augmented(m, purpose)
        return cls(_augmented=m, _n=m.rows)

    @classmethod
    def from_parts(cls, coefficients: MatrixLike, constants: ArrayLike) -> LinearSystemDesign:
        """
        Build a design from a square coefficient matrix and a constants vector.

        Raises:
            NotSquareError: If coefficients is not square
            DimensionError: If constants does not have one entry per row
        """
        a = as_matrix(coefficients)
        check_square(a)
        b = check_array(constants, 'constants').ravel()
        if b.shape[0] != a.rows:
            raise DimensionError(
                f"constants: expected {a.rows} entries, got {b.shape[0]}"
            )
        augmented = np.column_stack([a.data, b])
        return cls(_augmented=Matrix._build(augmented), _n=a.rows)

    # === Properties ===

    @property
    def augmented(self) -> Matrix:
        """Augmented matrix [A|b] (n x n+1)."""
        return self._augmented

    @property
    def n(self) -> int:
        """Number of equations (and unknowns)."""
        return self._n

    @property
    def coefficients(self) -> Matrix:
        """Coefficient block A (n x n)."""
        return Matrix._build(self._augmented.data[:, :self._n])

    @property
    def constants(self) -> NDArray[np.floating[Any]]:
        """Right-hand side b (n,), a fresh copy."""
        return np.array(self._augmented.data[:, self._n], dtype=np.float64)

    def __repr__(self) -> str:
        return f"LinearSystemDesign(n={self._n})"
