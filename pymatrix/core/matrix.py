"""
The Matrix data model.

A Matrix is a dense, real-valued, row-major rows x cols block of float64
values with rows > 0 and cols > 0. It has value semantics: the backing
array is a private read-only copy, every operation returns a fresh Matrix,
and no Matrix ever shares storage with another.

Construction:
    Matrix.zeros(2, 3)                  # zero-filled
    Matrix.identity(3)
    Matrix.from_rows([[1, 2], [3, 4]])  # any 2-D array-like
    as_matrix("1 2\\n3 4")             # Matrix, text or array-like

Python operators delegate to the named operations in pymatrix.algebra
and raise exactly the same errors:
    a + b, a - b, -a, 2.5 * a, a * 2.5, a @ b
"""

from __future__ import annotations

from dataclasses import dataclass
from numbers import Real
from typing import Any, Union
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.compute.tolerances import ToleranceTier, DEFAULT_TOLERANCE
from pymatrix.core.validation import check_array, check_2d, check_positive_shape


@dataclass(frozen=True, eq=False)
class Matrix:
    """
    Dense real matrix with value semantics.

    Construct via the factory classmethods, not directly.
    """
    _data: NDArray[np.float64]

    # === Construction ===

    @classmethod
    def zeros(cls, rows: int, cols: int) -> Matrix:
        """Zero-filled rows x cols matrix."""
        check_positive_shape(rows, cols, 'Matrix')
        return cls._build(np.zeros((int(rows), int(cols)), dtype=np.float64))

    @classmethod
    def identity(cls, n: int) -> Matrix:
        """n x n identity matrix."""
        check_positive_shape(n, n, 'identity')
        return cls._build(np.eye(int(n), dtype=np.float64))

    @classmethod
    def from_rows(cls, rows: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2-D array-like (nested lists, ndarray).

        Raises:
            ValidationError: If the input is ragged, non-numeric or empty
            DimensionError: If the input is not 2-D
        """
        data = check_array(rows, 'rows')
        check_2d(data, 'rows')
        check_positive_shape(data.shape[0], data.shape[1], 'rows')
        return cls._build(data)

    @classmethod
    def _build(cls, data: NDArray) -> Matrix:
        """Internal builder; always takes a private copy."""
        owned = np.array(data, dtype=np.float64, copy=True)
        owned.setflags(write=False)
        return cls(_data=owned)

    # === Properties ===

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def cols(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return (self._data.shape[0], self._data.shape[1])

    @property
    def data(self) -> NDArray[np.float64]:
        """Read-only view of the entries (rows x cols)."""
        return self._data

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def to_list(self) -> list[list[float]]:
        """Entries as a fresh nested list of Python floats."""
        return self._data.tolist()

    def __getitem__(self, index: Any) -> Any:
        value = self._data[index]
        if isinstance(value, np.ndarray):
            return value
        return float(value)

    # === Comparison ===

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None

    def isclose(self, other: Matrix, tolerance: ToleranceTier = DEFAULT_TOLERANCE) -> bool:
        """Shape-equal and elementwise close within the tolerance tier."""
        if self.shape != other.shape:
            return False
        return bool(np.allclose(
            self._data, other._data, rtol=tolerance.rtol, atol=tolerance.atol
        ))

    # === Algebra ===

    def transpose(self) -> Matrix:
        from pymatrix.algebra import transpose
        return transpose(self)

    def determinant(self, method: str = 'cofactor') -> float:
        from pymatrix.algebra import determinant
        return determinant(self, method=method)

    def inverse(self, method: str = 'adjugate') -> Matrix:
        from pymatrix.algebra import inverse
        return inverse(self, method=method)

    def __add__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.algebra import add
        return add(self, other)

    def __sub__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.algebra import subtract
        return subtract(self, other)

    def __neg__(self) -> Matrix:
        from pymatrix.algebra import scalar_multiply
        return scalar_multiply(self, -1.0)

    def __mul__(self, scalar: object) -> Matrix:
        if isinstance(scalar, bool) or not isinstance(scalar, Real):
            return NotImplemented
        from pymatrix.algebra import scalar_multiply
        return scalar_multiply(self, float(scalar))

    __rmul__ = __mul__

    def __matmul__(self, other: object) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        from pymatrix.algebra import multiply
        return multiply(self, other)

    # === Display ===

    def __str__(self) -> str:
        from pymatrix.textio import format_matrix
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.to_list()!r})"


MatrixLike = Union[Matrix, str, ArrayLike]


def as_matrix(value: MatrixLike) -> Matrix:
    """
    Coerce an operand to a Matrix at the API boundary.

    Matrices pass through unchanged (they are immutable), strings are
    parsed with pymatrix.textio.parse, anything else goes through
    Matrix.from_rows.
    """
    if isinstance(value, Matrix):
        return value
    if isinstance(value, str):
        from pymatrix.textio import parse
        return parse(value)
    return Matrix.from_rows(value)
