"""
Core matrix algebra.

Public API:
    transpose(m)            -> Matrix
    determinant(m)          -> float
    inverse(m)              -> Matrix
    add(a, b)               -> Matrix
    subtract(a, b)          -> Matrix
    scalar_multiply(m, k)   -> Matrix
    multiply(a, b)          -> Matrix

Every operation is a pure function: operands may be Matrix objects,
matrix text or 2-D array-likes, and each call returns a freshly owned
result or raises one of the errors in pymatrix.core.exceptions.

Example:
    >>> from pymatrix.algebra import determinant, inverse
    >>> determinant("1 2\\n3 4")
    -2.0
    >>> inverse("1 2\\n3 4").to_list()
    [[-2.0, 1.0], [1.5, -0.5]]
"""

from pymatrix.algebra.arithmetic import (
    transpose,
    add,
    subtract,
    scalar_multiply,
    multiply,
)
from pymatrix.algebra.solvers import determinant, inverse

__all__ = [
    "transpose",
    "determinant",
    "inverse",
    "add",
    "subtract",
    "scalar_multiply",
    "multiply",
]
