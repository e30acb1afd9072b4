"""
pymatrix: dense real matrix algebra.

Parse matrices from text, format them back, compute determinants and
inverses, do matrix arithmetic, and solve linear systems by Gaussian
elimination or Cramer's rule.

Submodules:
    core: Matrix data model, exceptions, validation, compute kernels
    textio: parse() and format_matrix()
    algebra: transpose, determinant, inverse, add, subtract,
        scalar_multiply, multiply
    linsys: solve, gaussian_elimination, cramer_rule
"""

__version__ = "0.1.0"

from pymatrix.core import (
    Matrix,
    as_matrix,
    MatrixError,
    ValidationError,
    NumericalError,
    ParseError,
    DimensionError,
    SingularMatrixError,
)
from pymatrix.textio import parse, format_matrix
from pymatrix.algebra import (
    transpose,
    determinant,
    inverse,
    add,
    subtract,
    scalar_multiply,
    multiply,
)
from pymatrix.linsys import solve, gaussian_elimination, cramer_rule

__all__ = [
    "__version__",
    # Data model
    "Matrix",
    "as_matrix",
    # Text
    "parse",
    "format_matrix",
    # Algebra
    "transpose",
    "determinant",
    "inverse",
    "add",
    "subtract",
    "scalar_multiply",
    "multiply",
    # Linear systems
    "solve",
    "gaussian_elimination",
    "cramer_rule",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "NumericalError",
    "ParseError",
    "DimensionError",
    "SingularMatrixError",
]
