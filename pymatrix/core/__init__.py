"""
Core infrastructure for pymatrix.

This module provides the data model and the shared abstractions used by
the textio, algebra and linsys submodules.

Key components:
    matrix: The Matrix value type and as_matrix() boundary coercion
    exceptions: Exception hierarchy
    validation: Input and shape validators
    result: Generic Result[P] envelope
    protocols: Backend protocol
    methods: Method-name constants
    compute: Timing, tolerances, linear algebra kernels
"""

from pymatrix.core.exceptions import (
    MatrixError,
    ValidationError,
    NumericalError,
    ParseError,
    EmptyInputError,
    EmptyRowError,
    InvalidNumberError,
    InconsistentColumnsError,
    DimensionError,
    NotSquareError,
    ShapeMismatchError,
    IncompatibleShapesError,
    InvalidAugmentedError,
    SingularMatrixError,
)
from pymatrix.core.matrix import Matrix, MatrixLike, as_matrix
from pymatrix.core.protocols import Backend
from pymatrix.core.result import Result

__all__ = [
    # Data model
    "Matrix",
    "MatrixLike",
    "as_matrix",
    # Protocols
    "Backend",
    # Result
    "Result",
    # Exceptions
    "MatrixError",
    "ValidationError",
    "NumericalError",
    "ParseError",
    "EmptyInputError",
    "EmptyRowError",
    "InvalidNumberError",
    "InconsistentColumnsError",
    "DimensionError",
    "NotSquareError",
    "ShapeMismatchError",
    "IncompatibleShapesError",
    "InvalidAugmentedError",
    "SingularMatrixError",
]
