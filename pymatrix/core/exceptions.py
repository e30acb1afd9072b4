"""
Exception hierarchy for pymatrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Parse failures and shape failures are
ValidationErrors: the caller handed in something the operation
cannot accept.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""

Shape = tuple[int, int]


class MatrixError(Exception):
    """Base exception for all pymatrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class NumericalError(MatrixError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


# === Parsing ===


class ParseError(ValidationError):
    """Matrix text could not be parsed."""
    pass


class EmptyInputError(ParseError):
    """The input text contains no rows."""
    pass


class EmptyRowError(ParseError):
    """The first row of the input contains no entries."""
    pass


class InvalidNumberError(ParseError):
    """
    A token is not a floating point literal.

    Attributes:
        row: 0-based row index of the offending token
        col: 0-based column index of the offending token
        token: The raw token text
    """

    def __init__(self, message: str, row: int, col: int, token: str | None = None):
        super().__init__(message)
        self.row = row
        self.col = col
        self.token = token


class InconsistentColumnsError(ParseError):
    """
    A row has a different number of entries than the first row.

    Attributes:
        row: 0-based index of the offending row
        expected: Column count fixed by the first row
        actual: Column count found in the offending row
    """

    def __init__(
        self,
        message: str,
        row: int,
        expected: int | None = None,
        actual: int | None = None,
    ):
        super().__init__(message)
        self.row = row
        self.expected = expected
        self.actual = actual


# === Dimensions ===


class DimensionError(ValidationError):
    """
    Matrix dimensions are incorrect or inconsistent.

    Raised when a matrix shape doesn't fit the requested operation or
    when two operands have shapes that can't be combined.
    """
    pass


class NotSquareError(DimensionError):
    """
    Operation requires a square matrix.

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: Shape | None = None):
        super().__init__(message)
        self.shape = shape


class ShapeMismatchError(DimensionError):
    """
    Elementwise operation on operands of different shapes.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: Shape | None = None,
        right_shape: Shape | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class IncompatibleShapesError(DimensionError):
    """
    Matrix product with left.cols != right.rows.

    Attributes:
        left_shape: (rows, cols) of the left operand
        right_shape: (rows, cols) of the right operand
    """

    def __init__(
        self,
        message: str,
        left_shape: Shape | None = None,
        right_shape: Shape | None = None,
    ):
        super().__init__(message)
        self.left_shape = left_shape
        self.right_shape = right_shape


class InvalidAugmentedError(DimensionError):
    """
    Matrix is not an augmented system [A|b] (cols must equal rows + 1).

    Attributes:
        shape: (rows, cols) of the offending matrix
    """

    def __init__(self, message: str, shape: Shape | None = None):
        super().__init__(message)
        self.shape = shape


class SingularMatrixError(DimensionError, NumericalError):
    """
    Matrix is singular (its determinant is exactly zero).

    Catchable both as a DimensionError and as a NumericalError.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        determinant: The determinant that triggered the error
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        determinant: float | None = None,
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.determinant = determinant
