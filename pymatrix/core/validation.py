"""
Input validation utilities for pymatrix.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Shape checks accept anything with a .shape (Matrix or ndarray)
"""

from typing import Any
import numpy as np
from numpy.typing import ArrayLike, NDArray

from pymatrix.core.exceptions import (
    ValidationError,
    DimensionError,
    NotSquareError,
    ShapeMismatchError,
    IncompatibleShapesError,
    InvalidAugmentedError,
)


def _fmt_shape(shape: tuple[int, ...]) -> str:
    return "x".join(str(s) for s in shape)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[np.float64]:
    """
    Validate and convert input to a float64 numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (ragged rows, mixed types), non-numeric
    and complex data.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with float64 dtype (always a fresh copy)

    Raises:
        ValidationError: If input cannot be converted to a real numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating ragged rows or non-numeric data"
        )

    if not np.issubdtype(result.dtype, np.number) and result.dtype != np.bool_:
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: complex dtype {result.dtype}, only real entries are supported"
        )

    return result.astype(np.float64)


def check_finite(array: NDArray[np.float64], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Only the LAPACK-backed kernels need this; the cofactor and elimination
    paths carry non-finite values through like any other float.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_2d(array: NDArray[Any], name: str) -> None:
    """
    Verify array is 2-dimensional.

    Raises:
        DimensionError: If array is not 2D
    """
    if array.ndim != 2:
        raise DimensionError(
            f"{name}: expected 2D array, got {array.ndim}D with shape {array.shape}"
        )


def check_positive_shape(rows: int, cols: int, name: str) -> None:
    """
    Verify a matrix shape has strictly positive row and column counts.

    Raises:
        ValidationError: If either count is not a positive integer
    """
    for label, value in (('rows', rows), ('cols', cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise ValidationError(
                f"{name}: {label} must be an integer, got {type(value).__name__}"
            )
        if value <= 0:
            raise ValidationError(
                f"{name}: {label} must be positive, got {value}"
            )


def check_square(matrix: Any) -> None:
    """
    Verify matrix is square.

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = matrix.shape
    if rows != cols:
        raise NotSquareError(
            f"Determinant can only be calculated for square matrices "
            f"(got {_fmt_shape(matrix.shape)})",
            shape=(rows, cols),
        )


def check_same_shape(left: Any, right: Any) -> None:
    """
    Verify two operands have identical shapes.

    Raises:
        ShapeMismatchError: If the shapes differ
    """
    if tuple(left.shape) != tuple(right.shape):
        raise ShapeMismatchError(
            f"Matrices have different dimensions "
            f"({_fmt_shape(left.shape)} vs {_fmt_shape(right.shape)})",
            left_shape=tuple(left.shape),
            right_shape=tuple(right.shape),
        )


def check_multipliable(left: Any, right: Any) -> None:
    """
    Verify left.cols == right.rows.

    Raises:
        IncompatibleShapesError: If the inner dimensions differ
    """
    if left.shape[1] != right.shape[0]:
        raise IncompatibleShapesError(
            f"Matrices cannot be multiplied due to incompatible dimensions "
            f"({_fmt_shape(left.shape)} @ {_fmt_shape(right.shape)})",
            left_shape=tuple(left.shape),
            right_shape=tuple(right.shape),
        )


def check_augmented(matrix: Any, purpose: str) -> None:
    """
    Verify matrix is an augmented system [A|b] with cols == rows + 1.

    Args:
        matrix: Matrix to check
        purpose: Name of the requesting method for the error message
            (e.g. "Gaussian elimination")

    Raises:
        InvalidAugmentedError: If cols != rows + 1
    """
    rows, cols = matrix.shape
    if cols != rows + 1:
        raise InvalidAugmentedError(
            f"Invalid matrix dimensions for {purpose} "
            f"(got {_fmt_shape(matrix.shape)}, expected {rows}x{rows + 1})",
            shape=(rows, cols),
        )
