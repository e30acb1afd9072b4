"""
Solver dispatch for linear systems.

This module provides solve() (the full pipeline) and the two direct
entry points gaussian_elimination() and cramer_rule(), which return the
bare solution vector.
"""

from __future__ import annotations

from typing import Any
import warnings
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.exceptions import ValidationError
from pymatrix.core.matrix import MatrixLike
from pymatrix.core.methods import (
    METHOD_GAUSS,
    METHOD_GAUSSIAN_ELIMINATION,
    METHOD_CRAMER,
    METHOD_COFACTOR,
    SYSTEM_METHODS,
)
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import LinearSystemSolution
from pymatrix.linsys.backends.gauss import GaussianEliminationBackend
from pymatrix.linsys.backends.cramer import CramerBackend


_PURPOSE = {
    METHOD_GAUSS: "Gaussian elimination",
    METHOD_GAUSSIAN_ELIMINATION: "Gaussian elimination",
    METHOD_CRAMER: "Cramer's rule",
}


def _get_backend(method: str, determinant_method: str):
    """
    Select and instantiate the backend for a method name.

    Raises:
        ValidationError: If the method is unknown
    """
    if method in (METHOD_GAUSS, METHOD_GAUSSIAN_ELIMINATION):
        return GaussianEliminationBackend()
    if method == METHOD_CRAMER:
        return CramerBackend(determinant_method=determinant_method)
    raise ValidationError(
        f"Unknown method: {method!r} (expected one of {sorted(SYSTEM_METHODS)})"
    )


def _ensure_design(system: MatrixLike | LinearSystemDesign, method: str) -> LinearSystemDesign:
    """Convert a raw augmented matrix to a LinearSystemDesign if needed."""
    if isinstance(system, LinearSystemDesign):
        return system
    return LinearSystemDesign.from_matrix(system, purpose=_PURPOSE[method])


def _run(
    system: MatrixLike | LinearSystemDesign,
    method: str,
    determinant_method: str,
) -> LinearSystemSolution:
    backend = _get_backend(method, determinant_method)
    design = _ensure_design(system, method)
    result = backend.solve(design)
    return LinearSystemSolution(_result=result, _design=design)


def _reissue_warnings(solution: LinearSystemSolution) -> None:
    for message in solution.warnings:
        warnings.warn(message, RuntimeWarning, stacklevel=3)


def solve(
    system: MatrixLike | LinearSystemDesign,
    *,
    method: str = METHOD_GAUSS,
    determinant_method: str = METHOD_COFACTOR,
) -> LinearSystemSolution:
    """
    Solve the linear system described by an augmented matrix [A|b].

    Args:
        system: n x (n + 1) augmented matrix (Matrix, text, array-like)
            or a prepared LinearSystemDesign
        method: 'gauss' / 'gaussian_elimination' (default) or 'cramer'
        determinant_method: Determinant method used by Cramer's rule,
            'cofactor' (default) or 'lu'

    Returns:
        LinearSystemSolution with the solution vector and diagnostics

    Raises:
        InvalidAugmentedError: If cols != rows + 1
        SingularMatrixError: If method='cramer' and det(A) is exactly 0
        ValidationError: If method is unknown

    Warns:
        RuntimeWarning: If Gaussian elimination hit a zero pivot (the
            solution then contains inf/NaN), or if Cramer's rule used
            cofactor determinants above COFACTOR_ORDER_LIMIT

    Example:
        >>> result = solve("2 3 5 10\\n1 -1 2 3\\n3 2 -1 4")
        >>> print(result.summary())
    """
    solution = _run(system, method, determinant_method)
    _reissue_warnings(solution)
    return solution


def gaussian_elimination(system: MatrixLike | LinearSystemDesign) -> NDArray[np.floating[Any]]:
    """
    Solve an augmented system by Gaussian elimination with partial pivoting.

    Returns:
        Solution vector x (n,)

    Raises:
        InvalidAugmentedError: If cols != rows + 1

    Warns:
        RuntimeWarning: On a zero pivot; the solution then contains inf/NaN
    """
    solution = _run(system, METHOD_GAUSSIAN_ELIMINATION, METHOD_COFACTOR)
    _reissue_warnings(solution)
    return solution.solution


def cramer_rule(
    system: MatrixLike | LinearSystemDesign,
    *,
    determinant_method: str = METHOD_COFACTOR,
) -> NDArray[np.floating[Any]]:
    """
    Solve an augmented system by Cramer's rule.

    Returns:
        Solution vector x (n,)

    Raises:
        InvalidAugmentedError: If cols != rows + 1
        SingularMatrixError: If det(A) is exactly 0

    Warns:
        RuntimeWarning: If cofactor determinants are used above
            COFACTOR_ORDER_LIMIT
    """
    solution = _run(system, METHOD_CRAMER, determinant_method)
    _reissue_warnings(solution)
    return solution.solution
