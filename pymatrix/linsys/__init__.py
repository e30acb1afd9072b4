"""
Linear system solvers.

Solves A x = b given as an augmented matrix [A|b] (n rows, n + 1 columns).

Public API:
    solve(system, method='gauss') -> LinearSystemSolution
    gaussian_elimination(system) -> ndarray
    cramer_rule(system) -> ndarray

solve() is the full pipeline: design construction, backend selection,
and result wrapping with residuals, timing and warnings. The two direct
functions return the bare solution vector.

Example:
    >>> from pymatrix.linsys import solve, cramer_rule
    >>> result = solve("2 1 5\\n1 3 10")
    >>> result.solution
    array([1., 3.])
    >>> cramer_rule("2 1 5\\n1 3 10")
    array([1., 3.])
"""

from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import LinearSystemSolution, SystemParams
from pymatrix.linsys.solvers import solve, gaussian_elimination, cramer_rule

__all__ = [
    "solve",
    "gaussian_elimination",
    "cramer_rule",
    "LinearSystemDesign",
    "LinearSystemSolution",
    "SystemParams",
]
