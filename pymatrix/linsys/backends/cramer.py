"""
Cramer's rule backend.

x[i] = det(A_i) / det(A), where A_i is A with column i replaced by b.
Every determinant goes through pymatrix.algebra.determinant, so the
cost is that of n + 1 determinants of the chosen method.

Warnings raised by those determinant calls (the cofactor order limit)
are recorded in Result.warnings; the public solvers re-issue them at
the caller.
"""

from typing import Any
import warnings
import numpy as np

from pymatrix.algebra import determinant
from pymatrix.core.exceptions import SingularMatrixError
from pymatrix.core.matrix import Matrix
from pymatrix.core.methods import METHOD_COFACTOR, METHOD_CRAMER
from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams


class CramerBackend:
    """
    Cramer's rule.

    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    def __init__(self, determinant_method: str = METHOD_COFACTOR):
        self._determinant_method = determinant_method

    @property
    def name(self) -> str:
        return METHOD_CRAMER

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Solve A x = b by ratios of determinants.

        Raises:
            SingularMatrixError: If det(A) is exactly 0
        """
        timer = Timer()
        timer.start()

        n = design.n
        A = design.coefficients
        b = design.constants

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")

            with timer.section('coefficient_determinant'):
                det_a = determinant(A, method=self._determinant_method)

            if det_a == 0.0:
                raise SingularMatrixError(
                    "System has no unique solution (determinant is 0)",
                    matrix_name='A',
                    determinant=det_a,
                )

            solution = np.zeros(n, dtype=np.float64)
            column_determinants = []
            with timer.section('column_determinants'):
                for i in range(n):
                    replaced = A.data.copy()
                    replaced[:, i] = b
                    det_i = determinant(Matrix._build(replaced), method=self._determinant_method)
                    column_determinants.append(det_i)
                    solution[i] = det_i / det_a

        timer.stop()

        # one entry per distinct message; every column determinant repeats it
        warn_list = list(dict.fromkeys(str(w.message) for w in caught))

        info: dict[str, Any] = {
            'method': METHOD_CRAMER,
            'determinant': det_a,
            'determinant_method': self._determinant_method,
            'column_determinants': tuple(column_determinants),
        }

        return Result(
            params=SystemParams(solution=solution),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warn_list),
        )
