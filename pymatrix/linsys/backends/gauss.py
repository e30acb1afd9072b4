"""
Gaussian elimination backend.

Forward elimination with partial pivoting followed by back substitution,
run on a private copy of the augmented matrix.

A pivot column that is entirely zero from the pivot row down is not
rejected: the division by the zero pivot produces inf/NaN entries in the
solution. A message is recorded in Result.warnings (the public solvers
re-issue it as a RuntimeWarning) and the zero-pivot columns are listed
in Result.info["zero_pivot_columns"].
"""

from typing import Any
import numpy as np

from pymatrix.core.result import Result
from pymatrix.core.compute.timing import Timer
from pymatrix.core.methods import METHOD_GAUSSIAN_ELIMINATION
from pymatrix.linsys.design import LinearSystemDesign
from pymatrix.linsys.solution import SystemParams

# zero pivots and huge entries yield inf/NaN without numpy warnings
_SILENT_FP = dict(divide='ignore', invalid='ignore', over='ignore')


class GaussianEliminationBackend:
    """
    Gaussian elimination with partial pivoting.

    Implements the Backend protocol for LinearSystemDesign -> SystemParams.
    """

    @property
    def name(self) -> str:
        return METHOD_GAUSSIAN_ELIMINATION

    def solve(self, design: LinearSystemDesign) -> Result[SystemParams]:
        """
        Solve A x = b by elimination.

        Algorithm:
            Forward phase, for each pivot index i:
                1. Pick the row k >= i with the largest |a[k, i]|
                   (strictly larger wins, so the first maximum is kept)
                2. Swap it into row i
                3. For each row k > i: row_k -= (a[k, i] / a[i, i]) * row_i
                   over columns i..n
            Back substitution, for i = n-1 .. 0:
                x[i] = (a[i, n] - sum_{j>i} a[i, j] x[j]) / a[i, i]

        Args:
            design: Validated linear system design

        Returns:
            Result containing SystemParams
        """
        timer = Timer()
        timer.start()

        a = np.array(design.augmented.data, dtype=np.float64)
        n = design.n
        last = n

        row_swaps = 0
        pivots: list[float] = []
        zero_pivot_columns: list[int] = []

        # === Forward Elimination ===
        with timer.section('forward_elimination'), np.errstate(**_SILENT_FP):
            for i in range(n):
                max_row = i
                for k in range(i + 1, n):
                    if abs(a[k, i]) > abs(a[max_row, i]):
                        max_row = k

                if max_row != i:
                    a[[i, max_row]] = a[[max_row, i]]
                    row_swaps += 1

                pivot = float(a[i, i])
                pivots.append(pivot)
                if pivot == 0.0:
                    zero_pivot_columns.append(i)

                for k in range(i + 1, n):
                    factor = a[k, i] / a[i, i]
                    a[k, i:] -= factor * a[i, i:]

        # === Back Substitution ===
        with timer.section('back_substitution'), np.errstate(**_SILENT_FP):
            solution = np.zeros(n, dtype=np.float64)
            for i in range(n - 1, -1, -1):
                solution[i] = a[i, last]
                for j in range(i + 1, n):
                    solution[i] -= a[i, j] * solution[j]
                solution[i] /= a[i, i]

        timer.stop()

        warn_list = []
        if zero_pivot_columns:
            warn_list.append(
                f"Zero pivot in column(s) {zero_pivot_columns}: the system has no "
                f"unique solution and the result contains non-finite values."
            )

        info: dict[str, Any] = {
            'method': METHOD_GAUSSIAN_ELIMINATION,
            'row_swaps': row_swaps,
            'pivots': tuple(pivots),
            'zero_pivot_columns': tuple(zero_pivot_columns),
        }

        return Result(
            params=SystemParams(solution=solution),
            info=info,
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warn_list),
        )
