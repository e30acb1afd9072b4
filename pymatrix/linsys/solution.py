"""
Linear system solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from dataclasses import dataclass
from typing import Any, TYPE_CHECKING
import numpy as np
from numpy.typing import NDArray

from pymatrix.core.result import Result
from pymatrix.core.compute.tolerances import select_tolerance
from pymatrix.textio import format_number

if TYPE_CHECKING:
    from pymatrix.linsys.design import LinearSystemDesign


@dataclass(frozen=True)
class SystemParams:
    """
    Parameter payload for a solved linear system.

    This is the immutable data computed by backends.
    """
    solution: NDArray[np.floating[Any]]


@dataclass
class LinearSystemSolution:
    """
    User-facing linear system results.

    Wraps the backend Result and provides the solution vector plus
    residual diagnostics against the original system.
    """
    _result: Result[SystemParams]
    _design: 'LinearSystemDesign'

    @property
    def solution(self) -> NDArray[np.floating[Any]]:
        """Solution vector x (n,), a fresh copy."""
        return np.array(self._result.params.solution, dtype=np.float64)

    @property
    def n(self) -> int:
        return self._design.n

    @property
    def residuals(self) -> NDArray[np.floating[Any]]:
        """A x - b evaluated on the original (unpivoted) system."""
        A = self._design.coefficients.data
        b = self._design.constants
        with np.errstate(invalid='ignore', over='ignore'):
            return A @ self._result.params.solution - b

    @property
    def max_abs_residual(self) -> float:
        return float(np.max(np.abs(self.residuals)))

    @property
    def is_finite(self) -> bool:
        """False when a zero pivot or non-finite input poisoned the solution."""
        return bool(np.all(np.isfinite(self._result.params.solution)))

    def satisfies_system(self, *, ill_conditioned: bool = False) -> bool:
        """
        Check A x ~ b within a tolerance tier.

        Args:
            ill_conditioned: Compare with the looser FP64_ILL_CONDITIONED
                tier instead of FP64

        Returns:
            False for non-finite solutions
        """
        if not self.is_finite:
            return False
        tol = select_tolerance(is_ill_conditioned=ill_conditioned)
        A = self._design.coefficients.data
        with np.errstate(over='ignore', invalid='ignore'):
            return bool(np.allclose(
                A @ self._result.params.solution, self._design.constants,
                rtol=tol.rtol, atol=tol.atol,
            ))

    @property
    def method(self) -> str:
        return self._result.info['method']

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Readable summary with one 'x<i> = value' line per unknown."""
        lines = [
            "Linear System Solution",
            "=" * 60,
            f"Unknowns: {self.n}",
            f"Method: {self.method}",
            "-" * 60,
        ]
        for i, value in enumerate(self._result.params.solution):
            lines.append(f"x{i + 1} = {format_number(value)}")
        lines.append("-" * 60)
        lines.append(f"Max |Ax - b|: {self.max_abs_residual:.3e}")
        lines.append(f"Backend: {self.backend_name}")
        if self.timing:
            lines.append(f"Time: {self.timing.get('total_seconds', 0):.4f}s")
        for w in self.warnings:
            lines.append(f"Warning: {w}")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return (
            f"LinearSystemSolution(n={self.n}, method={self.method!r}, "
            f"finite={self.is_finite})"
        )
