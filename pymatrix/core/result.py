"""
Generic result container for pymatrix solver computations.

The Result class is the envelope every solver backend returns. It carries
the method-specific payload alongside timing, diagnostics and non-fatal
warnings so the user-facing solution types can share one shape.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (pivots, row swaps, determinants)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for solver computations.

    Type Parameters:
        P: The method-specific payload type

    Attributes:
        params: Method-specific payload (solution vector, etc.)
        info: Structured metadata (method, pivots, determinant)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=SystemParams(solution=x),
        ...     info={'method': 'gaussian_elimination', 'row_swaps': 1},
        ...     timing={'total_seconds': 0.001},
        ...     backend_name='gaussian_elimination',
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
