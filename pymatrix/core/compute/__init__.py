"""
Shared compute infrastructure for pymatrix.

IMPORTANT: This is NOT where solver backends live. Those go in
linsys/backends/. This module contains shared NUMERIC infrastructure.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for floating point comparison
    linalg: Linear algebra kernels (cofactor expansion, LU)
"""

from pymatrix.core.compute.timing import Timer
from pymatrix.core.compute.tolerances import (
    ToleranceTier,
    FP64,
    FP64_ILL_CONDITIONED,
    DEFAULT_TOLERANCE,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    # Tolerances
    "ToleranceTier",
    "FP64",
    "FP64_ILL_CONDITIONED",
    "DEFAULT_TOLERANCE",
    "select_tolerance",
]
