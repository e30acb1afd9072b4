"""
Linear algebra kernels for pymatrix.

All functions follow these conventions:
    - Inputs and outputs are plain float64 ndarrays
    - Shape and singularity checks belong to the callers in
      pymatrix.algebra; kernels assume valid input
    - Errors are raised immediately with clear messages

Submodules:
    cofactor: Recursive cofactor expansion and adjugate (O(n!))
    lu: LU factorisation via SciPy (O(n^3))
"""

from pymatrix.core.compute.linalg.cofactor import (
    minor,
    cofactor_det,
    cofactor_matrix,
    adjugate_inverse,
)
from pymatrix.core.compute.linalg.lu import (
    LUResult,
    lu_cpu,
    lu_det,
    lu_inverse,
)

__all__ = [
    # Cofactor expansion
    "minor",
    "cofactor_det",
    "cofactor_matrix",
    "adjugate_inverse",
    # LU decomposition
    "LUResult",
    "lu_cpu",
    "lu_det",
    "lu_inverse",
]
