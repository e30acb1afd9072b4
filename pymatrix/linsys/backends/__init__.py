"""
Linear system backends.

Available backends:
    GaussianEliminationBackend: Elimination with partial pivoting
    CramerBackend: Ratios of determinants
"""

from pymatrix.linsys.backends.gauss import GaussianEliminationBackend
from pymatrix.linsys.backends.cramer import CramerBackend

__all__ = [
    "GaussianEliminationBackend",
    "CramerBackend",
]
