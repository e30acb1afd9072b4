"""
Method name constants for pymatrix.

This module is the SINGLE SOURCE OF TRUTH for method strings accepted by
determinant(), inverse() and solve(). Import from here, never use raw
strings inside the library.

Usage:
    from pymatrix.core.methods import METHOD_COFACTOR, METHOD_LU

    det = determinant(m, method=METHOD_LU)
"""

# Determinant by recursive cofactor expansion along row 0 (O(n!))
METHOD_COFACTOR = 'cofactor'

# Determinant / inverse from an LU factorisation (O(n^3))
METHOD_LU = 'lu'

# Inverse as the transposed cofactor matrix scaled by 1/det
METHOD_ADJUGATE = 'adjugate'

# Linear systems
METHOD_GAUSS = 'gauss'
METHOD_GAUSSIAN_ELIMINATION = 'gaussian_elimination'
METHOD_CRAMER = 'cramer'

DETERMINANT_METHODS = frozenset({
    METHOD_COFACTOR,
    METHOD_LU,
})

INVERSE_METHODS = frozenset({
    METHOD_ADJUGATE,
    METHOD_LU,
})

SYSTEM_METHODS = frozenset({
    METHOD_GAUSS,
    METHOD_GAUSSIAN_ELIMINATION,
    METHOD_CRAMER,
})

# Orders above this make the cofactor expansion impractically slow
# (10! = 3.6M minors); a RuntimeWarning is emitted past it.
COFACTOR_ORDER_LIMIT = 10

__all__ = [
    'METHOD_COFACTOR',
    'METHOD_LU',
    'METHOD_ADJUGATE',
    'METHOD_GAUSS',
    'METHOD_GAUSSIAN_ELIMINATION',
    'METHOD_CRAMER',
    'DETERMINANT_METHODS',
    'INVERSE_METHODS',
    'SYSTEM_METHODS',
    'COFACTOR_ORDER_LIMIT',
]
