"""
Tolerance tiers for comparing floating point matrices.

Exact equality (Matrix.__eq__) is what the algebra guarantees for
elementwise operations; products, inverses and solutions are compared
against one of these tiers instead.

Used by Matrix.isclose() and LinearSystemSolution.satisfies_system().
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


# Float64 reference: products and inverses of well-conditioned matrices
FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='double precision, well-conditioned input',
)

# Float64, ill-conditioned input or long elimination chains
FP64_ILL_CONDITIONED = ToleranceTier(
    rtol=1e-6,
    atol=1e-8,
    name='fp64_ill_conditioned',
    description='double precision, ill-conditioned input (cond > 1e4)',
)

DEFAULT_TOLERANCE = FP64


def select_tolerance(is_ill_conditioned: bool = False) -> ToleranceTier:
    """Select the tolerance tier for a comparison."""
    if is_ill_conditioned:
        return FP64_ILL_CONDITIONED
    return FP64
