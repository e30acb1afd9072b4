"""
Core protocols for pymatrix.

We use Protocol (structural typing) rather than ABC (nominal typing) so a
solver backend is anything with a name and a solve() method.
"""

from typing import Protocol, TypeVar, runtime_checkable, TYPE_CHECKING

if TYPE_CHECKING:
    from pymatrix.core.result import Result

D = TypeVar('D', contravariant=True)  # Design type
P = TypeVar('P', covariant=True)      # Parameter payload type


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for solver backends.

    Each backend knows how to take a validated design and produce a
    parameter payload wrapped in a Result. Backends are stateless: all
    configuration is passed at construction time, which makes them easy
    to test and swap.

    Type Parameters:
        D: The design type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Examples: 'gaussian_elimination', 'cramer'
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If design is invalid for this backend
        """
        ...
