"""Linear algebra backend protocol."""

from typing import Protocol, Any
from numpy.typing import NDArray, DTypeLike


class LinearAlgebraBackend(Protocol):
    """
    Protocol for the numerical collaborators of special operators.
    Allows swapping between dense, sparse, or custom implementations.
    """

    def solve(self, A: Any, b: NDArray) -> NDArray:
        """
        Solve linear system Ax = b.

        Args:
            A: System matrix (dense or sparse)
            b: Right-hand side

        Returns:
            Solution x
        """
        ...

    def cholesky(self, A: Any) -> Any:
        """
        Compute the Cholesky factor of a Hermitian positive definite matrix.

        Args:
            A: Matrix to factor

        Returns:
            Lower triangular L with A = L L^H
        """
        ...

    def solve_triangular(
        self, L: Any, b: NDArray, trans: int = 0
    ) -> NDArray:
        """
        Solve with a lower triangular factor.

        Args:
            L: Lower triangular factor from cholesky
            b: Right-hand side
            trans: 0 for L x = b, 1 for L^T x = b, 2 for L^H x = b

        Returns:
            Solution x
        """
        ...

    def random(self, n: int, dtype: DTypeLike) -> NDArray:
        """
        Draw a random vector.

        Args:
            n: Length
            dtype: Element type; complex types get random imaginary parts

        Returns:
            Vector of length n
        """
        ...
