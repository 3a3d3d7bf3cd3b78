"""Dense linear algebra backend using NumPy/SciPy."""

from typing import Any, Optional
import numpy as np
import scipy.linalg
import scipy.sparse
import scipy.sparse.linalg
from numpy.typing import NDArray, DTypeLike


class DenseBackend:
    """
    NumPy/SciPy implementation of linear algebra operations.

    Sparse matrices are solved with ``scipy.sparse.linalg.spsolve`` and
    densified before factoring.
    """

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def solve(self, A: Any, b: NDArray) -> NDArray:
        """Solve linear system Ax = b using direct solve."""
        if scipy.sparse.issparse(A):
            return scipy.sparse.linalg.spsolve(scipy.sparse.csc_matrix(A), b)
        return np.linalg.solve(A, b)

    def cholesky(self, A: Any) -> NDArray:
        """
        Compute lower Cholesky factor using scipy.

        Returns:
            L with A = L @ L.conj().T
        """
        if scipy.sparse.issparse(A):
            A = A.toarray()
        return scipy.linalg.cholesky(A, lower=True)

    def solve_triangular(
        self,
        L: NDArray,
        b: NDArray,
        trans: int = 0,
    ) -> NDArray:
        """
        Solve with lower triangular L.

        Args:
            L: Lower triangular factor
            b: Right-hand side
            trans: 0 for L x = b, 1 for L^T x = b, 2 for L^H x = b

        Returns:
            Solution x
        """
        return scipy.linalg.solve_triangular(L, b, trans=trans, lower=True)

    def random(self, n: int, dtype: DTypeLike = np.float64) -> NDArray:
        """Uniform random vector on [0, 1), real and imaginary parts alike."""
        dtype = np.dtype(dtype)
        if not np.issubdtype(dtype, np.inexact):
            dtype = np.dtype(np.float64)
        if np.issubdtype(dtype, np.complexfloating):
            v = self.rng.random(n) + 1j * self.rng.random(n)
        else:
            v = self.rng.random(n)
        return v.astype(dtype)
