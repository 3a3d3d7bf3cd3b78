"""Operators applying the inverse of a matrix through a backend solver."""

import logging
from typing import Any, Optional
import numpy as np

from linops.core.operator import LinearOperator, is_matrix
from linops.core.exceptions import ShapeMismatch, ConstructionError
from linops.algebra.protocols import LinearAlgebraBackend
from linops.algebra.dense import DenseBackend
from linops.utils.checks import check_hermitian, check_positive_definite

logger = logging.getLogger(__name__)


def _solution_dtype(dtype) -> np.dtype:
    """Element type of solves against a matrix of the given type."""
    if np.issubdtype(dtype, np.inexact):
        return np.dtype(dtype)
    return np.result_type(dtype, np.float64)


def inverse(
    M: Any,
    symmetric: bool = False,
    hermitian: bool = False,
    backend: Optional[LinearAlgebraBackend] = None,
) -> LinearOperator:
    """
    Inverse of a matrix as a linear operator.

    Every application performs a fresh solve, which makes this most useful
    for triangular or otherwise cheaply solvable matrices. Solver errors
    surface when the operator is applied.

    Args:
        M: Dense or sparse matrix
        symmetric: Whether M is symmetric
        hermitian: Whether M is hermitian
        backend: Solver (defaults to DenseBackend)

    Returns:
        Operator of shape (M.shape[1], M.shape[0]) applying M^{-1}
    """
    if not is_matrix(M):
        raise TypeError(f"inverse expects a matrix, got {type(M).__name__}")
    backend = backend if backend is not None else DenseBackend()

    nrow, ncol = M.shape
    Mt = M.T
    Mh = M.conj().T
    return LinearOperator(
        ncol, nrow, _solution_dtype(M.dtype), symmetric, hermitian,
        lambda v: backend.solve(M, v),
        lambda u: backend.solve(Mt, u),
        lambda w: backend.solve(Mh, w),
    )


def cholesky(
    M: Any,
    check: bool = False,
    backend: Optional[LinearAlgebraBackend] = None,
    random_source: Any = None,
) -> LinearOperator:
    """
    Inverse of a Hermitian positive definite matrix via its Cholesky factor.

    The factorization M = L L^H is computed once; each application
    performs two triangular solves.

    Args:
        M: Square Hermitian positive definite matrix
        check: Run check_hermitian and check_positive_definite first
        backend: Factorization backend (defaults to DenseBackend)
        random_source: Random vectors for the checks (defaults to backend)

    Returns:
        Hermitian operator applying M^{-1}

    Raises:
        ShapeMismatch: if M is not square
        ConstructionError: if a requested check fails
    """
    if not is_matrix(M):
        raise TypeError(f"cholesky expects a matrix, got {type(M).__name__}")
    m, n = M.shape
    if m != n:
        raise ShapeMismatch("cholesky", "square matrix", M.shape)
    backend = backend if backend is not None else DenseBackend()

    if check:
        source = random_source if random_source is not None else backend
        if not check_hermitian(M, random_source=source):
            raise ConstructionError("Matrix is not Hermitian",
                                    diagnostic_data={"shape": M.shape})
        if not check_positive_definite(M, random_source=source):
            raise ConstructionError("Matrix is not positive definite",
                                    diagnostic_data={"shape": M.shape})

    L = backend.cholesky(M)
    logger.debug("Computed Cholesky factor of %dx%d matrix", m, n)

    def prod(v):
        return backend.solve_triangular(L, backend.solve_triangular(L, v), trans=2)

    dtype = _solution_dtype(M.dtype)
    return LinearOperator(
        m, m, dtype, not np.issubdtype(dtype, np.complexfloating), True,
        prod,
        lambda u: np.conj(prod(np.conj(u))),
        prod,
    )
