"""Hermitian operators defined without their transpose actions."""

from typing import Any, Optional
import numpy as np
import scipy.sparse
from numpy.typing import NDArray

from linops.core.operator import LinearOperator, is_matrix


def householder(h: NDArray) -> LinearOperator:
    """
    Householder reflection v -> (I - 2 h h^H) v.

    The transpose action is left to be inferred from the hermitian flag.
    """
    h = np.asarray(h)

    def reflect(v):
        return v - 2 * np.vdot(h, v) * h

    return LinearOperator(
        h.shape[0], h.shape[0], h.dtype, not np.iscomplexobj(h), True,
        reflect,
        None,
        reflect,
    )


def hermitian_from_triangle(
    T: Any,
    d: Optional[NDArray] = None,
) -> LinearOperator:
    """
    Hermitian operator from a diagonal and the strict lower triangle of T.

    The upper triangle of T is ignored; its role is played by the conjugate
    transpose of the lower triangle, so A v = d*v + L v + L^H v.

    Args:
        T: Dense or sparse square matrix supplying the lower triangle
        d: Diagonal entries (defaults to the diagonal of T)

    Returns:
        Hermitian operator, symmetric when both d and T are real
    """
    if not is_matrix(T):
        raise TypeError(
            f"hermitian_from_triangle expects a matrix, got {type(T).__name__}"
        )
    if scipy.sparse.issparse(T):
        L = scipy.sparse.tril(T, k=-1, format="csr")
    else:
        L = np.tril(T, -1)
    Lh = L.conj().T
    d = np.asarray(T.diagonal() if d is None else d)
    dtype = np.result_type(d.dtype, L.dtype)

    return LinearOperator(
        d.shape[0], d.shape[0], dtype,
        not np.issubdtype(dtype, np.complexfloating), True,
        lambda v: d * v + L @ v + Lh @ v,
    )
