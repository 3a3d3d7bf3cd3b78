"""Unary operator algebra: negation, transpose, adjoint, conjugate.

Transpose and adjoint actions that were not supplied are inferred from
the identities

    A.T v = conj(A.H conj(v))
    A.H v = conj(A.T conj(v))

together with the symmetric (A = A.T) and hermitian (A = A.H) flags.
"""

import numpy as np

from linops.core.operator import LinearOperator
from linops.core.exceptions import InferenceError


def negate(op: LinearOperator) -> LinearOperator:
    """Return -A. Absent actions stay absent."""
    prod, tprod, ctprod = op.prod, op.tprod, op.ctprod
    return LinearOperator(
        op.nrow, op.ncol, op.dtype, op.symmetric, op.hermitian,
        lambda v: -prod(v),
        None if tprod is None else (lambda u: -tprod(u)),
        None if ctprod is None else (lambda w: -ctprod(w)),
    )


def transpose(op: LinearOperator) -> LinearOperator:
    """
    Return A.T.

    Args:
        op: Operator A

    Returns:
        A itself if symmetric, otherwise a new operator of shape (ncol, nrow)

    Raises:
        InferenceError: if neither tprod, ctprod nor a flag determines A.T
    """
    if op.symmetric:
        return op

    prod = op.prod
    if op.tprod is not None:
        tprod = op.tprod
        return LinearOperator(
            op.ncol, op.nrow, op.dtype, op.symmetric, op.hermitian,
            tprod,
            prod,                                # (A.T).T = A
            lambda w: np.conj(prod(np.conj(w))),  # (A.T).H = conj(A)
        )

    if op.ctprod is not None:
        ctprod = op.ctprod
    elif op.hermitian:
        ctprod = prod
    else:
        raise InferenceError("transpose", op.shape)

    return LinearOperator(
        op.ncol, op.nrow, op.dtype, op.symmetric, op.hermitian,
        lambda v: np.conj(ctprod(np.conj(v))),
        prod,
        lambda w: np.conj(prod(np.conj(w))),
    )


def adjoint(op: LinearOperator) -> LinearOperator:
    """
    Return A.H, the conjugate transpose.

    Mirror image of :func:`transpose` with the roles of the hermitian flag
    and ctprod taking those of the symmetric flag and tprod.

    Raises:
        InferenceError: if neither ctprod, tprod nor a flag determines A.H
    """
    if op.hermitian:
        return op

    prod = op.prod
    if op.ctprod is not None:
        ctprod = op.ctprod
        return LinearOperator(
            op.ncol, op.nrow, op.dtype, op.symmetric, op.hermitian,
            ctprod,
            lambda u: np.conj(prod(np.conj(u))),  # (A.H).T = conj(A)
            prod,                                # (A.H).H = A
        )

    if op.tprod is not None:
        tprod = op.tprod
    elif op.symmetric:
        tprod = prod
    else:
        raise InferenceError("conjugate transpose", op.shape)

    return LinearOperator(
        op.ncol, op.nrow, op.dtype, op.symmetric, op.hermitian,
        lambda v: np.conj(tprod(np.conj(v))),
        lambda u: np.conj(prod(np.conj(u))),
        prod,
    )


def conjugate(op: LinearOperator) -> LinearOperator:
    """Return conj(A); conj(A).T = A.H and conj(A).H = A.T."""
    prod = op.prod
    return LinearOperator(
        op.nrow, op.ncol, op.dtype, op.symmetric, op.hermitian,
        lambda v: np.conj(prod(np.conj(v))),
        op.ctprod,
        op.tprod,
    )
