"""Block concatenation of operators."""

from functools import reduce
from typing import Any
import numpy as np

from linops.core.operator import LinearOperator, aslinearoperator
from linops.core.exceptions import ShapeMismatch


def _hconcat_pair(A: LinearOperator, B: LinearOperator) -> LinearOperator:
    """[A B] for operators with the same number of rows."""
    if A.nrow != B.nrow:
        raise ShapeMismatch("hconcat: inconsistent row sizes", A.nrow, B.nrow)

    n = A.ncol
    return LinearOperator(
        A.nrow, A.ncol + B.ncol, np.result_type(A.dtype, B.dtype), False, False,
        lambda v: (A @ v[:n]) + (B @ v[n:]),
        lambda u: np.concatenate([A.T @ u, B.T @ u]),
        lambda w: np.concatenate([A.H @ w, B.H @ w]),
    )


def _vconcat_pair(A: LinearOperator, B: LinearOperator) -> LinearOperator:
    """[A; B] for operators with the same number of columns."""
    if A.ncol != B.ncol:
        raise ShapeMismatch("vconcat: inconsistent column sizes", A.ncol, B.ncol)

    m = A.nrow
    return LinearOperator(
        A.nrow + B.nrow, A.ncol, np.result_type(A.dtype, B.dtype), False, False,
        lambda v: np.concatenate([A @ v, B @ v]),
        lambda u: (A.T @ u[:m]) + (B.T @ u[m:]),
        lambda w: (A.H @ w[:m]) + (B.H @ w[m:]),
    )


def hconcat(*ops: Any) -> LinearOperator:
    """
    Horizontal concatenation [A1 A2 ... Ak].

    Operands are folded pairwise from the left; matrices are promoted.

    Args:
        *ops: Operators or matrices sharing the same number of rows

    Returns:
        Operator of shape (nrow, sum of ncol)
    """
    if not ops:
        raise ValueError("hconcat requires at least one operator")
    return reduce(_hconcat_pair, [aslinearoperator(op) for op in ops])


def vconcat(*ops: Any) -> LinearOperator:
    """
    Vertical concatenation [A1; A2; ...; Ak].

    Operands are folded pairwise from the left; matrices are promoted.

    Args:
        *ops: Operators or matrices sharing the same number of columns

    Returns:
        Operator of shape (sum of nrow, ncol)
    """
    if not ops:
        raise ValueError("vconcat requires at least one operator")
    return reduce(_vconcat_pair, [aslinearoperator(op) for op in ops])
