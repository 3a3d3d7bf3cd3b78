"""Identity, all-ones, zero and diagonal operators."""

import numpy as np
from numpy.typing import NDArray, DTypeLike

from linops.core.operator import LinearOperator
from linops.core.config import DEFAULT_DTYPE
from linops.core.exceptions import ShapeMismatch


def eye(n: int, dtype: DTypeLike = DEFAULT_DTYPE) -> LinearOperator:
    """Identity operator of order n."""
    return LinearOperator(
        n, n, dtype, True, True,
        lambda v: v,
        lambda u: u,
        lambda w: w,
    )


def ones(nrow: int, ncol: int, dtype: DTypeLike = DEFAULT_DTYPE) -> LinearOperator:
    """
    Operator of all ones, v -> sum(v) * 1.

    Args:
        nrow: Number of rows
        ncol: Number of columns
        dtype: Element type

    Returns:
        Rank-one operator, symmetric and hermitian when square
    """
    square = nrow == ncol
    return LinearOperator(
        nrow, ncol, dtype, square, square,
        lambda v: np.sum(v) * np.ones(nrow, dtype=dtype),
        lambda u: np.sum(u) * np.ones(ncol, dtype=dtype),
        lambda w: np.sum(w) * np.ones(ncol, dtype=dtype),
    )


def zeros(nrow: int, ncol: int, dtype: DTypeLike = DEFAULT_DTYPE) -> LinearOperator:
    """Zero operator of size nrow x ncol."""
    square = nrow == ncol
    return LinearOperator(
        nrow, ncol, dtype, square, square,
        lambda v: np.zeros(nrow, dtype=dtype),
        lambda u: np.zeros(ncol, dtype=dtype),
        lambda w: np.zeros(ncol, dtype=dtype),
    )


def diagonal(
    d: NDArray,
    nrow: int | None = None,
    ncol: int | None = None,
) -> LinearOperator:
    """
    Diagonal operator with the vector d on its main diagonal.

    Without a shape the operator is square, symmetric, and hermitian when d
    is real. With ``nrow != ncol`` the operator is rectangular: the longer
    side is zero padded and the shorter side truncated, and d must have
    length ``min(nrow, ncol)``.

    Args:
        d: Diagonal entries
        nrow: Number of rows (defaults to len(d))
        ncol: Number of columns (defaults to len(d))

    Returns:
        Diagonal operator
    """
    d = np.asarray(d)
    k = d.shape[0]
    nrow = k if nrow is None else nrow
    ncol = k if ncol is None else ncol
    if k != min(nrow, ncol):
        raise ShapeMismatch("diagonal", min(nrow, ncol), k)

    dbar = np.conj(d)
    if nrow == ncol:
        return LinearOperator(
            k, k, d.dtype, True, not np.iscomplexobj(d),
            lambda v: v * d,
            lambda u: u * d,
            lambda w: w * dbar,
        )

    if nrow > ncol:
        pad = nrow - ncol
        return LinearOperator(
            nrow, ncol, d.dtype, False, False,
            lambda v: np.concatenate([v * d, np.zeros(pad, dtype=d.dtype)]),
            lambda u: u[:ncol] * d,
            lambda w: w[:ncol] * dbar,
        )

    pad = ncol - nrow
    return LinearOperator(
        nrow, ncol, d.dtype, False, False,
        lambda v: v[:nrow] * d,
        lambda u: np.concatenate([u * d, np.zeros(pad, dtype=d.dtype)]),
        lambda w: np.concatenate([w * dbar, np.zeros(pad, dtype=d.dtype)]),
    )
