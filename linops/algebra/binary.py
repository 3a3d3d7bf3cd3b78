"""Binary operator algebra: composition, scaling, sums and affine shifts.

Matrices appearing on either side of an operation are promoted with
:func:`linops.core.operator.aslinearoperator` first. Transposes and
adjoints of the operands are inferred when the result is applied, not
when it is built.
"""

from typing import Any
import numpy as np

from linops.core.operator import LinearOperator, aslinearoperator, is_scalar
from linops.core.exceptions import ShapeMismatch
from linops.algebra.unary import negate
from linops.operators.basic import ones


def compose(op1: Any, op2: Any) -> LinearOperator:
    """
    Return the product A @ B.

    Symmetry flags are not propagated.

    Args:
        op1: Operator or matrix A, shape (m, k)
        op2: Operator or matrix B, shape (k, n)

    Returns:
        Operator of shape (m, n)
    """
    op1 = aslinearoperator(op1)
    op2 = aslinearoperator(op2)
    m1, n1 = op1.shape
    m2, n2 = op2.shape
    if m2 != n1:
        raise ShapeMismatch("compose", (n1, n2), (m2, n2))

    return LinearOperator(
        m1, n2, np.result_type(op1.dtype, op2.dtype), False, False,
        lambda v: op1 @ (op2 @ v),
        lambda u: op2.T @ (op1.T @ u),
        lambda w: op2.H @ (op1.H @ w),
    )


def scale(a: Any, b: Any) -> LinearOperator:
    """
    Multiply an operator by a scalar.

    ``scale(op, x)`` is A*x and ``scale(x, op)`` is x*A. The hermitian flag
    survives only for real x.
    """
    if isinstance(a, LinearOperator) and is_scalar(b):
        return _right_scale(a, b)
    if is_scalar(a) and isinstance(b, LinearOperator):
        return _left_scale(a, b)
    raise TypeError(
        f"scale expects an operator and a scalar, got "
        f"{type(a).__name__} and {type(b).__name__}"
    )


def _scaled_flags(op: LinearOperator, x) -> tuple[np.dtype, bool, bool]:
    dtype = np.result_type(op.dtype, np.asarray(x).dtype)
    return dtype, op.symmetric, op.hermitian and bool(np.imag(x) == 0)


def _right_scale(op: LinearOperator, x) -> LinearOperator:
    dtype, sym, herm = _scaled_flags(op, x)
    xbar = np.conj(x)
    return LinearOperator(
        op.nrow, op.ncol, dtype, sym, herm,
        lambda v: (op @ v) * x,
        lambda u: x * (op.T @ u),
        lambda w: xbar * (op.H @ w),
    )


def _left_scale(x, op: LinearOperator) -> LinearOperator:
    dtype, sym, herm = _scaled_flags(op, x)
    xbar = np.conj(x)
    return LinearOperator(
        op.nrow, op.ncol, dtype, sym, herm,
        lambda v: x * (op @ v),
        lambda u: (op.T @ u) * x,
        lambda w: (op.H @ w) * xbar,
    )


def add(op1: Any, op2: Any) -> LinearOperator:
    """
    Return the sum A + B of two operators (or matrices) of equal shape.

    The result is symmetric (hermitian) only if both operands are.
    """
    op1 = aslinearoperator(op1)
    op2 = aslinearoperator(op2)
    if op1.shape != op2.shape:
        raise ShapeMismatch("add", op1.shape, op2.shape)

    return LinearOperator(
        op1.nrow, op1.ncol, np.result_type(op1.dtype, op2.dtype),
        op1.symmetric and op2.symmetric,
        op1.hermitian and op2.hermitian,
        lambda v: (op1 @ v) + (op2 @ v),
        lambda u: (op1.T @ u) + (op2.T @ u),
        lambda w: (op1.H @ w) + (op2.H @ w),
    )


def subtract(op1: Any, op2: Any) -> LinearOperator:
    """Return A - B as A + (-B)."""
    return add(op1, negate(aslinearoperator(op2)))


def shift(a: Any, b: Any) -> LinearOperator:
    """
    Affine shift of an operator by a scalar.

    ``shift(op, x)`` is ``op + x * ones(shape(op))`` and ``shift(x, op)`` is
    ``x * ones(shape(op)) + op``. This adds x times the rank-one all-ones
    operator; it is not an entrywise shift of A.

    ``op - x`` is ``shift(op, -x)`` and ``x - op`` is ``shift(x, -op)``.
    """
    if isinstance(a, LinearOperator) and is_scalar(b):
        return add(a, b * ones(a.nrow, a.ncol, dtype=a.dtype))
    if is_scalar(a) and isinstance(b, LinearOperator):
        return add(a * ones(b.nrow, b.ncol, dtype=b.dtype), b)
    raise TypeError(
        f"shift expects an operator and a scalar, got "
        f"{type(a).__name__} and {type(b).__name__}"
    )
