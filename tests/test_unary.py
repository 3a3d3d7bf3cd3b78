"""Tests for negation, transpose, adjoint and conjugation."""

import numpy as np
import pytest

from linops import (
    LinearOperator,
    InferenceError,
    negate,
    transpose,
    adjoint,
    conjugate,
    materialize,
)


def complex_matrix(m, n):
    return np.random.randn(m, n) + 1j * np.random.randn(m, n)


def complex_vector(n):
    return np.random.randn(n) + 1j * np.random.randn(n)


def prod_only(M, symmetric=False, hermitian=False):
    """Operator knowing only its forward action."""
    nrow, ncol = M.shape
    return LinearOperator(nrow, ncol, M.dtype, symmetric, hermitian,
                          lambda v: M @ v)


def test_negate():
    """-A negates all three actions."""
    M = complex_matrix(3, 2)
    op = -LinearOperator.from_matrix(M)
    u = complex_vector(3)

    assert np.allclose(materialize(op), -M)
    assert np.allclose(op.T @ u, -M.T @ u)
    assert np.allclose(op.H @ u, -M.conj().T @ u)


def test_negate_keeps_absent_actions_absent():
    """Negating a prod-only operator does not invent transposes."""
    op = negate(prod_only(np.eye(2), symmetric=True, hermitian=True))

    assert op.tprod is None
    assert op.ctprod is None
    assert np.allclose(op.T @ np.ones(2), -np.ones(2))


def test_unary_plus_is_identity():
    """+A returns A itself."""
    op = LinearOperator.from_matrix(np.eye(2))

    assert +op is op


def test_transpose_of_symmetric_is_same_operator():
    """Symmetric operators are their own transpose."""
    M = np.array([[2.0, 1.0], [1.0, 3.0]])
    op = LinearOperator.from_matrix(M, symmetric=True)
    v = np.random.randn(2)

    assert transpose(op) is op
    assert np.allclose(op.T @ v, op @ v)


def test_transpose_from_tprod():
    """Transpose swaps prod and tprod."""
    M = complex_matrix(4, 3)
    op = LinearOperator.from_matrix(M)
    At = transpose(op)

    assert At.shape == (3, 4)
    assert np.allclose(materialize(At), M.T)
    assert np.allclose(materialize(At.H), M.conj())
    assert np.allclose(materialize(At.T), M)


def test_transpose_inferred_from_ctprod():
    """A.T v = conj(A.H conj(v)) when only ctprod is known."""
    M = complex_matrix(3, 4)
    op = LinearOperator(3, 4, M.dtype, False, False,
                        lambda v: M @ v, None, lambda w: M.conj().T @ w)

    At = op.T
    assert np.allclose(materialize(At), M.T)
    assert np.allclose(materialize(At.T), M)
    assert np.allclose(materialize(At.H), M.conj())


def test_transpose_inferred_from_hermitian_flag():
    """A hermitian prod-only operator has A.T = conj(A)."""
    B = complex_matrix(3, 3)
    M = B + B.conj().T
    op = prod_only(M, hermitian=True)

    assert np.allclose(materialize(op.T), M.T)


def test_transpose_not_inferable():
    """A general prod-only operator has no derivable transpose."""
    op = prod_only(np.random.randn(2, 3))

    with pytest.raises(InferenceError):
        transpose(op)


def test_adjoint_of_hermitian_is_same_operator():
    """Hermitian operators are their own adjoint."""
    op = prod_only(np.eye(3), hermitian=True)

    assert adjoint(op) is op


def test_adjoint_from_ctprod():
    """Adjoint swaps prod and ctprod."""
    M = complex_matrix(2, 5)
    op = LinearOperator.from_matrix(M)
    Ah = adjoint(op)

    assert Ah.shape == (5, 2)
    assert np.allclose(materialize(Ah), M.conj().T)
    assert np.allclose(materialize(Ah.T), M.conj())
    assert np.allclose(materialize(Ah.H), M)


def test_adjoint_inferred_from_tprod():
    """A.H v = conj(A.T conj(v)) when only tprod is known."""
    M = complex_matrix(3, 2)
    op = LinearOperator(3, 2, M.dtype, False, False,
                        lambda v: M @ v, lambda u: M.T @ u, None)

    Ah = op.H
    assert np.allclose(materialize(Ah), M.conj().T)
    assert np.allclose(materialize(Ah.H), M)


def test_adjoint_inferred_from_symmetric_flag():
    """A complex symmetric prod-only operator has A.H = conj(A)."""
    B = complex_matrix(3, 3)
    M = B + B.T
    op = prod_only(M, symmetric=True)

    assert np.allclose(materialize(op.H), M.conj())


def test_adjoint_not_inferable():
    """A general prod-only operator has no derivable adjoint."""
    op = prod_only(np.random.randn(3, 3))

    with pytest.raises(InferenceError):
        adjoint(op)


def test_double_transpose_and_adjoint():
    """(A.T).T and (A.H).H act like A."""
    M = complex_matrix(4, 3)
    op = LinearOperator.from_matrix(M)
    v = complex_vector(3)

    assert np.allclose(op.T.T @ v, M @ v)
    assert np.allclose(op.H.H @ v, M @ v)


def test_conjugate():
    """conj(A) acts as the elementwise conjugate matrix."""
    M = complex_matrix(3, 4)
    op = conjugate(LinearOperator.from_matrix(M))

    assert np.allclose(materialize(op), M.conj())
    assert np.allclose(materialize(op.T), M.conj().T)
    assert np.allclose(materialize(op.H), M.T)


def test_conjugate_method_matches_function():
    """op.conj() is conjugate(op)."""
    M = complex_matrix(2, 2)
    op = LinearOperator.from_matrix(M)

    assert np.allclose(materialize(op.conj()), M.conj())


def test_inference_error_message():
    """InferenceError names the missing action."""
    op = prod_only(np.ones((2, 3)))

    with pytest.raises(InferenceError, match="conjugate transpose"):
        op.H
