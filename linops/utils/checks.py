"""Cheap randomized checks of operator properties.

Each check draws random vectors and compares two inner products that
agree for an operator with the property in question. The tolerance is
loose, ε^(1/3) relative by default; a ``True`` result is statistical
evidence, not a proof.
"""

from __future__ import annotations

import logging
from typing import Any, Optional
import numpy as np

from linops.core.operator import aslinearoperator
from linops.core.config import CheckSettings, DEFAULT_CHECK_SETTINGS
from linops.algebra.protocols import LinearAlgebraBackend
from linops.algebra.dense import DenseBackend

logger = logging.getLogger(__name__)


def _as_random_source(source: Any) -> LinearAlgebraBackend:
    """Accept None, a numpy Generator or anything with random(n, dtype)."""
    if source is None:
        return DenseBackend()
    if isinstance(source, np.random.Generator):
        return DenseBackend(rng=source)
    return source


def check_ctranspose(
    op: Any,
    random_source: Any = None,
    settings: Optional[CheckSettings] = None,
) -> bool:
    """
    Check that A and A.H are related by <y, A x> = conj(<x, A.H y>).

    Args:
        op: Operator or matrix
        random_source: numpy Generator or backend providing random vectors
        settings: Tolerances (defaults to DEFAULT_CHECK_SETTINGS)

    Returns:
        True if the identity holds within tolerance
    """
    op = aslinearoperator(op)
    source = _as_random_source(random_source)
    settings = settings or DEFAULT_CHECK_SETTINGS

    m, n = op.shape
    x = source.random(n, op.dtype)
    y = source.random(m, op.dtype)
    yAx = np.vdot(y, op @ x)
    xAty = np.vdot(x, op.H @ y)

    error = abs(yAx - np.conj(xAty))
    passed = bool(error < (abs(yAx) + settings.eps) * settings.slack)
    logger.debug("check_ctranspose: |<y,Ax> - conj(<x,A'y>)| = %.3e, passed=%s",
                 error, passed)
    return passed


def check_hermitian(
    op: Any,
    random_source: Any = None,
    settings: Optional[CheckSettings] = None,
) -> bool:
    """
    Check that A is Hermitian by comparing <Av, Av> with <v, A A v>.

    Non-square operators are never Hermitian.
    """
    op = aslinearoperator(op)
    source = _as_random_source(random_source)
    settings = settings or DEFAULT_CHECK_SETTINGS

    m, n = op.shape
    if m != n:
        logger.debug("check_hermitian: operator of shape %s is not square",
                     op.shape)
        return False

    v = source.random(n, op.dtype)
    w = op @ v
    s = np.vdot(w, w)       # v' A' A v
    t = np.vdot(v, op @ w)  # v' A A v

    passed = bool(abs(s - t) < (abs(s) + settings.eps) * settings.slack)
    logger.debug("check_hermitian: |s - t| = %.3e, passed=%s", abs(s - t), passed)
    return passed


def check_positive_definite(
    op: Any,
    semi: bool = False,
    random_source: Any = None,
    settings: Optional[CheckSettings] = None,
) -> bool:
    """
    Check that <v, A v> is real and positive (nonnegative if ``semi``).

    Args:
        op: Operator or matrix
        semi: Accept positive semi-definite operators
        random_source: numpy Generator or backend providing random vectors
        settings: Tolerances (defaults to DEFAULT_CHECK_SETTINGS)

    Returns:
        True if the sampled quadratic form has the required sign
    """
    op = aslinearoperator(op)
    source = _as_random_source(random_source)
    settings = settings or DEFAULT_CHECK_SETTINGS

    m, n = op.shape
    if m != n:
        logger.debug("check_positive_definite: operator of shape %s is not "
                     "square", op.shape)
        return False

    v = source.random(n, op.dtype)
    vw = np.vdot(v, op @ v)
    if abs(np.imag(vw)) > settings.imag_tolerance * abs(vw):
        logger.debug("check_positive_definite: <v,Av> = %s has a "
                     "non-negligible imaginary part", vw)
        return False

    vw = float(np.real(vw))
    passed = vw >= 0 if semi else vw > 0
    logger.debug("check_positive_definite: <v,Av> = %.3e, semi=%s, passed=%s",
                 vw, semi, passed)
    return passed
