"""Operator descriptor, error taxonomy and defaults."""

from linops.core.operator import (
    LinearOperator,
    aslinearoperator,
    apply,
    dimension,
    hermitian,
    materialize,
    shape,
    symmetric,
)
from linops.core.exceptions import (
    LinearOperatorError,
    ShapeMismatch,
    InferenceError,
    ConstructionError,
)
from linops.core.config import CheckSettings, DEFAULT_CHECK_SETTINGS, DEFAULT_DTYPE

__all__ = [
    "LinearOperator",
    "aslinearoperator",
    "apply",
    "dimension",
    "hermitian",
    "materialize",
    "shape",
    "symmetric",
    "LinearOperatorError",
    "ShapeMismatch",
    "InferenceError",
    "ConstructionError",
    "CheckSettings",
    "DEFAULT_CHECK_SETTINGS",
    "DEFAULT_DTYPE",
]
