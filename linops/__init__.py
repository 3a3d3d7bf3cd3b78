"""
linops: matrix-free linear operators.

A linear operator behaves like a matrix while being defined only by its
action on vectors. This library provides:
- An operator descriptor built from matrices or action functions
- Negation, transpose, adjoint, conjugate, sums, products and scaling
- Block concatenation
- Special operators (identity, diagonal, inverse, Cholesky, Householder)
- Randomized adjoint, hermitian and definiteness checks
"""

__version__ = "0.1.0"

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
from linops.core.config import CheckSettings, DEFAULT_CHECK_SETTINGS
from linops.algebra import (
    LinearAlgebraBackend,
    DenseBackend,
    negate,
    transpose,
    adjoint,
    conjugate,
    compose,
    scale,
    add,
    subtract,
    shift,
    hconcat,
    vconcat,
)
from linops.operators import (
    eye,
    ones,
    zeros,
    diagonal,
    inverse,
    cholesky,
    householder,
    hermitian_from_triangle,
)
from linops.utils import (
    check_ctranspose,
    check_hermitian,
    check_positive_definite,
)

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
    "LinearAlgebraBackend",
    "DenseBackend",
    "negate",
    "transpose",
    "adjoint",
    "conjugate",
    "compose",
    "scale",
    "add",
    "subtract",
    "shift",
    "hconcat",
    "vconcat",
    "eye",
    "ones",
    "zeros",
    "diagonal",
    "inverse",
    "cholesky",
    "householder",
    "hermitian_from_triangle",
    "check_ctranspose",
    "check_hermitian",
    "check_positive_definite",
]
