"""Operator algebra and linear algebra backend abstractions."""

from linops.algebra.protocols import LinearAlgebraBackend
from linops.algebra.dense import DenseBackend
from linops.algebra.unary import negate, transpose, adjoint, conjugate
from linops.algebra.binary import compose, scale, add, subtract, shift
from linops.algebra.blocks import hconcat, vconcat

__all__ = [
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
]
