"""Library of special operators."""

from linops.operators.basic import eye, ones, zeros, diagonal
from linops.operators.inverse import inverse, cholesky
from linops.operators.hermitian import householder, hermitian_from_triangle

__all__ = [
    "eye",
    "ones",
    "zeros",
    "diagonal",
    "inverse",
    "cholesky",
    "householder",
    "hermitian_from_triangle",
]
