"""Randomized operator checks."""

from linops.utils.checks import (
    check_ctranspose,
    check_hermitian,
    check_positive_definite,
)

__all__ = [
    "check_ctranspose",
    "check_hermitian",
    "check_positive_definite",
]
