"""Matrix-free linear operator descriptor."""

from dataclasses import dataclass
from numbers import Number
from typing import Callable, Optional, Any
import numpy as np
import scipy.sparse
from numpy.typing import NDArray, DTypeLike

from linops.core.exceptions import ShapeMismatch


Action = Callable[[NDArray], NDArray]


def is_matrix(obj: Any) -> bool:
    """True for two-dimensional NumPy arrays and SciPy sparse matrices."""
    if scipy.sparse.issparse(obj):
        return True
    return isinstance(obj, np.ndarray) and obj.ndim == 2


def is_scalar(obj: Any) -> bool:
    """True for Python and NumPy numbers."""
    return isinstance(obj, Number)


@dataclass(frozen=True, eq=False, repr=False)
class LinearOperator:
    """
    Matrix-free linear operator.

    An operator is described by its shape, element type, symmetry flags and
    the action ``prod`` computing ``A @ v``. The transpose action ``tprod``
    (``A.T @ u``) and adjoint action ``ctprod`` (``A.H @ w``) are optional:
    when absent they are inferred on demand from the flags and from each
    other (see :func:`linops.algebra.unary.transpose`).

    Operators are immutable. Every algebraic operation returns a new
    operator holding references to its operands.
    """

    nrow: int
    ncol: int
    dtype: np.dtype
    symmetric: bool
    hermitian: bool
    prod: Action
    tprod: Optional[Action] = None
    ctprod: Optional[Action] = None

    # Make NumPy defer binary operators (M @ op, 2.0 * op) to this class.
    __array_ufunc__ = None

    def __post_init__(self):
        if self.nrow < 0 or self.ncol < 0:
            raise ValueError(
                f"Operator dimensions must be non-negative, got "
                f"({self.nrow}, {self.ncol})"
            )
        object.__setattr__(self, "nrow", int(self.nrow))
        object.__setattr__(self, "ncol", int(self.ncol))
        object.__setattr__(self, "dtype", np.dtype(self.dtype))
        object.__setattr__(self, "symmetric", bool(self.symmetric))
        object.__setattr__(self, "hermitian", bool(self.hermitian))

    # Constructors

    @classmethod
    def from_matrix(
        cls,
        M: Any,
        symmetric: bool = False,
        hermitian: bool = False,
    ) -> "LinearOperator":
        """
        Wrap a dense or sparse matrix.

        Args:
            M: ``ndarray`` or ``scipy.sparse`` matrix
            symmetric: Whether M equals its transpose
            hermitian: Whether M equals its conjugate transpose

        Returns:
            Operator applying M, M.T and M.H via native products
        """
        if not is_matrix(M):
            raise TypeError(
                f"Expected a 2-D array or sparse matrix, got {type(M).__name__}"
            )
        nrow, ncol = M.shape
        return cls(
            nrow, ncol, M.dtype, symmetric, hermitian,
            lambda v: M @ v,
            lambda u: M.T @ u,
            lambda w: M.conj().T @ w,
        )

    @classmethod
    def from_function(
        cls,
        n: int,
        dtype: DTypeLike,
        prod: Action,
    ) -> "LinearOperator":
        """Square symmetric and hermitian operator from a single action."""
        return cls(n, n, dtype, True, True, prod, prod, prod)

    @classmethod
    def from_functions(
        cls,
        nrow: int,
        ncol: int,
        dtype: DTypeLike,
        symmetric: bool,
        hermitian: bool,
        prod: Action,
        tprod: Action,
        ctprod: Action,
    ) -> "LinearOperator":
        """Operator with all three actions given explicitly."""
        return cls(nrow, ncol, dtype, symmetric, hermitian, prod, tprod, ctprod)

    # Descriptor

    @property
    def shape(self) -> tuple[int, int]:
        """(nrow, ncol) dimensions."""
        return (self.nrow, self.ncol)

    def size(self, d: int) -> int:
        """Dimension along axis ``d`` (1 for rows, 2 for columns)."""
        if d == 1:
            return self.nrow
        if d == 2:
            return self.ncol
        raise ValueError("Linear operators only have 2 dimensions")

    def apply(self, v: NDArray) -> NDArray:
        """Compute A @ v."""
        v = np.asarray(v)
        if v.ndim != 1 or v.shape[0] != self.ncol:
            raise ShapeMismatch("apply", (self.ncol,), v.shape)
        return self.prod(v)

    def materialize(self) -> NDArray:
        """Dense array assembled column by column from ``ncol`` products."""
        m, n = self.shape
        A = np.zeros((m, n), dtype=self.dtype)
        ei = np.zeros(n, dtype=self.dtype)
        for i in range(n):
            ei[i] = 1
            A[:, i] = self.apply(ei)
            ei[i] = 0
        return A

    # Unary algebra

    @property
    def T(self) -> "LinearOperator":
        """Transpose operator."""
        from linops.algebra.unary import transpose
        return transpose(self)

    @property
    def H(self) -> "LinearOperator":
        """Conjugate transpose operator."""
        from linops.algebra.unary import adjoint
        return adjoint(self)

    def conj(self) -> "LinearOperator":
        """Elementwise conjugate operator."""
        from linops.algebra.unary import conjugate
        return conjugate(self)

    def __neg__(self) -> "LinearOperator":
        from linops.algebra.unary import negate
        return negate(self)

    def __pos__(self) -> "LinearOperator":
        return self

    # Binary algebra

    def __matmul__(self, other):
        from linops.algebra.binary import compose
        if isinstance(other, LinearOperator) or is_matrix(other):
            return compose(self, other)
        return self.apply(other)

    def __rmatmul__(self, other):
        from linops.algebra.binary import compose
        if is_matrix(other):
            return compose(other, self)
        return NotImplemented

    def __mul__(self, other):
        from linops.algebra.binary import scale
        if is_scalar(other):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other):
        from linops.algebra.binary import scale
        if is_scalar(other):
            return scale(other, self)
        return NotImplemented

    def __truediv__(self, other):
        from linops.algebra.binary import scale
        if is_scalar(other):
            return scale(self, 1 / other)
        return NotImplemented

    def __add__(self, other):
        from linops.algebra.binary import add, shift
        if isinstance(other, LinearOperator) or is_matrix(other):
            return add(self, other)
        if is_scalar(other):
            return shift(self, other)
        return NotImplemented

    def __radd__(self, other):
        from linops.algebra.binary import add, shift
        if is_matrix(other):
            return add(other, self)
        if is_scalar(other):
            return shift(other, self)
        return NotImplemented

    def __sub__(self, other):
        from linops.algebra.binary import subtract, shift
        if isinstance(other, LinearOperator) or is_matrix(other):
            return subtract(self, other)
        if is_scalar(other):
            return shift(self, -other)
        return NotImplemented

    def __rsub__(self, other):
        from linops.algebra.binary import subtract, shift
        if is_matrix(other):
            return subtract(other, self)
        if is_scalar(other):
            return shift(other, -self)
        return NotImplemented

    # Display

    def __repr__(self) -> str:
        return (
            f"<{self.nrow}x{self.ncol} LinearOperator with dtype={self.dtype}"
            f", symmetric={self.symmetric}, hermitian={self.hermitian}>"
        )

    def __str__(self) -> str:
        lines = [
            "Linear operator",
            f"  nrow: {self.nrow}",
            f"  ncol: {self.ncol}",
            f"  dtype: {self.dtype}",
            f"  symmetric: {self.symmetric}",
            f"  hermitian: {self.hermitian}",
            f"  prod:   {_describe(self.prod)}",
            f"  tprod:  {_describe(self.tprod)}",
            f"  ctprod: {_describe(self.ctprod)}",
        ]
        return "\n".join(lines)


def _describe(action: Optional[Action]) -> str:
    if action is None:
        return "absent"
    return getattr(action, "__qualname__", repr(action))


def aslinearoperator(obj: Any) -> LinearOperator:
    """Return ``obj`` if it is an operator, otherwise wrap it as a matrix."""
    if isinstance(obj, LinearOperator):
        return obj
    if is_matrix(obj):
        return LinearOperator.from_matrix(obj)
    raise TypeError(
        f"Cannot interpret {type(obj).__name__} as a linear operator"
    )


def shape(op: LinearOperator) -> tuple[int, int]:
    """(nrow, ncol) of an operator."""
    return op.shape


def dimension(op: LinearOperator, d: int) -> int:
    """Size of ``op`` along dimension ``d`` in {1, 2}."""
    return op.size(d)


def symmetric(op: LinearOperator) -> bool:
    """Whether ``op`` equals its transpose."""
    return op.symmetric


def hermitian(op: LinearOperator) -> bool:
    """Whether ``op`` equals its conjugate transpose."""
    return op.hermitian


def apply(op: LinearOperator, v: NDArray) -> NDArray:
    """Compute ``op @ v`` after checking the length of ``v``."""
    return op.apply(v)


def materialize(op: LinearOperator) -> NDArray:
    """Dense matrix of ``op``."""
    return op.materialize()
