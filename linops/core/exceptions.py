"""Exception classes raised by linear operator construction and algebra."""

from __future__ import annotations

from typing import Any


class LinearOperatorError(Exception):
    """
    Base exception for linear operator errors.

    Carries optional diagnostic data which is appended to the message,
    one ``key: value`` line per entry.
    """

    def __init__(
        self,
        message: str,
        diagnostic_data: dict[str, Any] | None = None,
    ):
        self.diagnostic_data = diagnostic_data or {}

        full_message = message
        if self.diagnostic_data:
            full_message += "\nDiagnostic Information:"
            for key, value in self.diagnostic_data.items():
                full_message += f"\n   - {key}: {value}"

        super().__init__(full_message)


class ShapeMismatch(LinearOperatorError, ValueError):
    """Operand shapes are incompatible with the requested operation."""

    def __init__(
        self,
        operation: str,
        expected: Any,
        provided: Any,
    ):
        self.operation = operation
        self.expected = expected
        self.provided = provided
        super().__init__(
            f"Shape mismatch in {operation}",
            diagnostic_data={"expected": expected, "provided": provided},
        )


class InferenceError(LinearOperatorError):
    """A transpose or adjoint action cannot be derived from the operator."""

    def __init__(self, action: str, shape: tuple[int, int]):
        self.action = action
        super().__init__(
            f"Unable to infer {action} operator",
            diagnostic_data={
                "shape": shape,
                "hint": "provide tprod/ctprod or mark the operator "
                        "symmetric/hermitian",
            },
        )


class ConstructionError(LinearOperatorError):
    """Preconditions of a special operator do not hold."""
