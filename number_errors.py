"""
Error kinds raised by the number types and the free-function layer.

Every error derives from the matching builtin as well, so callers that
already catch ``ValueError`` / ``ZeroDivisionError`` keep working.
"""


class NumeraError(Exception):
    """Base class for every error raised by this library."""


class MissingOperandError(NumeraError, TypeError):
    """A required numeric argument was not supplied."""

    def __init__(self, message: str = "Required two or more numbers"):
        super().__init__(message)


class FormatError(NumeraError, ValueError):
    """Text does not match the complex-number grammar."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid complex number format: {value!r}")


class DivisionByZeroError(NumeraError, ZeroDivisionError):
    def __init__(self, message: str = "No number can be divided by zero"):
        super().__init__(message)


class UnsupportedOperationError(NumeraError, ValueError):
    """Request lies outside what the arithmetic here guarantees."""
