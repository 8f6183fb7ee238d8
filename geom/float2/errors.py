"""Error types raised by Float2 conversions, assertions and inversion."""

from __future__ import annotations

from typing import Any


class Float2Error(Exception):
    """Base class for Float2 errors."""

    def __init__(self, value: Any, *, reason: str) -> None:
        super().__init__(f"{reason}: {value}")
        self.value = value
        self.reason = reason


class InvalidArgument(Float2Error, ValueError):
    """Raised when input to a constructor or converter is malformed."""


class InvalidState(Float2Error, ValueError):
    """Raised when a vector does not satisfy an asserted condition."""


class DivisionByZero(InvalidState, ZeroDivisionError):
    """Raised by invert() when a component is within epsilon of zero."""


__all__ = ["Float2Error", "InvalidArgument", "InvalidState", "DivisionByZero"]
