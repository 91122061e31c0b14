"""
Exception types raised by reducekit.

Each error also derives from the builtin exception a caller would expect from
the equivalent standard library operation, so `except TypeError` around a
reduction keeps working.
"""

from __future__ import annotations


class ReducekitError(Exception):
    """Base class for all reducekit errors."""


class EmptySequenceError(ReducekitError, TypeError):
    """Raised when reducing an empty sequence without an initial value."""

    def __init__(self, message: str = "reduce() of empty sequence with no initial value") -> None:
        super().__init__(message)


class UnknownMatcherError(ReducekitError, ValueError):
    """Raised when a matcher name is not present in the registry."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(f"Unknown matcher '{name}'. Available: {', '.join(available)}")


__all__ = ["ReducekitError", "EmptySequenceError", "UnknownMatcherError"]
