"""Domain-level exceptions.

All money rule violations are expressed as subclasses of MoneyException
so the CLI layer can catch them uniformly and display user-friendly messages.
The concrete errors also subclass the matching builtin so plain
``except ValueError`` / ``except TypeError`` callers keep working.
"""

from __future__ import annotations


class MoneyException(Exception):
    """Base class for all money errors."""


class CurrencyMismatchError(MoneyException, ValueError):
    """Two monetary values with different currencies were combined."""

    def __init__(self, expected: str, actual: str) -> None:
        super().__init__(f"Currency mismatch: {expected} vs {actual}")
        self.expected = expected
        self.actual = actual


class InvalidElementTypeError(MoneyException, TypeError):
    """A non-Money value was supplied where a Money value was required."""

    def __init__(self, element: object) -> None:
        super().__init__(
            f"All values must be Money objects, got {type(element).__name__}"
        )
        self.element = element


class InvalidArgumentError(MoneyException, ValueError):
    """A numeric argument is outside the operation's domain."""
