"""Errors raised by prime-field arithmetic.

Each error also derives from the builtin that best describes it, so
``except ZeroDivisionError`` still catches ``DivisionByZero``.
"""

from __future__ import annotations


class FieldError(Exception):
    """Base class for all field arithmetic errors."""


class InvalidModulus(FieldError, ValueError):
    """Raised when a modulus is zero, negative, or too wide for its field."""


class ModulusMismatch(FieldError, ValueError):
    """Raised when two operands belong to fields of different moduli."""

    def __init__(self, left: int, right: int) -> None:
        super().__init__(f"Modulus mismatch: {left} != {right}")
        self.left = left
        self.right = right

    def __reduce__(self):
        return (self.__class__, (self.left, self.right))


class DivisionByZero(FieldError, ZeroDivisionError):
    """Raised when inverting the zero element."""
