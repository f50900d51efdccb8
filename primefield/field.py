"""Prime-field arithmetic F_p.

A ``FieldElement`` is an immutable (value, modulus) pair with
``0 <= value < modulus``.  The modulus is assumed prime; this is not
checked, and division and negative powers are wrong for composite moduli.

Values and moduli may be given as any integer-like object (``int``,
``bool``, numpy integer scalars, ...).  They are converted to Python
ints, which never overflow, so products and powers are computed at full
width whatever the width of the caller's integer type.
"""

from __future__ import annotations

import operator
from typing import Generic, SupportsIndex, TypeVar

from primefield.errors import DivisionByZero, InvalidModulus, ModulusMismatch

T = TypeVar("T", bound=SupportsIndex)


class FieldElement(Generic[T]):
    """Element of the prime field F_modulus."""

    __slots__ = ("_value", "_modulus")

    def __init__(self, value: T, modulus: T) -> None:
        modulus = operator.index(modulus)
        if modulus <= 0:
            raise InvalidModulus(f"Modulus must be positive, got {modulus}")
        object.__setattr__(self, "_modulus", modulus)
        object.__setattr__(self, "_value", operator.index(value) % modulus)

    @classmethod
    def new(cls, value: T, modulus: T) -> FieldElement[T]:
        """Alias of the constructor."""
        return cls(value, modulus)

    # ---- accessors ----

    @property
    def value(self) -> int:
        return self._value

    @property
    def modulus(self) -> int:
        return self._modulus

    def zero(self) -> FieldElement[T]:
        """Additive identity of this element's field."""
        return self.__class__(0, self._modulus)

    def one(self) -> FieldElement[T]:
        """Multiplicative identity of this element's field."""
        return self.__class__(1, self._modulus)

    def is_zero(self) -> bool:
        return self._value == 0

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __int__(self) -> int:
        return self._value

    def __reduce__(self):
        return (self.__class__, (self._value, self._modulus))

    # ---- comparison ----

    def __eq__(self, other):
        if not isinstance(other, FieldElement):
            return NotImplemented
        return self._value == other._value and self._modulus == other._modulus

    def __hash__(self):
        return hash((self._value, self._modulus))

    def __repr__(self) -> str:
        return f"FieldElement_{self._modulus}({self._value})"

    __str__ = __repr__

    # ---- arithmetic ----

    def _check_same_field(self, other: FieldElement) -> None:
        if self._modulus != other._modulus:
            raise ModulusMismatch(self._modulus, other._modulus)

    def __add__(self, other):
        """Field addition."""
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other)
        return self.__class__((self._value + other._value) % self._modulus, self._modulus)

    def __neg__(self):
        """Additive inverse."""
        return self.__class__((self._modulus - self._value) % self._modulus, self._modulus)

    def __sub__(self, other):
        """Field subtraction, as addition of the additive inverse."""
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other)
        return self + (-other)

    def __mul__(self, other):
        """Field multiplication."""
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other)
        return self.__class__((self._value * other._value) % self._modulus, self._modulus)

    def pow(self, exponent: SupportsIndex) -> FieldElement[T]:
        """Raise to *exponent* by square-and-multiply.

        ``a.pow(0)`` is ``one()`` even for the zero element.  A negative
        exponent is reduced mod (p - 1) by Fermat's little theorem, so
        ``a.pow(-k)`` is the inverse of ``a.pow(k)``.
        """
        exponent = operator.index(exponent)
        if exponent == 0:
            return self.one()
        if exponent < 0:
            if self._value == 0:
                raise DivisionByZero(f"Cannot raise zero to negative power {exponent}")
            exponent %= self._modulus - 1
        return self.__class__(pow(self._value, exponent, self._modulus), self._modulus)

    def __pow__(self, exponent, modulo=None):
        if modulo is not None:
            return NotImplemented
        return self.pow(exponent)

    def inverse(self) -> FieldElement[T]:
        """Multiplicative inverse via Fermat's little theorem (p is prime)."""
        if self._value == 0:
            raise DivisionByZero(f"Cannot invert zero in F_{self._modulus}")
        return self.pow(self._modulus - 2)

    def __truediv__(self, other):
        """Field division: multiply by the inverse of *other*."""
        if not isinstance(other, FieldElement):
            return NotImplemented
        self._check_same_field(other)
        return self * other.inverse()
