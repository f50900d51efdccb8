"""Prime field parameters and a factory bound to one modulus.

``FieldParams`` records which prime a field uses and, optionally, the bit
width of the unsigned integer type its elements are meant to fit in
(8, 16, 32, 64, 256, ...).  ``PrimeField`` builds ``FieldElement``s for
those parameters so callers need not repeat the modulus.
"""

from __future__ import annotations

import logging
import random
import secrets
from typing import Any, Iterator, Optional

from pydantic import BaseModel, ConfigDict, Field

from primefield.config import DEFAULT_PRIME, LARGEST_PRIMES_BY_WIDTH, SECP256K1_P
from primefield.errors import InvalidModulus
from primefield.field import FieldElement

logger = logging.getLogger(__name__)


class FieldParams(BaseModel):
    """Validated description of a prime field.

    Types are checked by pydantic.  The modulus itself is checked after
    validation so a bad modulus raises ``InvalidModulus`` rather than a
    ``ValidationError``.
    """

    model_config = ConfigDict(frozen=True, strict=True)

    modulus: int
    bits: Optional[int] = Field(default=None, gt=0)  # None = unbounded
    name: str = ""

    def __init__(self, **data: Any) -> None:
        super().__init__(**data)
        if self.modulus <= 0:
            raise InvalidModulus(f"Modulus must be positive, got {self.modulus}")
        if self.bits is not None and self.bit_length > self.bits:
            raise InvalidModulus(
                f"Modulus of {self.bit_length} bits does not fit in {self.bits} bits"
            )

    @property
    def bit_length(self) -> int:
        return self.modulus.bit_length()


class PrimeField:
    """Factory for elements of F_p with a fixed p."""

    def __init__(
        self,
        modulus: int | None = None,
        bits: int | None = None,
        name: str = "",
    ) -> None:
        if modulus is None:
            modulus = DEFAULT_PRIME
        self.params = FieldParams(modulus=modulus, bits=bits, name=name)
        logger.debug(
            "prime field %s configured: %d-bit modulus, width=%s",
            name or "<unnamed>",
            self.params.bit_length,
            bits if bits is not None else "unbounded",
        )

    # ---- constructors ----

    @classmethod
    def for_width(cls, bits: int, name: str = "") -> PrimeField:
        """Field over the largest well-known prime below 2**bits."""
        if bits not in LARGEST_PRIMES_BY_WIDTH:
            supported = ", ".join(str(b) for b in sorted(LARGEST_PRIMES_BY_WIDTH))
            raise ValueError(f"No prime registered for width {bits}; supported: {supported}")
        return cls(LARGEST_PRIMES_BY_WIDTH[bits], bits=bits, name=name or f"u{bits}")

    @classmethod
    def secp256k1(cls) -> PrimeField:
        """Base field of the secp256k1 curve used by Bitcoin."""
        return cls(SECP256K1_P, bits=256, name="secp256k1")

    # ---- properties ----

    @property
    def modulus(self) -> int:
        return self.params.modulus

    @property
    def bits(self) -> int | None:
        return self.params.bits

    @property
    def name(self) -> str:
        return self.params.name

    # ---- elements ----

    def element(self, value: int) -> FieldElement:
        return FieldElement(value, self.modulus)

    __call__ = element

    def zero(self) -> FieldElement:
        """Additive identity (0)."""
        return FieldElement(0, self.modulus)

    def one(self) -> FieldElement:
        """Multiplicative identity (1)."""
        return FieldElement(1, self.modulus)

    def elements(self) -> Iterator[FieldElement]:
        """Yield every element in order.  Only sensible for small fields."""
        for i in range(self.modulus):
            yield FieldElement(i, self.modulus)

    def random_element(self, rng: random.Random | None = None) -> FieldElement:
        """Uniform random element.

        Drawn with ``secrets`` unless a seeded *rng* is given.
        """
        if rng is None:
            return FieldElement(secrets.randbelow(self.modulus), self.modulus)
        return FieldElement(rng.randrange(self.modulus), self.modulus)

    def contains(self, element: FieldElement) -> bool:
        return isinstance(element, FieldElement) and element.modulus == self.modulus

    __contains__ = contains

    def __eq__(self, other):
        if not isinstance(other, PrimeField):
            return NotImplemented
        return self.modulus == other.modulus

    def __hash__(self):
        return hash(self.modulus)

    def __repr__(self) -> str:
        label = f"{self.name}, " if self.name else ""
        return f"PrimeField({label}p={self.modulus})"
