"""Arithmetic in the base field of the NIST P-256 curve.

The prime is p = 2^224 (2^32 - 1) + 2^192 + 2^96 - 1.
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass

FIELD_BYTES = 32

MODULUS = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF

# Exponents used by inversion (Fermat) and square roots (p = 3 mod 4).
_INVERT_EXPONENT = MODULUS - 2
_SQRT_EXPONENT = (MODULUS + 1) // 4


@dataclass(frozen=True, slots=True)
class FieldElement:
    """An element of GF(p), held in canonical form in the range [0, p)."""

    value: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise TypeError("field element value must be an int")
        if not 0 <= self.value < MODULUS:
            raise ValueError("field element value out of range [0, p)")

    @classmethod
    def zero(cls) -> FieldElement:
        """Return the additive identity."""
        return cls(0)

    @classmethod
    def one(cls) -> FieldElement:
        """Return the multiplicative identity."""
        return cls(1)

    @classmethod
    def generate(cls) -> FieldElement:
        """Return a uniformly random element.

        A 512-bit random value is reduced into the field, leaving a
        negligible bias.
        """
        wide = int.from_bytes(secrets.token_bytes(2 * FIELD_BYTES), "big")
        return cls(wide % MODULUS)

    @classmethod
    def from_bytes(cls, data: bytes) -> FieldElement:
        """Parse a 32-byte big-endian SEC1 field element.

        Raises ValueError if the length is wrong or the integer is not below p.
        """
        data = bytes(data)
        if len(data) != FIELD_BYTES:
            raise ValueError(f"expected {FIELD_BYTES} bytes, got {len(data)}")
        value = int.from_bytes(data, "big")
        if value >= MODULUS:
            raise ValueError("encoded integer is not less than the field modulus")
        return cls(value)

    def to_bytes(self) -> bytes:
        """Return the 32-byte big-endian SEC1 encoding."""
        return self.value.to_bytes(FIELD_BYTES, "big")

    def is_zero(self) -> bool:
        """Return True if this element is zero."""
        return self.value == 0

    def is_odd(self) -> bool:
        """Return True if this element is odd in the SEC1 sense."""
        return self.value & 1 == 1

    def double(self) -> FieldElement:
        """Return 2 * self."""
        return self + self

    def square(self) -> FieldElement:
        """Return self * self."""
        return self * self

    def pow_vartime(self, exponent: int) -> FieldElement:
        """Return self raised to a non-negative integer exponent.

        Runs in time that depends on the exponent.
        """
        if exponent < 0:
            raise ValueError("exponent must be non-negative")
        return FieldElement(pow(self.value, exponent, MODULUS))

    def invert(self) -> FieldElement:
        """Return the multiplicative inverse.

        Raises ZeroDivisionError for zero.
        """
        if self.is_zero():
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return self.pow_vartime(_INVERT_EXPONENT)

    def sqrt(self) -> FieldElement:
        """Return a square root of self.

        Raises ValueError if self is not a quadratic residue.
        """
        root = self.pow_vartime(_SQRT_EXPONENT)
        if root.square() != self:
            raise ValueError("element has no square root in the field")
        return root

    def __add__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value + other.value) % MODULUS)

    def __sub__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value - other.value) % MODULUS)

    def __mul__(self, other: object) -> FieldElement:
        if not isinstance(other, FieldElement):
            return NotImplemented
        return FieldElement((self.value * other.value) % MODULUS)

    def __neg__(self) -> FieldElement:
        return FieldElement((-self.value) % MODULUS)

    def __int__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f"FieldElement(0x{self.value:064x})"


# a = -3
CURVE_EQUATION_A = FieldElement.zero() - FieldElement.one() - FieldElement.one() - FieldElement.one()

# b = 0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
CURVE_EQUATION_B = FieldElement(
    0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B
)