"""Points on the NIST P-256 curve in affine coordinates, with SEC1 encoding."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING

from nistp256.field import (
    CURVE_EQUATION_A,
    CURVE_EQUATION_B,
    FIELD_BYTES,
    FieldElement,
)

if TYPE_CHECKING:
    from nistp256.projective import ProjectivePoint

_GENERATOR_X = 0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296
_GENERATOR_Y = 0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5


class Tag(IntEnum):
    """Leading byte of a SEC1 encoded point."""

    IDENTITY = 0x00
    COMPRESSED_EVEN_Y = 0x02
    COMPRESSED_ODD_Y = 0x03
    UNCOMPRESSED = 0x04
    COMPACT = 0x05


COMPRESSED_POINT_BYTES = 1 + FIELD_BYTES
UNCOMPRESSED_POINT_BYTES = 1 + 2 * FIELD_BYTES


def _curve_rhs(x: FieldElement) -> FieldElement:
    """Return x^3 + a*x + b."""
    return x * x * x + CURVE_EQUATION_A * x + CURVE_EQUATION_B


@dataclass(frozen=True, slots=True)
class AffinePoint:
    """A point on secp256r1 in affine coordinates, or the point at infinity."""

    x: FieldElement = field(default_factory=FieldElement.zero)
    y: FieldElement = field(default_factory=FieldElement.zero)
    infinity: bool = True

    @classmethod
    def identity(cls) -> AffinePoint:
        """Return the point at infinity."""
        return cls(FieldElement.zero(), FieldElement.zero(), True)

    @classmethod
    def generator(cls) -> AffinePoint:
        """Return the P-256 base point."""
        return cls(FieldElement(_GENERATOR_X), FieldElement(_GENERATOR_Y), False)

    def is_identity(self) -> bool:
        """Return True for the point at infinity."""
        return self.infinity

    @classmethod
    def decompress(cls, x_bytes: bytes, y_is_odd: bool) -> AffinePoint:
        """Recover a point from its x-coordinate and the parity of y.

        Raises ValueError if x is not a valid field element or no point has it.
        """
        x = FieldElement.from_bytes(x_bytes)
        try:
            beta = _curve_rhs(x).sqrt()
        except ValueError as exc:
            raise ValueError("x-coordinate does not lie on the curve") from exc
        y = beta if beta.is_odd() == bool(y_is_odd) else -beta
        return cls(x, y, False)

    @classmethod
    def from_encoded_point(cls, data: bytes) -> AffinePoint:
        """Parse a SEC1 encoded point (identity, compressed or uncompressed).

        Raises ValueError if the encoding is malformed or the point is not on
        the curve.
        """
        data = bytes(data)
        if not data:
            raise ValueError("empty point encoding")
        try:
            tag = Tag(data[0])
        except ValueError as exc:
            raise ValueError(f"invalid SEC1 tag 0x{data[0]:02x}") from exc

        if tag is Tag.IDENTITY:
            if len(data) != 1:
                raise ValueError("identity encoding must be a single byte")
            return cls.identity()

        if tag in (Tag.COMPRESSED_EVEN_Y, Tag.COMPRESSED_ODD_Y, Tag.COMPACT):
            if len(data) != COMPRESSED_POINT_BYTES:
                raise ValueError(
                    f"expected {COMPRESSED_POINT_BYTES} bytes, got {len(data)}"
                )
            if tag is Tag.COMPACT:
                raise ValueError("compact point encoding is not supported")
            return cls.decompress(data[1:], tag is Tag.COMPRESSED_ODD_Y)

        if len(data) != UNCOMPRESSED_POINT_BYTES:
            raise ValueError(
                f"expected {UNCOMPRESSED_POINT_BYTES} bytes, got {len(data)}"
            )
        x = FieldElement.from_bytes(data[1 : 1 + FIELD_BYTES])
        y = FieldElement.from_bytes(data[1 + FIELD_BYTES :])
        if y.square() != _curve_rhs(x):
            raise ValueError("point is not on the curve")
        return cls(x, y, False)

    def to_encoded_point(self, compress: bool) -> bytes:
        """Return the SEC1 encoding, compressed or uncompressed."""
        if self.infinity:
            return bytes([Tag.IDENTITY])
        if compress:
            tag = Tag.COMPRESSED_ODD_Y if self.y.is_odd() else Tag.COMPRESSED_EVEN_Y
            return bytes([tag]) + self.x.to_bytes()
        return bytes([Tag.UNCOMPRESSED]) + self.x.to_bytes() + self.y.to_bytes()

    @classmethod
    def from_bytes(cls, data: bytes) -> AffinePoint:
        """Parse a 33-byte SEC1 compressed point.

        Raises ValueError for any other encoding or an invalid point.
        """
        data = bytes(data)
        if len(data) != COMPRESSED_POINT_BYTES:
            raise ValueError(
                f"expected {COMPRESSED_POINT_BYTES} bytes, got {len(data)}"
            )
        if data[0] not in (Tag.COMPRESSED_EVEN_Y, Tag.COMPRESSED_ODD_Y):
            raise ValueError("not a compressed point encoding")
        return cls.decompress(data[1:], data[0] == Tag.COMPRESSED_ODD_Y)

    def to_bytes(self) -> bytes:
        """Return the 33-byte SEC1 compressed encoding.

        Raises ValueError for the identity, which has no compressed form.
        """
        if self.infinity:
            raise ValueError("the identity has no compressed encoding")
        return self.to_encoded_point(True)

    def to_curve(self) -> ProjectivePoint:
        """Return this point in projective coordinates."""
        from nistp256.projective import ProjectivePoint

        return ProjectivePoint.from_affine(self)

    def __bytes__(self) -> bytes:
        return self.to_encoded_point(False)

    def __mul__(self, scalar: object) -> ProjectivePoint:
        return self.to_curve() * scalar

    def __neg__(self) -> AffinePoint:
        return AffinePoint(self.x, -self.y, self.infinity)