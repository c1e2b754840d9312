"""Points on the NIST P-256 curve in projective coordinates.

Addition and doubling use the complete formulas of Renes, Costello and
Batina (2015) for short Weierstrass curves with a = -3.
"""

from __future__ import annotations

import operator
import secrets
from collections.abc import Iterable
from dataclasses import dataclass, field

from nistp256.affine import AffinePoint
from nistp256.field import CURVE_EQUATION_B, FieldElement

# Order n of the group generated by the base point.
ORDER = 0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551

_SCALAR_BITS = 256


def _triple(value: FieldElement) -> FieldElement:
    return value.double() + value


@dataclass(frozen=True, slots=True, eq=False)
class ProjectivePoint:
    """A point on secp256r1 in homogeneous projective coordinates (X : Y : Z)."""

    x: FieldElement = field(default_factory=FieldElement.zero)
    y: FieldElement = field(default_factory=FieldElement.one)
    z: FieldElement = field(default_factory=FieldElement.zero)

    @classmethod
    def identity(cls) -> ProjectivePoint:
        """Return the point at infinity."""
        return cls(FieldElement.zero(), FieldElement.one(), FieldElement.zero())

    @classmethod
    def generator(cls) -> ProjectivePoint:
        """Return the P-256 base point."""
        return cls.from_affine(AffinePoint.generator())

    @classmethod
    def random(cls) -> ProjectivePoint:
        """Return the base point multiplied by a uniformly random scalar."""
        return cls.generator() * secrets.randbelow(ORDER)

    @classmethod
    def from_affine(cls, point: AffinePoint) -> ProjectivePoint:
        """Lift an affine point to projective coordinates."""
        if point.is_identity():
            return cls.identity()
        return cls(point.x, point.y, FieldElement.one())

    def to_affine(self) -> AffinePoint:
        """Return the affine form of this point (the identity if Z is zero)."""
        if self.z.is_zero():
            return AffinePoint.identity()
        zinv = self.z.invert()
        return AffinePoint(self.x * zinv, self.y * zinv, False)

    def is_identity(self) -> bool:
        """Return True for the point at infinity."""
        return self.z.is_zero()

    def double(self) -> ProjectivePoint:
        """Return 2 * self."""
        b = CURVE_EQUATION_B
        xx = self.x.square()
        yy = self.y.square()
        zz = self.z.square()
        xy2 = (self.x * self.y).double()
        xz2 = (self.x * self.z).double()

        bzz3_part = _triple(b * zz - xz2)
        yy_m_bzz3 = yy - bzz3_part
        yy_p_bzz3 = yy + bzz3_part
        y_frag = yy_p_bzz3 * yy_m_bzz3
        x_frag = yy_m_bzz3 * xy2

        zz3 = _triple(zz)
        bxz6_part = _triple(b * xz2 - (zz3 + xx))
        xx3_m_zz3 = _triple(xx) - zz3

        y = y_frag + xx3_m_zz3 * bxz6_part
        yz2 = (self.y * self.z).double()
        x = x_frag - bxz6_part * yz2
        z = (yz2 * yy).double().double()
        return ProjectivePoint(x, y, z)

    def _add(self, other: ProjectivePoint) -> ProjectivePoint:
        b = CURVE_EQUATION_B
        xx = self.x * other.x
        yy = self.y * other.y
        zz = self.z * other.z
        xy_pairs = (self.x + self.y) * (other.x + other.y) - (xx + yy)
        yz_pairs = (self.y + self.z) * (other.y + other.z) - (yy + zz)
        xz_pairs = (self.x + self.z) * (other.x + other.z) - (xx + zz)

        bzz3_part = _triple(xz_pairs - b * zz)
        yy_m_bzz3 = yy - bzz3_part
        yy_p_bzz3 = yy + bzz3_part

        zz3 = _triple(zz)
        bxz3_part = _triple(b * xz_pairs - (zz3 + xx))
        xx3_m_zz3 = _triple(xx) - zz3

        return ProjectivePoint(
            yy_p_bzz3 * xy_pairs - yz_pairs * bxz3_part,
            yy_p_bzz3 * yy_m_bzz3 + xx3_m_zz3 * bxz3_part,
            yy_m_bzz3 * yz_pairs + xy_pairs * xx3_m_zz3,
        )

    def _add_mixed(self, other: AffinePoint) -> ProjectivePoint:
        if other.is_identity():
            return self
        b = CURVE_EQUATION_B
        xx = self.x * other.x
        yy = self.y * other.y
        xy_pairs = (self.x + self.y) * (other.x + other.y) - (xx + yy)
        yz_pairs = other.y * self.z + self.y
        xz_pairs = other.x * self.z + self.x

        bz3_part = _triple(xz_pairs - b * self.z)
        yy_m_bzz3 = yy - bz3_part
        yy_p_bzz3 = yy + bz3_part

        z3 = _triple(self.z)
        bxz3_part = _triple(b * xz_pairs - (z3 + xx))
        xx3_m_zz3 = _triple(xx) - z3

        return ProjectivePoint(
            yy_p_bzz3 * xy_pairs - yz_pairs * bxz3_part,
            yy_p_bzz3 * yy_m_bzz3 + xx3_m_zz3 * bxz3_part,
            yy_m_bzz3 * yz_pairs + xy_pairs * xx3_m_zz3,
        )

    def _mul(self, scalar: int) -> ProjectivePoint:
        k = scalar % ORDER
        result = ProjectivePoint.identity()
        for bit in format(k, f"0{_SCALAR_BITS}b"):
            result = result.double()
            if bit == "1":
                result = result._add(self)
        return result

    @classmethod
    def from_encoded_point(cls, data: bytes) -> ProjectivePoint:
        """Parse a SEC1 encoded point.

        Raises ValueError if the encoding is malformed or not on the curve.
        """
        return cls.from_affine(AffinePoint.from_encoded_point(data))

    def to_encoded_point(self, compress: bool) -> bytes:
        """Return the SEC1 encoding, compressed or uncompressed."""
        return self.to_affine().to_encoded_point(compress)

    @classmethod
    def from_bytes(cls, data: bytes) -> ProjectivePoint:
        """Parse a 33-byte SEC1 compressed point."""
        return cls.from_affine(AffinePoint.from_bytes(data))

    def to_bytes(self) -> bytes:
        """Return the 33-byte SEC1 compressed encoding.

        Raises ValueError for the identity.
        """
        return self.to_affine().to_bytes()

    def __add__(self, other: object) -> ProjectivePoint:
        if isinstance(other, ProjectivePoint):
            return self._add(other)
        if isinstance(other, AffinePoint):
            return self._add_mixed(other)
        return NotImplemented

    def __sub__(self, other: object) -> ProjectivePoint:
        if isinstance(other, ProjectivePoint):
            return self._add(-other)
        if isinstance(other, AffinePoint):
            return self._add_mixed(-other)
        return NotImplemented

    def __mul__(self, scalar: object) -> ProjectivePoint:
        if isinstance(scalar, bool):
            return NotImplemented
        try:
            k = operator.index(scalar)
        except TypeError:
            return NotImplemented
        return self._mul(k)

    __rmul__ = __mul__

    def __neg__(self) -> ProjectivePoint:
        return ProjectivePoint(self.x, -self.y, self.z)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ProjectivePoint):
            return self.to_affine() == other.to_affine()
        if isinstance(other, AffinePoint):
            return self.to_affine() == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.to_affine())

    def __bytes__(self) -> bytes:
        return self.to_encoded_point(False)


def sum_points(points: Iterable[ProjectivePoint]) -> ProjectivePoint:
    """Return the sum of the given points (the identity for none)."""
    total = ProjectivePoint.identity()
    for point in points:
        total = total + point
    return total