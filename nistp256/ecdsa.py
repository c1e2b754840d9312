"""ECDSA signing and verification primitives over NIST P-256.

Scalars are plain integers modulo the group order ``n``. Byte strings given
as scalars are read as 32-byte big-endian integers and reduced modulo ``n``.
"""

from __future__ import annotations

import operator
import secrets
from dataclasses import dataclass, field

from nistp256.affine import AffinePoint
from nistp256.field import FIELD_BYTES
from nistp256.projective import ORDER, ProjectivePoint

SIGNATURE_BYTES = 2 * FIELD_BYTES


class SignatureError(ValueError):
    """Raised when a signature cannot be produced, parsed or verified."""


def _as_scalar(value: int | bytes) -> int:
    """Return ``value`` as an integer reduced modulo the group order."""
    if isinstance(value, (bytes, bytearray, memoryview)):
        data = bytes(value)
        if len(data) != FIELD_BYTES:
            raise ValueError(f"expected {FIELD_BYTES} bytes, got {len(data)}")
        return int.from_bytes(data, "big") % ORDER
    if isinstance(value, bool):
        raise TypeError("a scalar must be an int or bytes")
    return operator.index(value) % ORDER


def _random_nonzero_scalar() -> int:
    return secrets.randbelow(ORDER - 1) + 1


@dataclass(frozen=True, slots=True)
class Signature:
    """A fixed-size ECDSA/P-256 signature made of the scalars ``r`` and ``s``."""

    r: int
    s: int

    def __post_init__(self) -> None:
        for name in ("r", "s"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise TypeError(f"signature component {name} must be an int")
            if not 0 < value < ORDER:
                raise SignatureError(
                    f"signature component {name} is not in the range [1, n)"
                )

    @classmethod
    def from_scalars(cls, r: int, s: int) -> Signature:
        """Build a signature from its two scalar components."""
        return cls(r, s)

    @classmethod
    def from_bytes(cls, data: bytes) -> Signature:
        """Parse the 64-byte concatenation ``r || s`` of big-endian integers."""
        data = bytes(data)
        if len(data) != SIGNATURE_BYTES:
            raise SignatureError(
                f"expected {SIGNATURE_BYTES} signature bytes, got {len(data)}"
            )
        return cls(
            int.from_bytes(data[:FIELD_BYTES], "big"),
            int.from_bytes(data[FIELD_BYTES:], "big"),
        )

    def to_bytes(self) -> bytes:
        """Return the 64-byte concatenation ``r || s``."""
        return self.r.to_bytes(FIELD_BYTES, "big") + self.s.to_bytes(FIELD_BYTES, "big")

    def __bytes__(self) -> bytes:
        return self.to_bytes()


@dataclass(frozen=True, slots=True)
class BlindedScalar:
    """A scalar blinded with a random mask, for side-channel resistant inversion.

    Intended for ECDSA ephemeral (``k``) scalars.
    """

    scalar: int
    mask: int = field(default_factory=_random_nonzero_scalar, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scalar", _as_scalar(self.scalar))
        object.__setattr__(self, "mask", _as_scalar(self.mask))

    def invert(self) -> int:
        """Return the inverse of the scalar modulo ``n``.

        The scalar is multiplied by the mask before inversion and the result
        multiplied by the mask again. Raises ZeroDivisionError if the scalar
        (or the mask) is zero.
        """
        blinded = self.scalar * self.mask % ORDER
        if blinded == 0:
            raise ZeroDivisionError("zero has no multiplicative inverse")
        return pow(blinded, -1, ORDER) * self.mask % ORDER


def sign_prehashed(
    secret: int | bytes,
    ephemeral: int | bytes | BlindedScalar,
    digest: int | bytes,
) -> Signature:
    """Sign a prehashed message ``digest`` with the secret scalar.

    ``ephemeral`` is the per-signature scalar ``k``, plain or blinded.
    Raises SignatureError if ``k`` is zero or the signature degenerates.
    """
    d = _as_scalar(secret)
    z = _as_scalar(digest)

    if isinstance(ephemeral, BlindedScalar):
        k = ephemeral.scalar
        if k == 0:
            raise SignatureError("ephemeral scalar is zero")
        try:
            k_inverse = ephemeral.invert()
        except ZeroDivisionError as exc:
            raise SignatureError("ephemeral scalar is not invertible") from exc
    else:
        k = _as_scalar(ephemeral)
        if k == 0:
            raise SignatureError("ephemeral scalar is zero")
        k_inverse = pow(k, -1, ORDER)

    x = (ProjectivePoint.generator() * k).to_affine().x
    r = int.from_bytes(x.to_bytes(), "big") % ORDER
    s = k_inverse * (z + r * d) % ORDER
    if r == 0 or s == 0:
        raise SignatureError("degenerate signature; choose another ephemeral scalar")
    return Signature.from_scalars(r, s)


def verify_prehashed(
    public_key: AffinePoint | ProjectivePoint,
    digest: int | bytes,
    signature: Signature,
) -> None:
    """Check ``signature`` over the prehashed ``digest`` against ``public_key``.

    Returns None on success; raises SignatureError otherwise.
    """
    if isinstance(public_key, AffinePoint):
        q = ProjectivePoint.from_affine(public_key)
    elif isinstance(public_key, ProjectivePoint):
        q = public_key
    else:
        raise TypeError("public key must be an AffinePoint or ProjectivePoint")

    z = _as_scalar(digest)
    r, s = signature.r, signature.s
    s_inverse = pow(s, -1, ORDER)
    u1 = z * s_inverse % ORDER
    u2 = r * s_inverse % ORDER

    point = (ProjectivePoint.generator() * u1 + q * u2).to_affine()
    if point.is_identity():
        raise SignatureError("signature verification failed")
    x = int.from_bytes(point.x.to_bytes(), "big") % ORDER
    if x != r:
        raise SignatureError("signature verification failed")