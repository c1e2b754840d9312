# nistp256

Base-field arithmetic, curve point arithmetic and the core ECDSA
operations for the NIST P-256 elliptic curve (also known as secp256r1
or prime256v1), in plain Python with no third-party dependencies.

## Modules

- `nistp256.field` — `FieldElement`, an element of the base field
  modulo p = 2^224(2^32 − 1) + 2^192 + 2^96 − 1, held as an integer in
  `[0, p)`. It supports `+`, `-`, `*`, unary `-`, `double()`,
  `square()`, `pow_vartime(exponent)`, `invert()`, `sqrt()`,
  `is_zero()`, `is_odd()` and 32-byte big-endian encoding with
  `from_bytes` / `to_bytes`. `FieldElement.generate()` returns a random
  element. The module also defines `MODULUS` and the curve constants
  `CURVE_EQUATION_A` (−3) and `CURVE_EQUATION_B`.
- `nistp256.affine` — `AffinePoint`, a point in affine coordinates or
  the point at infinity. `from_encoded_point` / `to_encoded_point(compress)`
  handle SEC1 identity (`00`), compressed (`02`/`03`) and uncompressed
  (`04`) encodings; `decompress(x_bytes, y_is_odd)` recovers a point
  from its x-coordinate; `from_bytes` / `to_bytes` use the 33-byte
  compressed form only. Points can be negated and multiplied by an
  integer (giving a `ProjectivePoint`); `to_curve()` lifts to projective
  form.
- `nistp256.projective` — `ProjectivePoint`, a point in homogeneous
  projective coordinates using complete addition and doubling formulas.
  It supports `+` and `-` with projective or affine points, unary `-`,
  multiplication by an integer (reduced modulo the group order,
  `ORDER`), `double()`, `to_affine()`, `from_affine()`, `is_identity()`,
  `random()` and the same SEC1 encoding methods as `AffinePoint`.
  Equality compares the affine forms. `sum_points(points)` adds up any
  iterable of points.
- `nistp256.ecdsa` — `sign_prehashed(secret, ephemeral, digest)`,
  `verify_prehashed(public_key, digest, signature)`, the fixed-size
  `Signature` (r ‖ s, 64 bytes), `BlindedScalar` and `SignatureError`.

## Points and encodings

```python
from nistp256.affine import AffinePoint
from nistp256.projective import ProjectivePoint, sum_points

g = ProjectivePoint.generator()
assert g + g == g.double()
assert g.double() - g == g
assert sum_points([g, g, g]) == g * 3

encoded = AffinePoint.generator().to_encoded_point(True)
assert encoded.hex().startswith("036b17d1f2")
assert AffinePoint.from_encoded_point(encoded) == AffinePoint.generator()

identity = ProjectivePoint.identity()
assert identity.is_identity()
assert identity.to_encoded_point(False) == b"\x00"
```

Malformed encodings, unknown tags, points not on the curve,
x-coordinates with no matching point and coordinates not below p all
raise `ValueError`. The SEC1 compact form (`05`) is recognised but
rejected. `to_bytes()` on the identity raises `ValueError`, since it
has no compressed form.

## Field elements

```python
from nistp256.field import FieldElement

one = FieldElement.one()
two = one + one
assert two.square().sqrt() == two
assert two * two.invert() == one
assert one.to_bytes() == bytes(31) + b"\x01"
```

`invert()` raises `ZeroDivisionError` for zero, and `sqrt()` raises
`ValueError` for an element that is not a square.

## Signatures

Scalars are plain integers modulo the group order. Wherever a scalar is
expected, 32 big-endian bytes may be given instead; they are read as an
integer and reduced modulo the order.

```python
import hashlib
import secrets

from nistp256.ecdsa import BlindedScalar, sign_prehashed, verify_prehashed
from nistp256.projective import ORDER, ProjectivePoint

d = secrets.randbelow(ORDER - 1) + 1
public_key = (ProjectivePoint.generator() * d).to_affine()

digest = hashlib.sha256(b"example message").digest()
k = BlindedScalar(secrets.randbelow(ORDER - 1) + 1)

signature = sign_prehashed(d, k, digest)
verify_prehashed(public_key, digest, signature)  # raises SignatureError if invalid
assert len(signature.to_bytes()) == 64
```

`ephemeral` may be an integer, 32 bytes or a `BlindedScalar`, which
inverts the nonce after multiplying it by a random mask. Signing raises
`SignatureError` if the nonce is zero or `r` or `s` comes out zero.
`verify_prehashed` accepts an `AffinePoint` or a `ProjectivePoint` and
returns `None` on success. `Signature.from_bytes` and
`Signature.to_bytes` convert to and from the 64-byte r ‖ s form; both
components must lie in `[1, n)`, otherwise `SignatureError` is raised.
`SignatureError` is a subclass of `ValueError`.

## What it does not do

- It does not hash messages: signing and verification work on a digest
  the caller has already computed.
- It does not choose nonces deterministically; the caller supplies the
  ephemeral scalar.
- It has no signing-key or verifying-key objects, no key file formats
  and no ASN.1 DER signature encoding.
- It has no command-line tool.

## A word of caution

This package favours clarity over side-channel resistance: Python
integers are not constant-time, and inversion and exponentiation are
variable-time. Use it for learning, testing and interoperability checks
rather than for protecting real secrets.