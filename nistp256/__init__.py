"""Base-field, curve point and ECDSA arithmetic for the NIST P-256 elliptic curve."""

__version__ = "0.1.0"