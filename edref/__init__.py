"""Pure-Python Ed25519, X25519, SHA-512, Salsa20 and their supporting arithmetic."""

__version__ = "2.0.1"

__all__ = [
    "salsa20",
    "sha512",
    "verify",
    "randombytes",
    "field25519",
    "curve25519",
    "edwards",
    "scalar",
    "ed25519",
]