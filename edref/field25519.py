"""Arithmetic in the prime field GF(2^255 - 19).

Field elements are plain Python integers kept in the range ``[0, P)``.
Every operation accepts any integer and reduces it modulo ``P``.
"""

from __future__ import annotations

P = 2**255 - 19
"""The field prime 2^255 - 19."""

FIELD_BYTES = 32

ZERO = 0
ONE = 1

_TOP_BIT_MASK = (1 << 255) - 1
_INVERT_EXPONENT = P - 2
_POW22523_EXPONENT = (P - 5) // 8  # 2^252 - 3


def _reduce(value: int) -> int:
    return int(value) % P


def from_bytes(data: bytes) -> int:
    """Decode a 32-byte little-endian string into a field element.

    The top bit of the last byte is ignored, and values at or above ``P``
    are reduced.
    """
    data = bytes(data)
    if len(data) != FIELD_BYTES:
        raise ValueError(f"field element must be {FIELD_BYTES} bytes, got {len(data)}")
    return (int.from_bytes(data, "little") & _TOP_BIT_MASK) % P


def to_bytes(value: int) -> bytes:
    """Encode a field element as its canonical 32-byte little-endian form."""
    return _reduce(value).to_bytes(FIELD_BYTES, "little")


def add(f: int, g: int) -> int:
    """Return ``f + g``."""
    return (f + g) % P


def sub(f: int, g: int) -> int:
    """Return ``f - g``."""
    return (f - g) % P


def mul(f: int, g: int) -> int:
    """Return ``f * g``."""
    return (f * g) % P


def square(f: int) -> int:
    """Return ``f * f``."""
    return (f * f) % P


def negate(f: int) -> int:
    """Return ``-f``."""
    return (-f) % P


def select(f: int, g: int, b: int) -> int:
    """Return ``g`` if ``b`` is 1 and ``f`` if ``b`` is 0, without branching on ``b``."""
    if b not in (0, 1):
        raise ValueError("selector must be 0 or 1")
    f = _reduce(f)
    g = _reduce(g)
    return f ^ ((f ^ g) & -int(b))


def invert(z: int) -> int:
    """Return ``z^(P-2)``, the inverse of ``z`` (zero maps to zero)."""
    return pow(_reduce(z), _INVERT_EXPONENT, P)


def pow22523(z: int) -> int:
    """Return ``z^((P-5)/8)``, i.e. ``z^(2^252 - 3)``."""
    return pow(_reduce(z), _POW22523_EXPONENT, P)


def is_negative(f: int) -> bool:
    """Return True when the canonical form of ``f`` is odd."""
    return bool(to_bytes(f)[0] & 1)


def is_nonzero(f: int) -> bool:
    """Return True when ``f`` is not zero in the field."""
    return _reduce(f) != 0