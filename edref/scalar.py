"""Arithmetic on Ed25519 scalars modulo the group order l."""

from __future__ import annotations

L = 2**252 + 27742317777372353535851937790883648493
"""The order of the Ed25519 base point."""

SCALAR_BYTES = 32
WIDE_BYTES = 64


def _load(data: bytes, expected: int, name: str) -> int:
    data = bytes(data)
    if len(data) != expected:
        raise ValueError(f"{name} must be {expected} bytes, got {len(data)}")
    return int.from_bytes(data, "little")


def _store(value: int) -> bytes:
    return (value % L).to_bytes(SCALAR_BYTES, "little")


def reduce(s: bytes) -> bytes:
    """Reduce a 64-byte little-endian integer modulo l to 32 bytes."""
    return _store(_load(s, WIDE_BYTES, "input"))


def muladd(a: bytes, b: bytes, c: bytes) -> bytes:
    """Return ``(a * b + c) mod l`` for 32-byte little-endian integers."""
    av = _load(a, SCALAR_BYTES, "a")
    bv = _load(b, SCALAR_BYTES, "b")
    cv = _load(c, SCALAR_BYTES, "c")
    return _store(av * bv + cv)