"""Constant-time comparison of 32-byte strings."""

from __future__ import annotations

from functools import reduce

VERIFY_BYTES = 32


def verify_32(x: bytes, y: bytes) -> bool:
    """Return True when the two 32-byte strings are equal, without early exit."""
    x = bytes(x)
    y = bytes(y)
    if len(x) != VERIFY_BYTES or len(y) != VERIFY_BYTES:
        raise ValueError(f"both inputs must be {VERIFY_BYTES} bytes")
    different_bits = reduce(lambda acc, pair: acc | (pair[0] ^ pair[1]), zip(x, y), 0)
    return (1 & ((different_bits - 1) >> 8)) == 1