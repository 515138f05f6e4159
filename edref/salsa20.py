"""Salsa20 core function, Salsa20 stream cipher and the Salsa20-based key-erasing RNG."""

from __future__ import annotations

import struct

OUTPUT_BYTES = 64
INPUT_BYTES = 16
KEY_BYTES = 32
CONST_BYTES = 16
NONCE_BYTES = 8
RNG_KEY_BYTES = 32
RNG_OUTPUT_BYTES = 736

ROUNDS = 20
SIGMA = b"expand 32-byte k"

_MASK32 = 0xFFFFFFFF
_COUNTER_MODULUS = 1 << 64
_ZERO_NONCE = bytes(NONCE_BYTES)

# Column round followed by row round; each entry is (a, b, c, d) of one quarter round.
_QUARTER_ROUNDS = (
    (0, 4, 8, 12),
    (5, 9, 13, 1),
    (10, 14, 2, 6),
    (15, 3, 7, 11),
    (0, 1, 2, 3),
    (5, 6, 7, 4),
    (10, 11, 8, 9),
    (15, 12, 13, 14),
)


def _require_length(value: bytes, expected: int, name: str) -> bytes:
    data = bytes(value)
    if len(data) != expected:
        raise ValueError(f"{name} must be {expected} bytes, got {len(data)}")
    return data


def _rotate(u: int, c: int) -> int:
    u &= _MASK32
    return ((u << c) | (u >> (32 - c))) & _MASK32


def core(inp: bytes, key: bytes, const: bytes) -> bytes:
    """Apply the Salsa20 core to a 16-byte input, 32-byte key and 16-byte constant."""
    inp = _require_length(inp, INPUT_BYTES, "input")
    key = _require_length(key, KEY_BYTES, "key")
    const = _require_length(const, CONST_BYTES, "constant")

    c = struct.unpack("<4I", const)
    k = struct.unpack("<8I", key)
    n = struct.unpack("<4I", inp)
    initial = [c[0], *k[:4], c[1], *n, c[2], *k[4:], c[3]]
    x = list(initial)

    for _ in range(ROUNDS // 2):
        for a, b, cc, d in _QUARTER_ROUNDS:
            x[b] ^= _rotate(x[a] + x[d], 7)
            x[cc] ^= _rotate(x[b] + x[a], 9)
            x[d] ^= _rotate(x[cc] + x[b], 13)
            x[a] ^= _rotate(x[d] + x[cc], 18)

    return struct.pack("<16I", *((xi + ji) & _MASK32 for xi, ji in zip(x, initial)))


def stream(length: int, nonce: bytes, key: bytes) -> bytes:
    """Return ``length`` bytes of Salsa20 keystream for the given nonce and key."""
    if length < 0:
        raise ValueError("length must not be negative")
    nonce = _require_length(nonce, NONCE_BYTES, "nonce")
    key = _require_length(key, KEY_BYTES, "key")
    if length == 0:
        return b""
    blocks = -(-length // OUTPUT_BYTES)
    keystream = b"".join(
        core(nonce + (counter % _COUNTER_MODULUS).to_bytes(8, "little"), key, SIGMA)
        for counter in range(blocks)
    )
    return keystream[:length]


def stream_xor(message: bytes, nonce: bytes, key: bytes) -> bytes:
    """Encrypt or decrypt ``message`` by XOR with the Salsa20 keystream."""
    message = bytes(message)
    keystream = stream(len(message), nonce, key)
    if not message:
        return b""
    mixed = int.from_bytes(message, "little") ^ int.from_bytes(keystream, "little")
    return mixed.to_bytes(len(message), "little")


def rng(key: bytes) -> tuple[bytes, bytes]:
    """Expand a 32-byte key into 736 random bytes and a fresh key.

    Returns ``(output, next_key)``.
    """
    key = _require_length(key, RNG_KEY_BYTES, "key")
    expanded = stream(RNG_KEY_BYTES + RNG_OUTPUT_BYTES, _ZERO_NONCE, key)
    return expanded[RNG_KEY_BYTES:], expanded[:RNG_KEY_BYTES]