"""SHA-512 block compression and message hashing."""

from __future__ import annotations

import struct

STATE_BYTES = 64
BLOCK_BYTES = 128
HASH_BYTES = 64

_MASK64 = 0xFFFFFFFFFFFFFFFF

IV = bytes.fromhex(
    "6a09e667f3bcc908bb67ae8584caa73b3c6ef372fe94f82ba54ff53a5f1d36f1"
    "510e527fade682d19b05688c2b3e6c1f1f83d9abfb41bd6b5be0cd19137e2179"
)

_ROUND_CONSTANTS = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
    0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
    0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
    0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
    0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
    0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
    0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
    0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
    0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
    0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
    0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
    0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
    0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
    0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)


def _rotr(x: int, c: int) -> int:
    return ((x >> c) | (x << (64 - c))) & _MASK64


def _big_sigma0(x: int) -> int:
    return _rotr(x, 28) ^ _rotr(x, 34) ^ _rotr(x, 39)


def _big_sigma1(x: int) -> int:
    return _rotr(x, 14) ^ _rotr(x, 18) ^ _rotr(x, 41)


def _small_sigma0(x: int) -> int:
    return _rotr(x, 1) ^ _rotr(x, 8) ^ (x >> 7)


def _small_sigma1(x: int) -> int:
    return _rotr(x, 19) ^ _rotr(x, 61) ^ (x >> 6)


def _compress(state: list[int], block: bytes) -> list[int]:
    w = list(struct.unpack(">16Q", block))
    for t in range(16, 80):
        w.append((_small_sigma1(w[t - 2]) + w[t - 7] + _small_sigma0(w[t - 15]) + w[t - 16]) & _MASK64)

    a, b, c, d, e, f, g, h = state
    for k, wt in zip(_ROUND_CONSTANTS, w):
        ch = (e & f) ^ (~e & _MASK64 & g)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t1 = (h + _big_sigma1(e) + ch + k + wt) & _MASK64
        t2 = (_big_sigma0(a) + maj) & _MASK64
        h, g, f, e, d, c, b, a = g, f, e, (d + t1) & _MASK64, c, b, a, (t1 + t2) & _MASK64

    return [(x + y) & _MASK64 for x, y in zip(state, (a, b, c, d, e, f, g, h))]


def hashblocks(state: bytes, data: bytes) -> tuple[bytes, bytes]:
    """Compress every whole 128-byte block of ``data`` into a 64-byte state.

    Returns ``(new_state, tail)`` where ``tail`` holds the unprocessed trailing bytes.
    """
    state = bytes(state)
    data = bytes(data)
    if len(state) != STATE_BYTES:
        raise ValueError(f"state must be {STATE_BYTES} bytes, got {len(state)}")
    words = list(struct.unpack(">8Q", state))
    whole = len(data) - len(data) % BLOCK_BYTES
    for offset in range(0, whole, BLOCK_BYTES):
        words = _compress(words, data[offset : offset + BLOCK_BYTES])
    return struct.pack(">8Q", *words), data[whole:]


def sha512(data: bytes) -> bytes:
    """Return the SHA-512 digest of ``data``."""
    data = bytes(data)
    state, tail = hashblocks(IV, data)
    padded_size = BLOCK_BYTES if len(tail) < 112 else 2 * BLOCK_BYTES
    bit_length = (len(data) * 8) % (1 << 128)
    padded = tail + b"\x80" + bytes(padded_size - len(tail) - 17) + bit_length.to_bytes(16, "big")
    state, _ = hashblocks(state, padded)
    return state