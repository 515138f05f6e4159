"""X25519: scalar multiplication on Curve25519 with the Montgomery ladder."""

from __future__ import annotations

from . import field25519 as fe

SCALAR_BYTES = 32
POINT_BYTES = 32

BASEPOINT = bytes([9]) + bytes(31)
"""The u-coordinate 9 of the Curve25519 base point."""

_A24 = 121666


def _clamp(scalar: bytes) -> int:
    data = bytes(scalar)
    if len(data) != SCALAR_BYTES:
        raise ValueError(f"scalar must be {SCALAR_BYTES} bytes, got {len(data)}")
    e = bytearray(data)
    e[0] &= 248
    e[31] &= 127
    e[31] |= 64
    return int.from_bytes(e, "little")


def _cswap(f: int, g: int, swap: int) -> tuple[int, int]:
    return fe.select(f, g, swap), fe.select(g, f, swap)


def _ladder_step(x1: int, x2: int, z2: int, x3: int, z3: int) -> tuple[int, int, int, int]:
    d = fe.sub(x3, z3)
    b = fe.sub(x2, z2)
    a = fe.add(x2, z2)
    c = fe.add(x3, z3)
    da = fe.mul(d, a)
    cb = fe.mul(c, b)
    bb = fe.square(b)
    aa = fe.square(a)
    sum_dacb = fe.add(da, cb)
    diff_dacb = fe.sub(da, cb)
    x4 = fe.mul(aa, bb)
    e = fe.sub(aa, bb)
    t2 = fe.square(diff_dacb)
    t3 = fe.mul(_A24, e)
    x5 = fe.square(sum_dacb)
    t4 = fe.add(bb, t3)
    z5 = fe.mul(x1, t2)
    z4 = fe.mul(e, t4)
    return x4, z4, x5, z5


def scalarmult(scalar: bytes, point: bytes) -> bytes:
    """Multiply the u-coordinate ``point`` by the clamped 32-byte ``scalar``.

    The top bit of ``point`` is ignored. Returns the 32-byte u-coordinate of the result.
    """
    k = _clamp(scalar)
    x1 = fe.from_bytes(point)
    x2, z2 = fe.ONE, fe.ZERO
    x3, z3 = x1, fe.ONE

    swap = 0
    for pos in range(254, -1, -1):
        bit = (k >> pos) & 1
        swap ^= bit
        x2, x3 = _cswap(x2, x3, swap)
        z2, z3 = _cswap(z2, z3, swap)
        swap = bit
        x2, z2, x3, z3 = _ladder_step(x1, x2, z2, x3, z3)

    x2, x3 = _cswap(x2, x3, swap)
    z2, z3 = _cswap(z2, z3, swap)

    return fe.to_bytes(fe.mul(x2, fe.invert(z2)))


def scalarmult_base(scalar: bytes) -> bytes:
    """Multiply the standard base point (u = 9) by the clamped ``scalar``."""
    return scalarmult(scalar, BASEPOINT)