"""Group operations on the twisted Edwards curve used by Ed25519.

Points are kept in extended coordinates ``(X : Y : Z : T)`` with
``x = X/Z``, ``y = Y/Z`` and ``x*y = T/Z``. Intermediate results use the
completed ``(X : Z) x (Y : T)`` form, projective ``(X : Y : Z)`` form,
a cached form ``(Y+X, Y-X, Z, 2dT)`` and an affine precomputed form
``(y+x, y-x, 2dxy)``, all as plain tuples of field elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import cache

from . import field25519 as fe

POINT_BYTES = 32
SCALAR_BYTES = 32

D = fe.mul(fe.negate(121665), fe.invert(121666))
"""The curve constant d = -121665/121666."""
D2 = fe.add(D, D)
SQRT_M1 = pow(2, (fe.P - 1) // 4, fe.P)
"""A square root of -1 in the field."""

_P1P1 = tuple[int, int, int, int]
_P2 = tuple[int, int, int]
_P3 = tuple[int, int, int, int]
_Cached = tuple[int, int, int, int]
_Precomp = tuple[int, int, int]

_PRECOMP_IDENTITY: _Precomp = (fe.ONE, fe.ONE, fe.ZERO)
_P2_IDENTITY: _P2 = (fe.ZERO, fe.ONE, fe.ONE)


def _require_length(data: bytes, expected: int, name: str) -> bytes:
    data = bytes(data)
    if len(data) != expected:
        raise ValueError(f"{name} must be {expected} bytes, got {len(data)}")
    return data


def _add(p: _P3, q: _Cached) -> _P1P1:
    x1, y1, z1, t1 = p
    ypx2, ymx2, z2, t2d = q
    a = fe.mul(fe.add(y1, x1), ypx2)
    b = fe.mul(fe.sub(y1, x1), ymx2)
    c = fe.mul(t2d, t1)
    zz = fe.mul(z1, z2)
    d = fe.add(zz, zz)
    return fe.sub(a, b), fe.add(a, b), fe.add(d, c), fe.sub(d, c)


def _sub(p: _P3, q: _Cached) -> _P1P1:
    x1, y1, z1, t1 = p
    ypx2, ymx2, z2, t2d = q
    a = fe.mul(fe.add(y1, x1), ymx2)
    b = fe.mul(fe.sub(y1, x1), ypx2)
    c = fe.mul(t2d, t1)
    zz = fe.mul(z1, z2)
    d = fe.add(zz, zz)
    return fe.sub(a, b), fe.add(a, b), fe.sub(d, c), fe.add(d, c)


def _madd(p: _P3, q: _Precomp) -> _P1P1:
    x1, y1, z1, t1 = p
    ypx2, ymx2, xy2d = q
    a = fe.mul(fe.add(y1, x1), ypx2)
    b = fe.mul(fe.sub(y1, x1), ymx2)
    c = fe.mul(xy2d, t1)
    d = fe.add(z1, z1)
    return fe.sub(a, b), fe.add(a, b), fe.add(d, c), fe.sub(d, c)


def _msub(p: _P3, q: _Precomp) -> _P1P1:
    x1, y1, z1, t1 = p
    ypx2, ymx2, xy2d = q
    a = fe.mul(fe.add(y1, x1), ymx2)
    b = fe.mul(fe.sub(y1, x1), ypx2)
    c = fe.mul(xy2d, t1)
    d = fe.add(z1, z1)
    return fe.sub(a, b), fe.add(a, b), fe.sub(d, c), fe.add(d, c)


def _p2_dbl(p: _P2) -> _P1P1:
    x1, y1, z1 = p
    xx = fe.square(x1)
    yy = fe.square(y1)
    zz = fe.square(z1)
    b = fe.add(zz, zz)
    aa = fe.square(fe.add(x1, y1))
    y3 = fe.add(yy, xx)
    z3 = fe.sub(yy, xx)
    x3 = fe.sub(aa, y3)
    t3 = fe.sub(b, z3)
    return x3, y3, z3, t3


def _p3_dbl(p: _P3) -> _P1P1:
    return _p2_dbl(p[:3])


def _p1p1_to_p2(p: _P1P1) -> _P2:
    x, y, z, t = p
    return fe.mul(x, t), fe.mul(y, z), fe.mul(z, t)


def _p1p1_to_p3(p: _P1P1) -> _P3:
    x, y, z, t = p
    return fe.mul(x, t), fe.mul(y, z), fe.mul(z, t), fe.mul(x, y)


def _to_cached(p: _P3) -> _Cached:
    x, y, z, t = p
    return fe.add(y, x), fe.sub(y, x), z, fe.mul(t, D2)


def _to_precomp(p: _P3) -> _Precomp:
    x, y, z, _ = p
    recip = fe.invert(z)
    ax = fe.mul(x, recip)
    ay = fe.mul(y, recip)
    return fe.add(ay, ax), fe.sub(ay, ax), fe.mul(fe.mul(ax, ay), D2)


def _encode(x: int, y: int, z: int) -> bytes:
    recip = fe.invert(z)
    ax = fe.mul(x, recip)
    ay = fe.mul(y, recip)
    encoded = bytearray(fe.to_bytes(ay))
    encoded[31] ^= int(fe.is_negative(ax)) << 7
    return bytes(encoded)


@dataclass(frozen=True, eq=False)
class EdwardsPoint:
    """A curve point in extended coordinates."""

    x: int
    y: int
    z: int
    t: int

    @property
    def _coords(self) -> _P3:
        return self.x, self.y, self.z, self.t

    @classmethod
    def _from_p3(cls, p: _P3) -> EdwardsPoint:
        return cls(*p)

    def add(self, other: EdwardsPoint) -> EdwardsPoint:
        """Return ``self + other``."""
        return self._from_p3(_p1p1_to_p3(_add(self._coords, _to_cached(other._coords))))

    def sub(self, other: EdwardsPoint) -> EdwardsPoint:
        """Return ``self - other``."""
        return self._from_p3(_p1p1_to_p3(_sub(self._coords, _to_cached(other._coords))))

    def double(self) -> EdwardsPoint:
        """Return ``2 * self``."""
        return self._from_p3(_p1p1_to_p3(_p3_dbl(self._coords)))

    def to_bytes(self) -> bytes:
        """Encode as 32 bytes: little-endian y with the parity of x in the top bit."""
        return _encode(self.x, self.y, self.z)

    def __neg__(self) -> EdwardsPoint:
        return EdwardsPoint(fe.negate(self.x), self.y, self.z, fe.negate(self.t))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EdwardsPoint):
            return NotImplemented
        return fe.mul(self.x, other.z) == fe.mul(other.x, self.z) and fe.mul(
            self.y, other.z
        ) == fe.mul(other.y, self.z)

    def __hash__(self) -> int:
        return hash(self.to_bytes())


IDENTITY = EdwardsPoint(fe.ZERO, fe.ONE, fe.ONE, fe.ZERO)
"""The neutral element (0, 1)."""


def from_bytes_negate_vartime(data: bytes) -> EdwardsPoint:
    """Decode a 32-byte point encoding and return the negation of that point.

    Raises ValueError when the encoding does not describe a curve point.
    """
    data = _require_length(data, POINT_BYTES, "point encoding")
    y = fe.from_bytes(data)
    y2 = fe.square(y)
    u = fe.sub(y2, fe.ONE)
    v = fe.add(fe.mul(y2, D), fe.ONE)

    v3 = fe.mul(fe.square(v), v)
    x = fe.mul(fe.mul(fe.square(v3), v), u)
    x = fe.pow22523(x)
    x = fe.mul(fe.mul(x, v3), u)

    vxx = fe.mul(fe.square(x), v)
    if fe.is_nonzero(fe.sub(vxx, u)):
        if fe.is_nonzero(fe.add(vxx, u)):
            raise ValueError("encoding is not a valid curve point")
        x = fe.mul(x, SQRT_M1)

    if int(fe.is_negative(x)) == data[31] >> 7:
        x = fe.negate(x)

    return EdwardsPoint(x, y, fe.ONE, fe.mul(x, y))


BASE = -from_bytes_negate_vartime(fe.to_bytes(fe.mul(4, fe.invert(5))))
"""The Ed25519 base point (x, 4/5) with x positive."""


@cache
def _base_table() -> tuple[tuple[_Precomp, ...], ...]:
    """Row i, entry j holds (j+1) * 256^i * B."""
    rows = []
    point = BASE
    for _ in range(32):
        multiples = []
        current = point
        for _ in range(8):
            multiples.append(_to_precomp(current._coords))
            current = current.add(point)
        rows.append(tuple(multiples))
        for _ in range(8):
            point = point.double()
    return tuple(rows)


@cache
def _base_odd_multiples() -> tuple[_Precomp, ...]:
    """B, 3B, 5B, ..., 15B."""
    twice = BASE.double()
    multiples = [BASE]
    for _ in range(7):
        multiples.append(multiples[-1].add(twice))
    return tuple(_to_precomp(p._coords) for p in multiples)


def _cmov(t: _Precomp, u: _Precomp, flag: int) -> _Precomp:
    return tuple(fe.select(ti, ui, flag) for ti, ui in zip(t, u))  # type: ignore[return-value]


def _select(pos: int, b: int) -> _Precomp:
    negative = int(b < 0)
    magnitude = -b if negative else b
    t = _PRECOMP_IDENTITY
    for j, entry in enumerate(_base_table()[pos]):
        t = _cmov(t, entry, int(magnitude == j + 1))
    minus_t = (t[1], t[0], fe.negate(t[2]))
    return _cmov(t, minus_t, negative)


def scalarmult_base(scalar: bytes) -> EdwardsPoint:
    """Return ``a * B`` for the little-endian 32-byte scalar ``a``.

    The last byte of the scalar must be at most 127.
    """
    a = _require_length(scalar, SCALAR_BYTES, "scalar")
    if a[31] > 127:
        raise ValueError("scalar must have its top bit clear")

    e: list[int] = []
    for byte in a:
        e.extend((byte & 15, byte >> 4))

    carry = 0
    for i in range(63):
        e[i] += carry
        carry = (e[i] + 8) >> 4
        e[i] -= carry << 4
    e[63] += carry

    h: _P3 = IDENTITY._coords
    for i in range(1, 64, 2):
        h = _p1p1_to_p3(_madd(h, _select(i // 2, e[i])))

    s = _p1p1_to_p2(_p3_dbl(h))
    s = _p1p1_to_p2(_p2_dbl(s))
    s = _p1p1_to_p2(_p2_dbl(s))
    h = _p1p1_to_p3(_p2_dbl(s))

    for i in range(0, 64, 2):
        h = _p1p1_to_p3(_madd(h, _select(i // 2, e[i])))

    return EdwardsPoint._from_p3(h)


def _slide(a: bytes) -> list[int]:
    r = [(a[i >> 3] >> (i & 7)) & 1 for i in range(256)]
    for i in range(256):
        if not r[i]:
            continue
        for b in range(1, 7):
            if i + b >= 256:
                break
            if not r[i + b]:
                continue
            if r[i] + (r[i + b] << b) <= 15:
                r[i] += r[i + b] << b
                r[i + b] = 0
            elif r[i] - (r[i + b] << b) >= -15:
                r[i] -= r[i + b] << b
                for k in range(i + b, 256):
                    if not r[k]:
                        r[k] = 1
                        break
                    r[k] = 0
            else:
                break
    return r


def double_scalarmult_vartime(a: bytes, point: EdwardsPoint, b: bytes) -> EdwardsPoint:
    """Return ``a * point + b * B`` in variable time for 32-byte scalars ``a`` and ``b``."""
    a = _require_length(a, SCALAR_BYTES, "scalar a")
    b = _require_length(b, SCALAR_BYTES, "scalar b")
    aslide = _slide(a)
    bslide = _slide(b)

    coords = point._coords
    ai = [_to_cached(coords)]
    twice = _p1p1_to_p3(_p3_dbl(coords))
    for _ in range(7):
        ai.append(_to_cached(_p1p1_to_p3(_add(twice, ai[-1]))))
    bi = _base_odd_multiples()

    start = next((i for i in range(255, -1, -1) if aslide[i] or bslide[i]), -1)
    if start < 0:
        return IDENTITY

    r: _P2 = _P2_IDENTITY
    t: _P1P1 = (fe.ZERO, fe.ONE, fe.ONE, fe.ONE)
    for i in range(start, -1, -1):
        t = _p2_dbl(r)

        if aslide[i] > 0:
            t = _add(_p1p1_to_p3(t), ai[aslide[i] // 2])
        elif aslide[i] < 0:
            t = _sub(_p1p1_to_p3(t), ai[(-aslide[i]) // 2])

        if bslide[i] > 0:
            t = _madd(_p1p1_to_p3(t), bi[bslide[i] // 2])
        elif bslide[i] < 0:
            t = _msub(_p1p1_to_p3(t), bi[(-bslide[i]) // 2])

        r = _p1p1_to_p2(t)

    return EdwardsPoint._from_p3(_p1p1_to_p3(t))