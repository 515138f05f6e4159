import pytest
from hypothesis import given, settings, strategies as st

from edref import field25519 as fe
from edref.edwards import (
    BASE,
    IDENTITY,
    EdwardsPoint,
    double_scalarmult_vartime,
    from_bytes_negate_vartime,
    scalarmult_base,
)

GROUP_ORDER = 2**252 + 27742317777372353535851937790883648493
BASE_ENCODING = bytes.fromhex(
    "5866666666666666666666666666666666666666666666666666666666666666"
)
IDENTITY_ENCODING = bytes([1]) + bytes(31)

small_scalars = st.integers(min_value=0, max_value=2**252 - 1)


def _scalar(n: int) -> bytes:
    return n.to_bytes(32, "little")


def _try_decode(encoding: bytes) -> EdwardsPoint | None:
    try:
        return from_bytes_negate_vartime(encoding)
    except ValueError:
        return None


def test_base_point_encoding():
    assert BASE.to_bytes() == BASE_ENCODING


def test_identity_encoding():
    assert IDENTITY.to_bytes() == IDENTITY_ENCODING


def test_scalarmult_base_one_is_base():
    assert scalarmult_base(_scalar(1)).to_bytes() == BASE_ENCODING


def test_scalarmult_base_zero_is_identity():
    assert scalarmult_base(_scalar(0)) == IDENTITY


def test_scalarmult_base_small_multiples():
    assert scalarmult_base(_scalar(2)) == BASE.double()
    assert scalarmult_base(_scalar(3)) == BASE.double().add(BASE)
    assert scalarmult_base(_scalar(16)) == BASE.double().double().double().double()


def test_group_order_annihilates_base():
    assert scalarmult_base(_scalar(GROUP_ORDER)) == IDENTITY
    assert scalarmult_base(_scalar(GROUP_ORDER + 1)) == BASE


def test_scalarmult_base_rejects_top_bit():
    with pytest.raises(ValueError):
        scalarmult_base(bytes(31) + bytes([128]))


def test_scalarmult_base_rejects_wrong_length():
    with pytest.raises(ValueError):
        scalarmult_base(bytes(31))


def test_decode_returns_negation():
    decoded = from_bytes_negate_vartime(BASE_ENCODING)
    assert decoded == -BASE
    assert decoded.add(BASE) == IDENTITY


def test_negation_flips_sign_bit():
    negated = (-scalarmult_base(_scalar(1))).to_bytes()
    assert negated[:31] == BASE_ENCODING[:31]
    assert negated[31] == BASE_ENCODING[31] ^ 0x80


def test_decode_rejects_wrong_length():
    with pytest.raises(ValueError):
        from_bytes_negate_vartime(bytes(33))


def test_decode_rejects_some_y_values_and_round_trips_others():
    encodings = [fe.to_bytes(y) for y in range(2, 40)]
    results = [(enc, _try_decode(enc)) for enc in encodings]
    rejected = [enc for enc, point in results if point is None]
    accepted = [(enc, point) for enc, point in results if point is not None]
    assert rejected
    assert accepted
    assert all((-point).to_bytes() == enc for enc, point in accepted)


def test_add_then_sub_restores_point():
    p = scalarmult_base(_scalar(5))
    q = scalarmult_base(_scalar(11))
    assert p.add(q).sub(q) == p
    assert p.add(q) == scalarmult_base(_scalar(16))


def test_sub_self_is_identity():
    p = scalarmult_base(_scalar(123456789))
    assert p.sub(p) == IDENTITY


def test_double_scalarmult_combines_scalars():
    point = scalarmult_base(_scalar(5))
    result = double_scalarmult_vartime(_scalar(3), point, _scalar(7))
    assert result == scalarmult_base(_scalar(22))


def test_double_scalarmult_zero_scalars_give_identity():
    assert double_scalarmult_vartime(_scalar(0), BASE, _scalar(0)) == IDENTITY


def test_double_scalarmult_rejects_wrong_length():
    with pytest.raises(ValueError):
        double_scalarmult_vartime(bytes(31), BASE, _scalar(1))


@settings(max_examples=15, deadline=None)
@given(small_scalars)
def test_encoding_round_trip(n):
    point = scalarmult_base(_scalar(n))
    decoded = from_bytes_negate_vartime(point.to_bytes())
    assert decoded.add(point) == IDENTITY
    assert (-decoded).to_bytes() == point.to_bytes()


@settings(max_examples=10, deadline=None)
@given(small_scalars, small_scalars)
def test_scalarmult_base_is_additive(m, n):
    total = scalarmult_base(_scalar(m)).add(scalarmult_base(_scalar(n)))
    assert total == scalarmult_base(_scalar((m + n) % GROUP_ORDER))


@settings(max_examples=10, deadline=None)
@given(small_scalars, small_scalars)
def test_double_scalarmult_matches_separate_products(a, b):
    point = scalarmult_base(_scalar(9))
    expected = scalarmult_base(_scalar((9 * a + b) % GROUP_ORDER))
    assert double_scalarmult_vartime(_scalar(a), point, _scalar(b)) == expected