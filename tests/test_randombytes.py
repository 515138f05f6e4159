import pytest
from hypothesis import given, strategies as st

from edref import randombytes
from edref.salsa20 import rng

SEED = bytes(range(32))


def test_kernel_random_bytes_length():
    assert len(randombytes.kernel_random_bytes(1000)) == 1000
    assert randombytes.kernel_random_bytes(0) == b""


def test_kernel_random_bytes_rejects_negative():
    with pytest.raises(ValueError):
        randombytes.kernel_random_bytes(-5)


def test_first_output_comes_from_rng_block():
    block, _ = rng(SEED)
    assert randombytes.FastRandom(SEED).random_bytes(100) == block[:100]


def test_large_request_starts_with_first_rng_block():
    first_block, next_key = rng(SEED)
    second_block, _ = rng(next_key)
    out = randombytes.FastRandom(SEED).random_bytes(736 * 2 + 5)
    assert len(out) == 736 * 2 + 5
    assert out[:736] == first_block
    assert out[736 : 736 * 2] == second_block


@given(st.lists(st.integers(min_value=0, max_value=1600), max_size=6))
def test_split_requests_give_same_stream(sizes):
    whole = randombytes.FastRandom(SEED).random_bytes(sum(sizes))
    pieces = randombytes.FastRandom(SEED)
    joined = b"".join(pieces.random_bytes(size) for size in sizes)
    assert joined == whole


def test_counters_track_calls_and_bytes():
    generator = randombytes.FastRandom(SEED)
    generator.random_bytes(10)
    generator.random_bytes(990)
    assert generator.calls == 2
    assert generator.bytes_generated == 1000


def test_bad_entropy_length_rejected():
    with pytest.raises(ValueError):
        randombytes.FastRandom(bytes(16))


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        randombytes.FastRandom(SEED).random_bytes(-1)


def test_module_random_bytes_length():
    assert len(randombytes.random_bytes(800)) == 800
    assert randombytes.random_bytes(0) == b""


def test_unseeded_generators_differ():
    a = randombytes.FastRandom().random_bytes(32)
    b = randombytes.FastRandom().random_bytes(32)
    assert len(a) == 32 and a != b