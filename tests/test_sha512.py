import hashlib

import pytest
from hypothesis import given, strategies as st

from edref import sha512


@pytest.mark.parametrize("length", [0, 1, 3, 111, 112, 113, 127, 128, 129, 239, 240, 255, 256, 1000])
def test_sha512_matches_standard_library(length):
    data = bytes((i * 7 + 3) % 256 for i in range(length))
    assert sha512.sha512(data) == hashlib.sha512(data).digest()


@given(st.binary(max_size=700))
def test_sha512_matches_standard_library_for_arbitrary_input(data):
    assert sha512.sha512(data) == hashlib.sha512(data).digest()


def test_iv_is_the_standard_initial_state():
    state, tail = sha512.hashblocks(sha512.IV, b"")
    assert state[:8] == bytes.fromhex("6a09e667f3bcc908")
    assert len(state) == 64
    assert tail == b""


def test_hashblocks_on_empty_data_keeps_state():
    state, tail = sha512.hashblocks(sha512.IV, b"")
    assert state == sha512.IV
    assert tail == b""


def test_hashblocks_returns_partial_block_as_tail():
    data = bytes(range(200))
    state, tail = sha512.hashblocks(sha512.IV, data)
    assert tail == data[128:]
    assert state == sha512.hashblocks(sha512.IV, data[:128])[0]


def test_hashblocks_chains():
    first = bytes(range(128))
    second = bytes(reversed(range(128)))
    combined, _ = sha512.hashblocks(sha512.IV, first + second)
    step, _ = sha512.hashblocks(sha512.IV, first)
    chained, _ = sha512.hashblocks(step, second)
    assert combined == chained


def test_hashblocks_rejects_bad_state():
    with pytest.raises(ValueError):
        sha512.hashblocks(bytes(63), bytes(128))