"""Operating-system entropy and a fast key-erasing Salsa20 random generator."""

from __future__ import annotations

import os
import threading

from .salsa20 import RNG_KEY_BYTES, RNG_OUTPUT_BYTES, rng


def kernel_random_bytes(length: int) -> bytes:
    """Return ``length`` bytes from the operating system's random source."""
    if length < 0:
        raise ValueError("length must not be negative")
    return os.urandom(length)


class FastRandom:
    """Random generator that stretches a 32-byte seed with the Salsa20 RNG.

    Each refill replaces the key, and consumed output is wiped from the buffer.
    Without explicit entropy the seed is drawn from the kernel on first use.
    """

    def __init__(self, entropy: bytes | None = None):
        if entropy is not None:
            entropy = bytes(entropy)
            if len(entropy) != RNG_KEY_BYTES:
                raise ValueError(f"entropy must be {RNG_KEY_BYTES} bytes, got {len(entropy)}")
        self._key = entropy
        self._buffer = bytearray(RNG_OUTPUT_BYTES)
        self._pos = RNG_OUTPUT_BYTES
        self._lock = threading.Lock()
        self.calls = 0
        self.bytes_generated = 0

    def _next_block(self) -> bytes:
        if self._key is None:
            self._key = kernel_random_bytes(RNG_KEY_BYTES)
        block, self._key = rng(self._key)
        return block

    def random_bytes(self, length: int) -> bytes:
        """Return ``length`` pseudo-random bytes."""
        if length < 0:
            raise ValueError("length must not be negative")
        with self._lock:
            self.calls += 1
            self.bytes_generated += length
            if self._key is None:
                self._key = kernel_random_bytes(RNG_KEY_BYTES)

            out = bytearray()
            remaining = length
            while remaining > 0:
                if self._pos == RNG_OUTPUT_BYTES:
                    while remaining > RNG_OUTPUT_BYTES:
                        out += self._next_block()
                        remaining -= RNG_OUTPUT_BYTES
                    self._buffer[:] = self._next_block()
                    self._pos = 0

                ready = min(RNG_OUTPUT_BYTES - self._pos, remaining)
                end = self._pos + ready
                out += self._buffer[self._pos : end]
                self._buffer[self._pos : end] = bytes(ready)
                self._pos = end
                remaining -= ready
            return bytes(out)


_shared = FastRandom()


def random_bytes(length: int) -> bytes:
    """Return ``length`` pseudo-random bytes from a process-wide generator."""
    return _shared.random_bytes(length)