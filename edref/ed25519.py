"""Ed25519 key generation, signing and signature opening."""

from __future__ import annotations

from . import edwards, scalar
from .randombytes import random_bytes
from .sha512 import sha512
from .verify import verify_32

SEED_BYTES = 32
PUBLIC_KEY_BYTES = 32
SECRET_KEY_BYTES = 64
SIGNATURE_BYTES = 64


class BadSignatureError(ValueError):
    """Raised when a signed message does not verify."""


def _expand(seed: bytes) -> bytes:
    az = bytearray(sha512(seed))
    az[0] &= 248
    az[31] &= 63
    az[31] |= 64
    return bytes(az)


def keypair(seed: bytes | None = None) -> tuple[bytes, bytes]:
    """Return ``(public_key, secret_key)``.

    The 64-byte secret key is the 32-byte seed followed by the public key.
    Without a seed one is drawn from the random generator.
    """
    if seed is None:
        seed = random_bytes(SEED_BYTES)
    seed = bytes(seed)
    if len(seed) != SEED_BYTES:
        raise ValueError(f"seed must be {SEED_BYTES} bytes, got {len(seed)}")
    az = _expand(seed)
    public_key = edwards.scalarmult_base(az[:32]).to_bytes()
    return public_key, seed + public_key


def sign(message: bytes, secret_key: bytes) -> bytes:
    """Return the signed message: a 64-byte signature followed by ``message``."""
    message = bytes(message)
    secret_key = bytes(secret_key)
    if len(secret_key) != SECRET_KEY_BYTES:
        raise ValueError(f"secret key must be {SECRET_KEY_BYTES} bytes, got {len(secret_key)}")
    public_key = secret_key[32:]
    az = _expand(secret_key[:32])

    nonce = scalar.reduce(sha512(az[32:] + message))
    r_bytes = edwards.scalarmult_base(nonce).to_bytes()

    hram = scalar.reduce(sha512(r_bytes + public_key + message))
    s_bytes = scalar.muladd(hram, az[:32], nonce)
    return r_bytes + s_bytes + message


def open_signed(signed_message: bytes, public_key: bytes) -> bytes:
    """Verify a signed message and return the message it carries.

    Raises BadSignatureError when the signature does not verify.
    """
    signed_message = bytes(signed_message)
    public_key = bytes(public_key)
    if len(public_key) != PUBLIC_KEY_BYTES:
        raise ValueError(f"public key must be {PUBLIC_KEY_BYTES} bytes, got {len(public_key)}")
    if len(signed_message) < SIGNATURE_BYTES:
        raise BadSignatureError("signed message is shorter than a signature")
    if signed_message[63] & 224:
        raise BadSignatureError("signature scalar has high bits set")
    try:
        negated_a = edwards.from_bytes_negate_vartime(public_key)
    except ValueError as exc:
        raise BadSignatureError("public key is not a valid curve point") from exc

    r_bytes = signed_message[:32]
    s_bytes = signed_message[32:64]
    message = signed_message[64:]

    h = scalar.reduce(sha512(r_bytes + public_key + message))
    r_check = edwards.double_scalarmult_vartime(h, negated_a, s_bytes).to_bytes()
    if not verify_32(r_check, r_bytes):
        raise BadSignatureError("signature does not verify")
    return message