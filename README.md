# edref

Pure-Python implementations of the primitives behind Ed25519 signatures
and X25519 key agreement. It has no runtime dependencies.

| Module | What it provides |
| --- | --- |
| `edref.salsa20` | `core`, `stream`, `stream_xor` and `rng` (736 output bytes plus a fresh key) |
| `edref.sha512` | `sha512` and the block compression `hashblocks` |
| `edref.verify` | `verify_32`, equality of two 32-byte strings without early exit |
| `edref.randombytes` | `kernel_random_bytes`, the `FastRandom` generator and a shared `random_bytes` |
| `edref.field25519` | arithmetic modulo `P = 2**255 - 19` on plain integers |
| `edref.curve25519` | X25519 `scalarmult` and `scalarmult_base` |
| `edref.edwards` | `EdwardsPoint`, `BASE`, `IDENTITY`, point decoding and scalar multiplication |
| `edref.scalar` | `reduce` and `muladd` modulo the group order `L` |
| `edref.ed25519` | `keypair`, `sign`, `open_signed` and `BadSignatureError` |

Functions check the lengths of their byte arguments and raise
`ValueError` when they are wrong.

## Installation

From a checkout of the project:

```
pip install .
```

## Signing and verifying

```python
from edref.ed25519 import keypair, sign, open_signed, BadSignatureError

public_key, secret_key = keypair(bytes(32))   # a fixed all-zero seed, for illustration
signed = sign(b"hello", secret_key)           # 64-byte signature followed by the message

assert open_signed(signed, public_key) == b"hello"

try:
    open_signed(signed[:-1] + b"!", public_key)
except BadSignatureError:
    print("rejected")
```

The 64-byte secret key is the 32-byte seed followed by the public key.
Called with no seed, `keypair()` takes one from `edref.randombytes.random_bytes`,
a process-wide `FastRandom` seeded from `os.urandom` on first use.

`BadSignatureError` is a subclass of `ValueError`; `open_signed` raises it
for a short or malformed signature, a public key that is not a curve
point, or a signature that does not verify.

## Key agreement

```python
from edref.curve25519 import scalarmult, scalarmult_base

alice_private = bytes(range(32))
bob_private = bytes(range(32, 64))
alice_public = scalarmult_base(alice_private)
bob_public = scalarmult_base(bob_private)
assert scalarmult(alice_private, bob_public) == scalarmult(bob_private, alice_public)
```

Scalars are clamped before use, and the top bit of the point is ignored.

## Hashing, streams and random bytes

```python
from edref.sha512 import sha512
from edref.salsa20 import stream_xor
from edref.randombytes import FastRandom

digest = sha512(b"abc")
ciphertext = stream_xor(b"message", bytes(8), bytes(32))   # 8-byte nonce, 32-byte key
assert stream_xor(ciphertext, bytes(8), bytes(32)) == b"message"

generator = FastRandom(bytes(32))   # fixed entropy gives a repeatable sequence
chunk = generator.random_bytes(100)
```

## What it does not do

- It is written to be readable and correct, not fast, and makes no claim
  to run in constant time: field elements are Python integers and
  `double_scalarmult_vartime` and `from_bytes_negate_vartime` branch on
  their inputs.
- It offers no command-line tool, key files or key storage; it is a
  library of functions only.

## Running the tests

```
pip install -e .[test]
pytest
```