"""Deterministic integer hashing.

Python's builtin ``hash`` is not stable for every type across interpreter
runs, so seeds for procedural generation are derived from blake2b digests.
"""

from __future__ import annotations

import hashlib
import struct

_MASK_64 = (1 << 64) - 1


def hash_bytes(data: bytes) -> int:
    """Return an unsigned 64-bit hash of *data*."""
    digest = hashlib.blake2b(data, digest_size=8).digest()
    return struct.unpack(">Q", digest)[0]


def hash_int(num: int) -> int:
    """Return an unsigned 64-bit hash of an integer.

    Negative and arbitrarily large integers are accepted; the value is
    encoded as a minimal-length signed big-endian integer before hashing.
    """
    length = num.bit_length() // 8 + 1
    return hash_bytes(num.to_bytes(length, "big", signed=True))


def hash_coordinates(x: int, y: int, z: int) -> int:
    """Combine three axis hashes into a single 64-bit seed.

    Each axis is offset before hashing so that permuted coordinates
    (e.g. (1, 2, 3) and (2, 1, 3)) produce different seeds.
    """
    combined = hash_int(x + 1) + hash_int(y + 2) + hash_int(z + 3)
    return hash_int(combined) & _MASK_64
