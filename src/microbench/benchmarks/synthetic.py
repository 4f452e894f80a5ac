"""Deterministic synthetic inputs for the built-in suite.

Every generator is seeded, so repeated runs time identical inputs.
"""

from __future__ import annotations

import random


def deterministic_bytes(length: int, *, seed: int) -> bytes:
    return random.Random(seed).randbytes(length)


def deterministic_ints(count: int, *, seed: int, bits: int = 32) -> list[int]:
    rng = random.Random(seed)
    return [rng.getrandbits(bits) for _ in range(count)]


def filled(length: int, byte: int = 0x00) -> bytes:
    """`length` copies of `byte` (masked to 0..255): a maximally compressible input."""

    return bytes((byte & 0xFF,)) * length
