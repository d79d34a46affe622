"""Domain-separated deterministic RNG using xxhash.

The same seed always produces the same board: every draw is a pure function
of (seed, domain, key, salt).

Formula: RNG_Value = Hash(Seed, Domain, Key, Salt)
"""

from __future__ import annotations

import struct

import xxhash

from gridpath.core.enums import Domain


# Seeds are packed as a signed 64-bit integer.
SEED_MIN = -(1 << 63)
SEED_MAX = (1 << 63) - 1


class DeterministicRNG:
    """Stateless domain-separated pseudo-random number generator.

    Each call is a pure function of (seed, domain, key, salt) with
    no internal mutable state.
    """

    __slots__ = ("_seed",)

    _MAX_UINT64 = (1 << 64) - 1

    def __init__(self, seed: int) -> None:
        if not SEED_MIN <= seed <= SEED_MAX:
            raise ValueError(f"seed must fit in a signed 64-bit integer, got {seed}")
        self._seed = seed

    @property
    def seed(self) -> int:
        return self._seed

    def _hash(self, domain: Domain, key: int, salt: int) -> int:
        payload = struct.pack("<qiqq", self._seed, domain.value, key, salt)
        return xxhash.xxh64(payload).intdigest()

    def next_float(self, domain: Domain, key: int, salt: int = 0) -> float:
        """Return a deterministic float in [0.0, 1.0)."""
        return self._hash(domain, key, salt) / (self._MAX_UINT64 + 1)

    def next_int(self, domain: Domain, key: int, salt: int, low: int, high: int) -> int:
        """Return a deterministic integer in [low, high] inclusive."""
        f = self.next_float(domain, key, salt)
        return low + int(f * (high - low + 1))
