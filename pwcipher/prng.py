from __future__ import annotations

import hashlib
import os
import threading
from typing import Protocol


class RandomSource(Protocol):
    def random_bytes(self, size: int) -> bytes:
        ...


class SystemRandomSource:
    """Cryptographically strong bytes from the operating system."""

    def random_bytes(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must be non-negative")
        return os.urandom(size)


class DeterministicPRNG:
    """Deterministic pseudo-random byte generator based on BLAKE2b.

    Not suitable for real secrets; used to make salts and filler reproducible
    in tests.
    """

    def __init__(self, seed_base: bytes, seed_id: int = 0):
        self.seed_base = seed_base
        self.seed_id = seed_id
        self.counter = 0
        self.buffer = b""
        self.pos = 0
        self._lock = threading.Lock()

    def _refill(self):
        material = self.seed_base + self.seed_id.to_bytes(8, "little") + self.counter.to_bytes(4, "little")
        self.buffer = hashlib.blake2b(material, digest_size=32).digest()
        self.counter += 1
        self.pos = 0

    def next_byte(self) -> int:
        if self.pos >= len(self.buffer):
            self._refill()
        b = self.buffer[self.pos]
        self.pos += 1
        return b

    def random_bytes(self, size: int) -> bytes:
        if size < 0:
            raise ValueError("size must be non-negative")
        with self._lock:
            return bytes(self.next_byte() for _ in range(size))


DEFAULT_RANDOM_SOURCE = SystemRandomSource()
