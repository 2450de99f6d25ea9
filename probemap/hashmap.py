"""Open-addressing hash map with linear probing and tombstone deletion."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Any, Iterator, List, Optional

MAX_LOAD_FACTOR = 0.7
_MASK = (1 << 64) - 1


def hash_key(key: str, capacity: int) -> int:
    """Return the bucket index of ``key`` in a table of ``capacity`` slots.

    The hash ignores ASCII letter case: each byte is lowered before mixing.
    """
    if capacity <= 0:
        raise ValueError(f"capacity must be positive, got {capacity}")
    value = 0
    for byte in key.encode("utf-8"):
        if 0x41 <= byte <= 0x5A:
            byte += 0x20
        value = (value * 33 + byte) & _MASK
    return value % capacity


def is_equal(key1: Optional[str], key2: Optional[str]) -> bool:
    """Return True when both keys are present and equal."""
    if key1 is None or key2 is None:
        return False
    return key1 == key2


@dataclass(eq=False)
class Pair:
    """A key/value slot; a key of None marks an erased entry."""

    key: Optional[str]
    value: Any


def _is_live(pair: Optional[Pair]) -> bool:
    return pair is not None and pair.key is not None


class HashMap:
    """Hash map keeping pairs in a flat bucket list probed linearly."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.buckets: List[Optional[Pair]] = [None] * capacity
        self.capacity = capacity
        self.size = 0
        self.current = -1
        self.enlarged = False

    def insert(self, key: str, value: Any) -> None:
        """Add ``key`` with ``value``; an existing key is left untouched."""
        if (self.size + 1) / self.capacity > MAX_LOAD_FACTOR:
            self.enlarge()

        index = hash_key(key, self.capacity)
        start = index
        while _is_live(self.buckets[index]):
            if is_equal(self.buckets[index].key, key):
                return
            index = (index + 1) % self.capacity
            if index == start:
                return

        self.buckets[index] = Pair(key, value)
        self.size += 1
        self.current = index

    def enlarge(self) -> None:
        """Double the capacity and rehash every live pair."""
        old_buckets = self.buckets
        self.capacity *= 2
        self.buckets = [None] * self.capacity
        self.size = 0
        for pair in old_buckets:
            if _is_live(pair):
                self.insert(pair.key, pair.value)
        self.enlarged = True

    def erase(self, key: str) -> None:
        """Mark the pair holding ``key`` as erased, if there is one."""
        pair = self.search(key)
        if pair is not None:
            pair.key = None
            self.size -= 1

    def search(self, key: str) -> Optional[Pair]:
        """Return the pair holding ``key``, or None."""
        index = hash_key(key, self.capacity)
        start = index
        while self.buckets[index] is not None:
            pair = self.buckets[index]
            if pair.key is not None and is_equal(pair.key, key):
                self.current = index
                return pair
            index = (index + 1) % self.capacity
            if index == start:
                break
        return None

    def first(self) -> Optional[Pair]:
        """Return the live pair in the lowest bucket, or None."""
        for index, pair in enumerate(self.buckets):
            if _is_live(pair):
                self.current = index
                return pair
        return None

    def next(self) -> Optional[Pair]:
        """Return the next live pair after the current position, or None."""
        start = self.current + 1
        for index, pair in enumerate(islice(self.buckets, start, None), start):
            if _is_live(pair):
                self.current = index
                return pair
        return None

    def __iter__(self) -> Iterator[Pair]:
        return (pair for pair in self.buckets if _is_live(pair))

    def __len__(self) -> int:
        return self.size