"""A string-keyed hash map with separate chaining and automatic rehashing."""

from __future__ import annotations

from typing import Generic, TypeVar

V = TypeVar("V")

_INITIAL_BUCKETS = 5
_MAX_LOAD = 0.7
_BASE = 17


class ChainedMap(Generic[V]):
    """Maps strings to values; the bucket count doubles when the load passes 0.7."""

    def __init__(self) -> None:
        self._buckets: list[list[list]] = [[] for _ in range(_INITIAL_BUCKETS)]
        self._count = 0

    def _index(self, key: str) -> int:
        size = len(self._buckets)
        hash_value = 0
        factor = 1
        for char in reversed(key):
            hash_value = (hash_value + ord(char) * factor) % size
            factor = (factor * _BASE) % size
        return hash_value % size

    def _rehash(self) -> None:
        old = self._buckets
        self._buckets = [[] for _ in range(2 * len(old))]
        for chain in old:
            for key, value in chain:
                self._buckets[self._index(key)].append([key, value])

    def load_factor(self) -> float:
        """Entries per bucket."""
        return self._count / len(self._buckets)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return any(entry[0] == key for entry in self._buckets[self._index(key)])

    def insert(self, key: str, value: V) -> None:
        """Set ``key`` to ``value``, replacing any value it already had."""
        chain = self._buckets[self._index(key)]
        for entry in chain:
            if entry[0] == key:
                entry[1] = value
                return
        chain.insert(0, [key, value])
        self._count += 1
        if self.load_factor() > _MAX_LOAD:
            self._rehash()

    def delete(self, key: str) -> V:
        """Remove ``key`` and return its value; KeyError if it is absent."""
        chain = self._buckets[self._index(key)]
        for position, entry in enumerate(chain):
            if entry[0] == key:
                del chain[position]
                self._count -= 1
                return entry[1]
        raise KeyError(key)

    def get(self, key: str) -> V:
        """The value stored under ``key``; KeyError if it is absent."""
        for stored, value in self._buckets[self._index(key)]:
            if stored == key:
                return value
        raise KeyError(key)