"""Associative array backed by a growable list of key/value pairs.

Lookup is a linear scan over the live slots, not hashing. Category and image
counts on a board are small, so O(n) per operation is fine.

Not thread-safe: callers sharing an array across threads must lock around it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterator, TypeVar

K = TypeVar("K")
V = TypeVar("V")

DEFAULT_CAPACITY = 16


class KeyNotFoundError(KeyError):
    """Raised when a key is not present in an AssociativeArray."""


@dataclass(frozen=True)
class KVPair(Generic[K, V]):
    """A stored key/value pair. Replaced wholesale on update."""

    key: K
    value: V


class AssociativeArray(Generic[K, V]):
    """Key/value store with insertion order and doubling capacity."""

    def __init__(self) -> None:
        self.capacity = DEFAULT_CAPACITY
        self.pairs: list[KVPair[K, V] | None] = [None] * DEFAULT_CAPACITY
        self._size = 0

    # ── Standard methods ──────────────────────────────────────

    def clone(self) -> AssociativeArray[K, V]:
        """Return an independent copy with fresh pairs (keys/values shared)."""
        copy: AssociativeArray[K, V] = AssociativeArray()
        copy.capacity = self.capacity
        copy.pairs = [None] * self.capacity
        for i in range(self._size):
            pair = self.pairs[i]
            copy.pairs[i] = KVPair(pair.key, pair.value)
        copy._size = self._size
        return copy

    def __str__(self) -> str:
        if self._size == 0:
            return "{}"
        body = ", ".join(f"{p.key}: {p.value}" for p in self._live())
        return "{ " + body + " }"

    def __repr__(self) -> str:
        return f"AssociativeArray(size={self._size}, capacity={self.capacity})"

    def __len__(self) -> int:
        return self._size

    def __contains__(self, key: object) -> bool:
        return self.has_key(key)

    def __iter__(self) -> Iterator[K]:
        return iter(self.keys())

    # ── Public methods ────────────────────────────────────────

    def set(self, key: K, value: V) -> None:
        """Associate key with value, replacing any existing value in place."""
        if key is None:
            raise ValueError("Key cannot be None")
        try:
            index = self.find(key)
        except KeyNotFoundError:
            if self._size == self.capacity:
                self._expand()
            self.pairs[self._size] = KVPair(key, value)
            self._size += 1
        else:
            self.pairs[index] = KVPair(key, value)

    def get(self, key: K) -> V:
        """Return the value for key.

        Raises ValueError for a None key and KeyNotFoundError when absent.
        """
        if key is None:
            raise ValueError("Key cannot be None")
        return self.pairs[self.find(key)].value

    def has_key(self, key: K) -> bool:
        if key is None:
            return False
        try:
            self.find(key)
        except KeyNotFoundError:
            return False
        return True

    def remove(self, key: K) -> None:
        """Drop key if present. Later entries shift left to keep order."""
        if key is None:
            return
        try:
            index = self.find(key)
        except KeyNotFoundError:
            return
        self.pairs[index : self._size - 1] = self.pairs[index + 1 : self._size]
        self._size -= 1
        self.pairs[self._size] = None

    def size(self) -> int:
        return self._size

    def keys(self) -> list[K]:
        return [p.key for p in self._live()]

    def items(self) -> list[tuple[K, V]]:
        return [(p.key, p.value) for p in self._live()]

    # ── Internals ─────────────────────────────────────────────

    def find(self, key: K) -> int:
        """Index of the first live slot holding key, else KeyNotFoundError."""
        for i in range(self._size):
            if self.pairs[i].key == key:
                return i
        raise KeyNotFoundError(key)

    def _expand(self) -> None:
        self.pairs.extend([None] * self.capacity)
        self.capacity *= 2

    def _live(self) -> list[KVPair[K, V]]:
        return self.pairs[: self._size]
