"""Explicit key/value cache with manual invalidation.

No eviction and no expiry: entries live until `invalidate`/`clear`.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Cache(Generic[K, V]):
    def __init__(self) -> None:
        self._entries: dict[K, V] = {}

    def get(self, key: K) -> V | None:
        return self._entries.get(key)

    def set(self, key: K, value: V) -> None:
        self._entries[key] = value

    def get_or_create(self, key: K, factory: Callable[[], V]) -> V:
        if key in self._entries:
            return self._entries[key]
        value = factory()
        self._entries[key] = value
        return value

    def invalidate(self, key: K) -> bool:
        """Drop one entry. Returns whether it was present."""
        if key not in self._entries:
            return False
        del self._entries[key]
        return True

    def clear(self) -> None:
        self._entries.clear()

    def keys(self) -> Iterator[K]:
        return iter(tuple(self._entries))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
