from __future__ import annotations

import time
from typing import Generic, TypeVar

T = TypeVar("T")

DEFAULT_TTL = 60 * 60  # seconds


class TTLCache(Generic[T]):
    """In-process TTL cache with lazy eviction. No locking; owned by one event loop.

    Expired entries are removed when a get() or has() observes them, there is
    no background sweep. Every entry uses the TTL given at construction.
    """

    def __init__(self, default_ttl: float = DEFAULT_TTL) -> None:
        self._default_ttl = default_ttl
        self._store: dict[str, tuple[T, float]] = {}
        # Value tuple: (data, expires_at_monotonic)

    def get(self, key: str) -> T | None:
        """Return cached value or None if missing or expired."""
        entry = self._store.get(key)
        if entry is None:
            return None
        data, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._store[key]
            return None
        return data

    def has(self, key: str) -> bool:
        """Return True when key holds a live entry. Purges the entry if expired."""
        entry = self._store.get(key)
        if entry is None:
            return False
        if time.monotonic() >= entry[1]:
            del self._store[key]
            return False
        return True

    def set(self, key: str, value: T) -> None:
        """Store value for default_ttl seconds, replacing any previous entry and its expiry."""
        self._store[key] = (value, time.monotonic() + self._default_ttl)

    def delete(self, key: str) -> None:
        """Remove a specific key immediately."""
        self._store.pop(key, None)

    def clear(self) -> None:
        """Remove all cached entries."""
        self._store.clear()

    def __len__(self) -> int:
        # Counts stored entries, including expired ones not yet observed
        return len(self._store)
