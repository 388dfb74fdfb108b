"""Simple in-memory TTL cache for game-pass listings. No Redis needed.

Entries are never expired proactively: freshness is checked by the caller
on read, and a stale entry stays in memory until the next successful fetch
overwrites it.

Note: Each uvicorn worker has its own cache instance, and two concurrent
misses for the same universe both hit Roblox. Whichever finishes last wins;
both wrote equivalent data.
"""

import time
from typing import Any, Callable, NamedTuple


class CacheEntry(NamedTuple):
    data: list[Any]
    time: float


class PassCache:
    def __init__(self, ttl_seconds: float = 600, clock: Callable[[], float] = time.time):
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._store: dict[str, CacheEntry] = {}

    @staticmethod
    def key_for(universe_id: str) -> str:
        return f"passes_{universe_id}"

    def get(self, key: str) -> CacheEntry | None:
        return self._store.get(key)

    def set(self, key: str, data: list[Any]) -> CacheEntry:
        entry = CacheEntry(data=data, time=self._clock())
        self._store[key] = entry
        return entry

    def is_fresh(self, entry: CacheEntry) -> bool:
        return self._clock() - entry.time < self.ttl_seconds

    def __contains__(self, key: str) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)
