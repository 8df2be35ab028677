"""
Process-wide caches for built profiles and the aggregates behind them.

One StatsCache is constructed at startup and injected into the service.
Entries are populated lazily and only ever dropped all together by
invalidate_all(), which runs inside the same lock as every read and write,
so readers never see a half-cleared cache set.

Each invalidation bumps a generation counter. Writers pass the generation
they observed before fetching from the store; a value computed across an
invalidation is dropped instead of cached.
"""

from __future__ import annotations

import asyncio
import logging

from enum import Enum
from typing import Any, Dict, List, Optional

from cachetools import LRUCache

logger = logging.getLogger(__name__)

DEFAULT_CACHE_MAXSIZE = 1000000

# Key of the single global leaderboard entry
LEADERBOARD_KEY = "top"


class CacheKind(Enum):
    """The independently keyed caches held by StatsCache."""

    PROFILE = "profile"
    MATCH = "match"
    MAP_STATISTICS = "map_statistics"
    ACTIVITY_CALENDAR = "activity_calendar"
    SOLO_QUEUE = "solo_queue"
    LEADERBOARD = "leaderboard"


class StatsCache:
    """Lazily populated, wholesale invalidated cache set."""

    def __init__(self, maxsize: int = DEFAULT_CACHE_MAXSIZE) -> None:
        self._lock = asyncio.Lock()
        self._generation = 0
        self._caches: Dict[CacheKind, LRUCache] = {
            kind: LRUCache(maxsize=1 if kind is CacheKind.LEADERBOARD else maxsize)
            for kind in CacheKind
        }

    @property
    def generation(self) -> int:
        return self._generation

    async def get(self, kind: CacheKind, key: Any) -> Optional[Any]:
        """Return the cached value, or None on a miss."""
        async with self._lock:
            return self._caches[kind].get(key)

    async def put(self, kind: CacheKind, key: Any, value: Any, generation: int) -> bool:
        """
        Store a value computed from data read at `generation`.

        Returns:
            True if stored, False if an invalidation happened in between.
        """
        async with self._lock:
            if generation != self._generation:
                logger.info(
                    f"Discarding stale {kind.value} entry for {key!r} "
                    f"(generation {generation}, current {self._generation})"
                )
                return False
            self._caches[kind][key] = value
            return True

    async def values(self, kind: CacheKind) -> List[Any]:
        """Snapshot of every value currently held in one cache."""
        async with self._lock:
            return list(self._caches[kind].values())

    async def invalidate_all(self) -> int:
        """
        Drop every entry of every cache as one operation.

        Returns:
            The new generation number.
        """
        async with self._lock:
            dropped = {kind.value: len(cache) for kind, cache in self._caches.items()}
            for cache in self._caches.values():
                cache.clear()
            self._generation += 1
            generation = self._generation

        logger.info(f"Invalidated all caches (generation {generation}), dropped entries: {dropped}")
        return generation

    async def size(self, kind: CacheKind) -> int:
        async with self._lock:
            return len(self._caches[kind])
