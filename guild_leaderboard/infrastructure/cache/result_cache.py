"""
Leaderboard Result Cache

Process-local cache of the last computed leaderboard.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Awaitable, Callable, List, Optional, Tuple, Dict, Any

from ...domain.leaderboard.models import LeaderboardEntry

logger = logging.getLogger(__name__)

LeaderboardLoader = Callable[[], Awaitable[List[LeaderboardEntry]]]


@dataclass(frozen=True)
class CacheRecord:
    """Last successful aggregation result."""
    entries: List[LeaderboardEntry]
    timestamp: float  # clock() value at write
    computed_at: datetime


class ResultCache:
    """
    Single-slot TTL cache in front of the leaderboard pipeline.

    Refreshes are serialized: a caller that waited on the lock while another
    pass finished gets that result instead of starting a second pass.
    """

    DEFAULT_TTL_SECONDS = 30 * 60

    def __init__(
        self,
        loader: LeaderboardLoader,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        """
        Initialize result cache.

        Args:
            loader: Coroutine function running a full aggregation pass
            ttl_seconds: How long a record is served without refreshing
            clock: Monotonic clock, replaceable in tests
        """
        self.loader = loader
        self.ttl_seconds = ttl_seconds
        self._clock = clock

        self._record: Optional[CacheRecord] = None
        self._lock = asyncio.Lock()
        self._generation = 0
        self._stats = {
            "hits": 0,
            "misses": 0,
            "refreshes": 0,
            "failures": 0
        }

    @property
    def record(self) -> Optional[CacheRecord]:
        return self._record

    def is_fresh(self) -> bool:
        """Check if a record exists and is younger than the TTL."""
        if self._record is None:
            return False
        return self._clock() - self._record.timestamp < self.ttl_seconds

    async def get(
        self,
        force_refresh: bool = False
    ) -> Tuple[List[LeaderboardEntry], bool]:
        """
        Get the leaderboard.

        Args:
            force_refresh: Skip the TTL check and run a new pass

        Returns:
            Tuple of (entries, from_cache)
        """
        if not force_refresh and self.is_fresh():
            self._stats["hits"] += 1
            logger.info(
                f"Returning cached data from "
                f"{self._record.computed_at.strftime('%H:%M:%S')}"
            )
            return self._record.entries, True

        generation = self._generation

        async with self._lock:
            if self._generation != generation and self._record is not None:
                # A pass completed while this caller waited for the lock
                self._stats["hits"] += 1
                return self._record.entries, True

            if not force_refresh and self.is_fresh():
                self._stats["hits"] += 1
                return self._record.entries, True

            self._stats["misses"] += 1
            if force_refresh:
                self._stats["refreshes"] += 1

            try:
                entries = await self.loader()
            except Exception:
                self._stats["failures"] += 1
                raise

            entries = sorted(entries, key=lambda entry: entry.score, reverse=True)
            self._record = CacheRecord(
                entries=entries,
                timestamp=self._clock(),
                computed_at=datetime.now(timezone.utc)
            )
            self._generation += 1

            logger.info(f"Cached leaderboard with {len(entries)} entries")
            return entries, False

    def clear(self) -> None:
        """Drop the stored record."""
        self._record = None
        logger.info("Result cache cleared")

    def get_stats(self) -> Dict[str, Any]:
        """Get cache statistics."""
        return {
            **self._stats,
            "ttl_seconds": self.ttl_seconds,
            "has_record": self._record is not None,
            "fresh": self.is_fresh(),
            "computed_at": self._record.computed_at.isoformat()
            if self._record else None,
        }
