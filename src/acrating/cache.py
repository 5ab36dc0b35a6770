"""
Per-user memoization of contest result histories.

A history only changes when a rated contest finishes, so a page that
computes several predictions for the same user should fetch it once.
HistoryCache keeps one entry per user screen name and is invalidated
explicitly (e.g. after a contest's results are published), or by age when
a TTL is configured.

The fetcher is any callable taking a user screen name and returning that
user's results; network access stays outside this package.
"""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from typing import Callable, Optional

from acrating.config import settings
from acrating.history import UserResult

logger = logging.getLogger(__name__)

HistoryFetcher = Callable[[str], list[UserResult]]


@dataclass
class _CacheEntry:
    results: list[UserResult]
    fetched_at: float


class HistoryCache:
    """
    Thread-safe cache of user histories keyed by screen name.

    Usage:
        cache = HistoryCache(fetch_history)
        results = cache.get("tourist")      # fetches
        results = cache.get("tourist")      # cached
        cache.invalidate("tourist")         # next get() fetches again
    """

    def __init__(
        self,
        fetcher: HistoryFetcher,
        ttl_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """
        Args:
            fetcher: Returns the results of a user given their screen name
            ttl_seconds: Refetch entries older than this. 0 disables expiry.
                        Default from settings.history_cache_ttl_seconds.
            clock: Monotonic time source, in seconds
        """
        if ttl_seconds is None:
            ttl_seconds = settings.history_cache_ttl_seconds
        self._fetcher = fetcher
        self._ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, _CacheEntry] = {}
        self._lock = threading.Lock()

    def get(self, user_screen_name: str) -> list[UserResult]:
        """
        Get a user's results, fetching them on a miss.

        Raises:
            ValueError: If user_screen_name is empty
        """
        if not user_screen_name:
            raise ValueError("user_screen_name must not be empty")

        with self._lock:
            entry = self._entries.get(user_screen_name)
            if entry is not None and not self._is_expired(entry):
                logger.debug("History cache hit for %s", user_screen_name)
                return entry.results

        # Fetch without holding the lock; concurrent misses may both fetch
        logger.debug("History cache miss for %s, fetching", user_screen_name)
        results = list(self._fetcher(user_screen_name))

        with self._lock:
            self._entries[user_screen_name] = _CacheEntry(results, self._clock())
        logger.debug("Cached %d results for %s", len(results), user_screen_name)
        return results

    def invalidate(self, user_screen_name: Optional[str] = None) -> None:
        """Drop the cached history of one user, or of everyone if None."""
        with self._lock:
            if user_screen_name is None:
                count = len(self._entries)
                self._entries.clear()
                logger.info("Invalidated %d cached histories", count)
            elif self._entries.pop(user_screen_name, None) is not None:
                logger.info("Invalidated cached history for %s", user_screen_name)

    def _is_expired(self, entry: _CacheEntry) -> bool:
        if self._ttl_seconds <= 0:
            return False
        return self._clock() - entry.fetched_at >= self._ttl_seconds

    def __contains__(self, user_screen_name: object) -> bool:
        with self._lock:
            entry = self._entries.get(user_screen_name)  # type: ignore[arg-type]
            return entry is not None and not self._is_expired(entry)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
