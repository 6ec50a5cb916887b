"""
In-memory result cache with expiry-on-read.

Entries live for the lifetime of the process. There is no background sweep:
an entry older than the requested TTL is treated as absent when read.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

# Cached analyses are valid for 5 minutes from capture
CACHE_TTL = 5 * 60


@dataclass
class CacheEntry:
    """A cached value plus the time (seconds) it was captured."""

    value: Any
    timestamp: float


class ResultCache:
    """
    Key/value cache keyed by region id.

    Each entry remembers its capture time. `get()` takes the TTL so that
    callers decide how stale is too stale.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None):
        """
        Initialize an empty cache.

        Args:
            clock: Optional time source returning seconds. Defaults to time.time
        """
        self._clock = clock or time.time
        self._entries: Dict[str, CacheEntry] = {}

    def now(self) -> float:
        return self._clock()

    def get(self, key: str, ttl: float = CACHE_TTL) -> Optional[Any]:
        """
        Get cached value for key if it is still fresh.

        Args:
            key: Cache key (region id)
            ttl: Maximum age in seconds

        Returns:
            Cached value, or None if absent or expired
        """
        entry = self._entries.get(key)
        if entry is None:
            return None
        if self.now() - entry.timestamp >= ttl:
            return None
        return entry.value

    def put(self, key: str, value: Any) -> None:
        """
        Store value under key, replacing any previous entry.

        Args:
            key: Cache key (region id)
            value: Value to cache
        """
        self._entries[key] = CacheEntry(value=value, timestamp=self.now())

