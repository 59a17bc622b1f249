"""In-process implementation of AvatarStore.

Entries live in an ordered dict guarded by a lock. With neither bound set
the store grows for the lifetime of the process; ``max_entries`` evicts the
least recently used entry and ``ttl`` expires entries lazily on access.
"""

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Callable

from soda_avatar.config import settings
from soda_avatar.entities import CacheEntryEntity

logger = logging.getLogger(__name__)


class InMemoryAvatarRepository:
    """Thread-safe in-memory avatar cache.

    This class satisfies the AvatarStore protocol through structural
    typing - no explicit inheritance needed.
    """

    def __init__(
        self,
        max_entries: int | None = None,
        ttl: float | None = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        """Initialize the in-memory repository.

        Args:
            max_entries: Maximum number of entries kept (None = unbounded).
            ttl: Seconds an entry stays valid (None = never expires).
            clock: Time source, injectable for tests.
        """
        if max_entries is not None and max_entries <= 0:
            raise ValueError("max_entries must be positive or None")
        if ttl is not None and ttl <= 0:
            raise ValueError("ttl must be positive or None")

        self._max_entries = max_entries
        self._ttl = ttl
        self._clock = clock
        self._entries: OrderedDict[str, CacheEntryEntity] = OrderedDict()
        self._lock = threading.Lock()
        self._evictions = 0

    @classmethod
    def create(
        cls,
        max_entries: int | None = None,
        ttl: float | None = None,
    ) -> "InMemoryAvatarRepository":
        """Factory method to create InMemoryAvatarRepository with defaults.

        Args:
            max_entries: Entry bound. If None, uses settings.
            ttl: Entry TTL in seconds. If None, uses settings.

        Returns:
            Configured InMemoryAvatarRepository
        """
        return cls(
            max_entries=max_entries or settings.cache_max_entries_or_none,
            ttl=ttl or settings.cache_ttl_or_none,
        )

    def get(self, key: str) -> str | None:
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            if entry.is_expired(self._clock(), self._ttl):
                del self._entries[key]
                self._evictions += 1
                return None
            self._entries.move_to_end(key)
            return entry.svg

    def set(self, key: str, svg: str) -> None:
        entry = CacheEntryEntity(key=key, svg=svg, created_at=self._clock())
        with self._lock:
            self._entries[key] = entry
            self._entries.move_to_end(key)
            if self._max_entries is not None:
                while len(self._entries) > self._max_entries:
                    evicted, _ = self._entries.popitem(last=False)
                    self._evictions += 1
                    logger.debug("Evicted avatar cache entry %s", evicted)

    def clear(self) -> int:
        with self._lock:
            count = len(self._entries)
            self._entries.clear()
            self._evictions = 0
        return count

    def count(self) -> int:
        with self._lock:
            if self._ttl is not None:
                self._purge_expired()
            return len(self._entries)

    def get_stats(self) -> dict:
        """Get repository statistics.

        Returns:
            Dictionary with entry count, configured bounds and evictions
        """
        total = self.count()
        with self._lock:
            evictions = self._evictions
        return {
            "total_entries": total,
            "max_entries": self._max_entries,
            "ttl": self._ttl,
            "evictions": evictions,
        }

    def _purge_expired(self) -> None:
        # Caller holds the lock.
        now = self._clock()
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now, self._ttl)]
        for key in expired:
            del self._entries[key]
        self._evictions += len(expired)
