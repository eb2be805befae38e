"""Time-bounded in-memory cache of looked-up words."""

import logging
import time
from collections.abc import Callable

from word_lookup.models import CacheEntry, CacheStats, DictionaryWord

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 30 * 60


def make_cache_key(word: str, from_language: str | None, target_language: str) -> str:
    """Build the cache key ``word:from-or-default:target``."""
    return f"{word}:{from_language or 'default'}:{target_language}"


class WordCache:
    """TTL cache mapping a lookup key to one CacheEntry.

    Expired entries read as absent but stay in memory until the next write,
    which compacts every expired entry. No background sweep runs.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the cache.

        Args:
            ttl_seconds: Lifetime of each entry.
            clock: Monotonic time source in seconds (injectable for tests).
        """
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    def get(self, key: str) -> DictionaryWord | None:
        """Return the live value for a key, or None. Never mutates the cache."""
        entry = self._entries.get(key)
        if entry is None or entry.is_expired(self._clock()):
            return None
        return entry.value

    def set(self, key: str, value: DictionaryWord) -> None:
        """Store a value for a key, then drop every expired entry."""
        now = self._clock()
        self._entries[key] = CacheEntry(value=value, expires_at=now + self.ttl_seconds)
        self._compact(now)

    def expire(self, key: str) -> bool:
        """Mark an entry as expired without removing it.

        Returns:
            True if the key was present.
        """
        entry = self._entries.get(key)
        if entry is None:
            return False
        self._entries[key] = CacheEntry(value=entry.value, expires_at=self._clock())
        return True

    def clear(self) -> None:
        self._entries.clear()
        logger.debug("Cache cleared")

    def stats(self) -> CacheStats:
        return CacheStats(size=len(self._entries), keys=list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def _compact(self, now: float) -> int:
        expired = [key for key, entry in self._entries.items() if entry.is_expired(now)]
        for key in expired:
            del self._entries[key]

        if expired:
            logger.debug(f"Cleaned up {len(expired)} expired cache entries")
        return len(expired)
