"""Data models for the word cache."""

from dataclasses import dataclass, field

from .word import DictionaryWord


@dataclass(frozen=True)
class CacheEntry:
    """A cached word and the instant (clock seconds) it stops being valid."""

    value: DictionaryWord
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass
class CacheStats:
    """Snapshot of the cache contents for debugging."""

    size: int = 0
    keys: list[str] = field(default_factory=list)
