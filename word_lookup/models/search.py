"""Models describing a lookup request and a raw provider response."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ProviderId(str, Enum):
    """Registered lexical-data providers."""

    LEXICALA = "lexicala"
    FREE_DICTIONARY = "free_dictionary"


@dataclass(frozen=True)
class SearchParams:
    """Parameters for a single word search."""

    word: str
    from_language: str | None = None  # Reader's native language
    target_language: str | None = None  # Language of the text being read


@dataclass(frozen=True)
class ProviderResponse:
    """Raw provider payload plus provenance, prior to transformation."""

    payload: Any
    source: str
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
