"""Data models for Word Lookup."""

from .cache import CacheEntry, CacheStats
from .search import ProviderId, ProviderResponse, SearchParams
from .word import (
    Definition,
    DictionaryWord,
    FrequencyLevel,
    PartOfSpeech,
    WordFrequency,
    WordLookupResult,
)

__all__ = [
    "DictionaryWord",
    "Definition",
    "PartOfSpeech",
    "WordFrequency",
    "FrequencyLevel",
    "WordLookupResult",
    "ProviderId",
    "SearchParams",
    "ProviderResponse",
    "CacheEntry",
    "CacheStats",
]
