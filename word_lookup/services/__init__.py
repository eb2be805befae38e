"""Lookup services for Word Lookup."""

from .connectivity import ConnectivityMonitor
from .factory import create_lookup_manager, create_lookup_service
from .lookup_manager import LookupManager, ManagerConfig
from .lookup_service import LookupService
from .providers import BaseProviderClient, FreeDictionaryProvider, LexicalaProvider
from .retry import RetryPolicy, exponential_backoff
from .transformers import FreeDictionaryTransformer, LexicalaTransformer
from .word_cache import WordCache, make_cache_key

__all__ = [
    "ConnectivityMonitor",
    "BaseProviderClient",
    "LexicalaProvider",
    "FreeDictionaryProvider",
    "LexicalaTransformer",
    "FreeDictionaryTransformer",
    "RetryPolicy",
    "exponential_backoff",
    "WordCache",
    "make_cache_key",
    "LookupManager",
    "ManagerConfig",
    "LookupService",
    "create_lookup_manager",
    "create_lookup_service",
]
