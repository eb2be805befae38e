"""Configuration classes for Word Lookup."""

from dataclasses import dataclass

from word_lookup.models import ProviderId


@dataclass(frozen=True)
class LookupConfig:
    """Immutable configuration for dictionary lookups.

    All configuration is frozen (immutable) so a single instance can be
    shared by every consumer built at process start.
    """

    # Provider settings
    provider: ProviderId = ProviderId.LEXICALA
    api_endpoint: str = "https://lexicala1.p.rapidapi.com"
    api_key: str | None = None
    free_dictionary_endpoint: str = "https://api.dictionaryapi.dev/api/v2/entries"

    # Operational kill switch
    disabled: bool = False

    # Request settings
    timeout_ms: int = 10000  # Per round trip deadline
    retry_attempts: int = 2  # Total attempts, not retries
    backoff_unit_seconds: float = 1.0  # Wait 2**attempt units between attempts

    # Cache settings
    cache_ttl_seconds: float = 30 * 60

    # Language settings
    default_target_language: str = "en"

    def __post_init__(self):
        """Coerce string provider ids into ProviderId."""
        if not isinstance(self.provider, ProviderId):
            object.__setattr__(self, "provider", ProviderId(self.provider))
        if self.retry_attempts < 1:
            object.__setattr__(self, "retry_attempts", 1)
