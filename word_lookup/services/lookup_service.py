"""Lookup service: cached, kill-switchable facade over the lookup manager."""

import logging

from word_lookup.exceptions import (
    DictionaryError,
    ErrorCode,
    build_error_details,
    create_dictionary_error,
)
from word_lookup.models import CacheStats, DictionaryWord, SearchParams
from word_lookup.utils.text_utils import normalize_word

from .lookup_manager import DEFAULT_TARGET_LANGUAGE, LookupManager
from .word_cache import WordCache, make_cache_key

logger = logging.getLogger(__name__)


class LookupService:
    """Application-facing entry point for word lookups.

    Normalizes the word, serves repeat lookups from a 30-minute cache and
    surfaces every failure as a DictionaryError. Failures are never cached.
    While ``disabled`` is set, every public method raises API_ERROR
    without touching the manager or the cache.
    """

    def __init__(
        self,
        manager: LookupManager,
        cache: WordCache | None = None,
        *,
        disabled: bool = False,
        default_target_language: str = DEFAULT_TARGET_LANGUAGE,
    ):
        """Initialize the service.

        Args:
            manager: Manager that performs the provider round trip
            cache: Word cache (a fresh 30-minute cache if omitted)
            disabled: Start with the kill switch engaged
            default_target_language: Target language when the caller gives none
        """
        self.manager = manager
        self.cache = cache if cache is not None else WordCache()
        self.disabled = disabled
        self.default_target_language = default_target_language

    def _ensure_enabled(
        self,
        word: str | None = None,
        from_language: str | None = None,
        target_language: str | None = None,
    ) -> None:
        if self.disabled:
            raise create_dictionary_error(
                ErrorCode.API_ERROR,
                "Dictionary service is disabled",
                word=word,
                from_language=from_language,
                target_language=target_language,
            )

    async def get_word_info(
        self,
        word: str,
        from_language: str | None = None,
        target_language: str | None = None,
    ) -> DictionaryWord:
        """Look up a word, serving from cache when possible.

        Args:
            word: Word as selected by the reader (trimmed and lowercased here)
            from_language: Reader's native language code
            target_language: Language code of the text (default "en")

        Returns:
            The canonical word

        Raises:
            DictionaryError: On any failure, including the disabled state
        """
        normalized = normalize_word(word)
        target = target_language or self.default_target_language
        self._ensure_enabled(normalized, from_language, target)

        cache_key = make_cache_key(normalized, from_language, target)

        cached = self.cache.get(cache_key)
        if cached is not None:
            logger.debug(f"Cache hit for '{normalized}'")
            return cached

        params = SearchParams(word=normalized, from_language=from_language, target_language=target)

        try:
            result = await self.manager.search_word(params)
        except DictionaryError as e:
            logger.error(f"Dictionary lookup failed for '{normalized}': {e.code.value}: {e.message}")
            raise
        except Exception as e:
            logger.exception(f"Unexpected error looking up '{normalized}'")
            raise DictionaryError(
                ErrorCode.API_ERROR,
                f"Failed to get word info: {e}",
                build_error_details(normalized, from_language, target),
            ) from e

        self.cache.set(cache_key, result)
        return result

    async def search_word(self, params: SearchParams) -> DictionaryWord:
        """Cached lookup taking a SearchParams record."""
        return await self.get_word_info(params.word, params.from_language, params.target_language)

    def get_cached_word(
        self,
        word: str,
        from_language: str | None = None,
        target_language: str | None = None,
    ) -> DictionaryWord | None:
        """Read the cache without triggering a lookup."""
        normalized = normalize_word(word)
        target = target_language or self.default_target_language
        self._ensure_enabled(normalized, from_language, target)
        key = make_cache_key(normalized, from_language, target)
        return self.cache.get(key)

    def clear_cache(self) -> None:
        self._ensure_enabled()
        self.cache.clear()
        logger.info("Dictionary cache cleared")

    def get_cache_stats(self) -> CacheStats:
        self._ensure_enabled()
        return self.cache.stats()

    def is_available(self) -> bool:
        """Check whether the manager can reach any provider."""
        self._ensure_enabled()
        return self.manager.is_available()
