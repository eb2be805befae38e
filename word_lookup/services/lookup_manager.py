"""Lookup manager: provider selection, retries and response transformation."""

import asyncio
import dataclasses
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from word_lookup.exceptions import (
    ConfigurationError,
    DictionaryError,
    ErrorCode,
    build_error_details,
)
from word_lookup.interfaces import ProviderClient, ResponseTransformer
from word_lookup.models import DictionaryWord, ProviderId, ProviderResponse, SearchParams

from .retry import RetryPolicy, exponential_backoff

logger = logging.getLogger(__name__)

DEFAULT_TARGET_LANGUAGE = "en"


@dataclass(frozen=True)
class ManagerConfig:
    """Runtime-adjustable settings of the lookup manager."""

    primary_provider: ProviderId = ProviderId.LEXICALA
    timeout_ms: int = 10000
    retry_attempts: int = 2
    backoff_unit_seconds: float = 1.0

    def retry_policy(self) -> RetryPolicy:
        return RetryPolicy(
            max_attempts=self.retry_attempts,
            backoff=exponential_backoff(self.backoff_unit_seconds),
        )


class LookupManager:
    """Orchestrate a word search against the configured primary provider.

    Holds one registry of provider clients and one of transformers, both
    keyed by ProviderId. A search resolves the primary provider's client,
    runs the request under the retry policy, and maps the raw payload with
    the transformer registered for the same provider. Every failure leaves
    this class as a DictionaryError.
    """

    def __init__(
        self,
        config: ManagerConfig | None = None,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        """Initialize the manager with empty registries.

        Args:
            config: Manager settings (primary provider, timeout, attempts)
            sleep: Awaitable used for backoff waits (injectable for tests)
        """
        self._config = config or ManagerConfig()
        self._sleep = sleep
        self._clients: dict[ProviderId, ProviderClient] = {}
        self._transformers: dict[ProviderId, ResponseTransformer] = {}

    # ------------------------------------------------------------------
    # Registries
    # ------------------------------------------------------------------

    def add_client(self, provider_id: ProviderId, client: ProviderClient) -> None:
        self._clients[ProviderId(provider_id)] = client
        logger.debug(f"Added API client: {ProviderId(provider_id).value}")

    def remove_client(self, provider_id: ProviderId) -> None:
        self._clients.pop(ProviderId(provider_id), None)
        logger.debug(f"Removed API client: {ProviderId(provider_id).value}")

    def add_transformer(self, provider_id: ProviderId, transformer: ResponseTransformer) -> None:
        self._transformers[ProviderId(provider_id)] = transformer
        logger.debug(f"Added transformer: {ProviderId(provider_id).value}")

    def remove_transformer(self, provider_id: ProviderId) -> None:
        self._transformers.pop(ProviderId(provider_id), None)
        logger.debug(f"Removed transformer: {ProviderId(provider_id).value}")

    def get_client(self, provider_id: ProviderId) -> ProviderClient | None:
        return self._clients.get(provider_id)

    def get_available_providers(self) -> list[ProviderId]:
        """Return registered provider ids, in registration order."""
        return list(self._clients)

    def get_available_transformers(self) -> list[ProviderId]:
        return list(self._transformers)

    def is_available(self) -> bool:
        """Check whether any registered client can serve requests."""
        return any(client.is_available() for client in self._clients.values())

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def update_config(self, **changes) -> ManagerConfig:
        """Merge new values into the configuration.

        Args:
            **changes: ManagerConfig fields to replace

        Returns:
            The updated configuration
        """
        if "primary_provider" in changes:
            changes["primary_provider"] = ProviderId(changes["primary_provider"])
        self._config = dataclasses.replace(self._config, **changes)
        logger.debug(f"Updated lookup manager configuration: {self._config}")
        return self._config

    def get_config(self) -> ManagerConfig:
        return self._config

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    async def search_word(self, params: SearchParams) -> DictionaryWord:
        """Search for a word using the primary provider.

        Args:
            params: Word and language codes; target language defaults to "en"

        Returns:
            The transformed canonical word

        Raises:
            ConfigurationError: No client/transformer for the primary
                provider, or its client is unavailable (never retried)
            DictionaryError: The provider's classified failure, after
                retries for transient kinds
        """
        if params.target_language is None:
            params = dataclasses.replace(params, target_language=DEFAULT_TARGET_LANGUAGE)

        config = self._config
        provider_id = config.primary_provider
        logger.debug(
            f"Starting word search: word='{params.word}', "
            f"target={params.target_language}, provider={provider_id.value}"
        )

        try:
            word = await self._try_provider(provider_id, params, config)
        except DictionaryError as e:
            logger.warning(f"API request failed for {provider_id.value}: {e.code.value}: {e}")
            raise

        logger.info(
            f"Successfully processed API request: provider={provider_id.value}, "
            f"word='{params.word}', definitions={len(word.definitions)}"
        )
        return word

    async def get_word_details(
        self,
        word: str,
        from_language: str | None = None,
        target_language: str | None = None,
    ) -> DictionaryWord:
        """Convenience wrapper around search_word."""
        return await self.search_word(
            SearchParams(word=word, from_language=from_language, target_language=target_language)
        )

    async def _try_provider(
        self,
        provider_id: ProviderId,
        params: SearchParams,
        config: ManagerConfig,
    ) -> DictionaryWord:
        details = build_error_details(params.word, params.from_language, params.target_language)

        client = self._clients.get(provider_id)
        if client is None:
            raise ConfigurationError(f"API client not available for: {provider_id.value}", details)

        if not client.is_available():
            raise ConfigurationError(f"API client not available: {provider_id.value}", details)

        timeout = config.timeout_ms / 1000

        async def attempt() -> ProviderResponse:
            try:
                return await client.search_word(params, timeout=timeout)
            except DictionaryError:
                raise
            except Exception as e:
                raise DictionaryError(ErrorCode.API_ERROR, f"Unexpected error: {e}", details) from e

        def on_retry(attempt_num: int, error: Exception) -> None:
            logger.debug(f"API request attempt {attempt_num} failed for {provider_id.value}: {error}")

        response = await config.retry_policy().run(attempt, sleep=self._sleep, on_retry=on_retry)

        transformer = self._transformers.get(provider_id)
        if transformer is None:
            raise ConfigurationError(f"No transformer available for provider: {provider_id.value}", details)

        try:
            return transformer.map(response.payload, retrieved_at=response.timestamp)
        except DictionaryError:
            raise
        except Exception as e:
            raise DictionaryError(ErrorCode.API_ERROR, f"Malformed provider response: {e}", details) from e
