"""Wiring of providers, transformers, manager and service from configuration."""

import asyncio
import logging
from collections.abc import Awaitable, Callable

import requests

from word_lookup.config import LookupConfig
from word_lookup.exceptions import ConfigurationError
from word_lookup.models import ProviderId

from .connectivity import ConnectivityMonitor
from .lookup_manager import LookupManager, ManagerConfig
from .lookup_service import LookupService
from .providers import FreeDictionaryProvider, LexicalaProvider
from .transformers import FreeDictionaryTransformer, LexicalaTransformer
from .word_cache import WordCache

logger = logging.getLogger(__name__)


def create_lookup_manager(
    config: LookupConfig,
    *,
    connectivity: ConnectivityMonitor | None = None,
    session: requests.Session | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> LookupManager:
    """Build a LookupManager with every provider the configuration allows.

    Free Dictionary needs no credentials and is always registered. Lexicala
    is registered only when an API key is configured; if it is also the
    primary provider and the key is missing, that is a configuration error.

    Args:
        config: Lookup configuration
        connectivity: Shared online/offline signal for the clients
        session: Optional requests session shared by the clients
        sleep: Awaitable used for backoff waits

    Returns:
        The configured manager (with empty registries when disabled)

    Raises:
        ConfigurationError: If the primary provider cannot be constructed
    """
    manager = LookupManager(
        ManagerConfig(
            primary_provider=config.provider,
            timeout_ms=config.timeout_ms,
            retry_attempts=config.retry_attempts,
            backoff_unit_seconds=config.backoff_unit_seconds,
        ),
        sleep=sleep,
    )

    if config.disabled:
        logger.info("Dictionary service disabled; no provider clients created")
        return manager

    connectivity = connectivity or ConnectivityMonitor()
    timeout_seconds = config.timeout_ms / 1000

    if config.api_key:
        manager.add_client(
            ProviderId.LEXICALA,
            LexicalaProvider(
                config.api_endpoint,
                config.api_key,
                session=session,
                timeout_seconds=timeout_seconds,
                connectivity=connectivity,
            ),
        )
    elif config.provider == ProviderId.LEXICALA:
        raise ConfigurationError("Dictionary API endpoint and API key are required")

    manager.add_client(
        ProviderId.FREE_DICTIONARY,
        FreeDictionaryProvider(
            config.free_dictionary_endpoint,
            session=session,
            timeout_seconds=timeout_seconds,
            connectivity=connectivity,
        ),
    )

    manager.add_transformer(ProviderId.LEXICALA, LexicalaTransformer())
    manager.add_transformer(ProviderId.FREE_DICTIONARY, FreeDictionaryTransformer())

    logger.debug(f"Lookup manager ready: providers={[p.value for p in manager.get_available_providers()]}")
    return manager


def create_lookup_service(
    config: LookupConfig,
    *,
    connectivity: ConnectivityMonitor | None = None,
    session: requests.Session | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> LookupService:
    """Build the application-facing LookupService from configuration."""
    manager = create_lookup_manager(config, connectivity=connectivity, session=session, sleep=sleep)
    return LookupService(
        manager,
        WordCache(ttl_seconds=config.cache_ttl_seconds),
        disabled=config.disabled,
        default_target_language=config.default_target_language,
    )
