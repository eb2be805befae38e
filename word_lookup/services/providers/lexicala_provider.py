"""Lexicala API dictionary provider."""

import logging
from typing import Any
from urllib.parse import urlparse

import requests

from word_lookup.exceptions import ConfigurationError
from word_lookup.models import ProviderId
from word_lookup.services.connectivity import ConnectivityMonitor

from .base import BaseProviderClient

logger = logging.getLogger(__name__)


class LexicalaProvider(BaseProviderClient):
    """Online dictionary provider using the Lexicala API (via RapidAPI).

    Implements ProviderClient protocol.
    """

    provider_id = ProviderId.LEXICALA
    source_name = "Lexicala API"

    def __init__(
        self,
        api_url: str,
        api_key: str,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float = 10.0,
        connectivity: ConnectivityMonitor | None = None,
    ):
        """Initialize with API endpoint and key.

        Args:
            api_url: Lexicala endpoint base URL.
            api_key: RapidAPI key.
            session: Optional requests session.
            timeout_seconds: Default deadline per request.
            connectivity: Source of online/offline events.

        Raises:
            ConfigurationError: If endpoint or key is missing.
        """
        if not api_url or not api_key:
            raise ConfigurationError("Dictionary API endpoint and API key are required")

        super().__init__(
            session=session,
            api_key=api_key,
            timeout_seconds=timeout_seconds,
            connectivity=connectivity,
        )
        self._api_url = api_url.rstrip("/")
        self._api_host = urlparse(self._api_url).netloc or "lexicala1.p.rapidapi.com"

    def _build_request(self, word: str, target_language: str):
        url = f"{self._api_url}/search-entries"
        query = {
            "text": word,
            "language": target_language,
            "source": "password",
        }
        headers = {
            "X-RapidAPI-Key": self._api_key,
            "X-RapidAPI-Host": self._api_host,
        }
        return url, query, headers

    def _check_payload(self, payload: Any) -> bool:
        return isinstance(payload, dict) and bool(payload.get("results"))
