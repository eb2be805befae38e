"""Base class for lexical-data provider clients."""

import asyncio
import logging
from typing import Any

import requests

from word_lookup.exceptions import ErrorCode, create_dictionary_error
from word_lookup.models import ProviderId, ProviderResponse, SearchParams
from word_lookup.services.connectivity import ConnectivityMonitor

logger = logging.getLogger(__name__)


class BaseProviderClient:
    """Shared transport handling for provider clients.

    Subclasses set ``provider_id`` and ``source_name`` and implement
    ``_build_request`` and ``_check_payload``. This class validates input,
    honours the connectivity signal, runs the blocking ``requests`` call off
    the event loop under a deadline, and classifies every transport outcome
    into the canonical error codes.

    Implements ProviderClient protocol.
    """

    provider_id: ProviderId
    source_name: str

    def __init__(
        self,
        *,
        session: requests.Session | None = None,
        api_key: str | None = None,
        timeout_seconds: float = 10.0,
        connectivity: ConnectivityMonitor | None = None,
    ):
        """Initialize the client.

        Args:
            session: Optional requests session for connection pooling.
            api_key: API key for providers that require authentication.
            timeout_seconds: Default deadline for a round trip.
            connectivity: Source of online/offline events.
        """
        self._session = session or requests.Session()
        self._owns_session = session is None
        self._api_key = api_key
        self._timeout = timeout_seconds

        self._connectivity = connectivity or ConnectivityMonitor()
        self._online = self._connectivity.online
        self._unsubscribe = self._connectivity.subscribe(self._on_connectivity_change)

    @property
    def name(self) -> str:
        return self.source_name

    def is_available(self) -> bool:
        return self._online

    def _on_connectivity_change(self, online: bool) -> None:
        self._online = online
        logger.debug(f"{self.name} is now {'online' if online else 'offline'}")

    async def search_word(
        self,
        params: SearchParams,
        timeout: float | None = None,
    ) -> ProviderResponse:
        """Fetch the raw payload for a word.

        Args:
            params: Word and language codes to search for.
            timeout: Deadline in seconds (defaults to the client's timeout).

        Returns:
            ProviderResponse wrapping the decoded JSON payload.

        Raises:
            DictionaryError: Classified transport or provider failure.
        """
        word = (params.word or "").strip()
        target_language = params.target_language or "en"

        def error(code: ErrorCode, message: str):
            return create_dictionary_error(
                code,
                message,
                word=word or params.word,
                from_language=params.from_language,
                target_language=target_language,
            )

        if not self._online:
            raise error(ErrorCode.NETWORK_ERROR, "No internet connection available")

        if not word:
            raise error(ErrorCode.INVALID_REQUEST, "Word parameter is required")

        deadline = timeout if timeout is not None else self._timeout
        url, query, headers = self._build_request(word, target_language)

        try:
            response = await asyncio.wait_for(
                asyncio.to_thread(self._get, url, query, headers, deadline),
                timeout=deadline,
            )
        except asyncio.TimeoutError as e:
            raise error(ErrorCode.TIMEOUT, "Request timeout") from e
        except requests.exceptions.Timeout as e:
            raise error(ErrorCode.TIMEOUT, "Request timeout") from e
        except requests.exceptions.ConnectionError as e:
            raise error(ErrorCode.NETWORK_ERROR, f"Network request failed: {e}") from e
        except requests.RequestException as e:
            raise error(ErrorCode.API_ERROR, f"Unexpected error: {e}") from e

        if response.status_code == 404:
            raise error(ErrorCode.WORD_NOT_FOUND, f'Word "{word}" not found in dictionary')

        if not response.ok:
            raise error(
                ErrorCode.API_ERROR,
                f"API request failed with status {response.status_code}",
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise error(ErrorCode.API_ERROR, "Malformed response body") from e

        if not self._check_payload(payload):
            raise error(ErrorCode.WORD_NOT_FOUND, f'Word "{word}" not found in dictionary')

        logger.debug(f"{self.name} returned a payload for '{word}'")
        return ProviderResponse(payload=payload, source=self.source_name)

    def _get(
        self,
        url: str,
        params: dict[str, str] | None,
        headers: dict[str, str],
        timeout: float,
    ) -> requests.Response:
        return self._session.get(
            url,
            params=params,
            headers={"Accept": "application/json", **headers},
            timeout=timeout,
        )

    def _build_request(
        self, word: str, target_language: str
    ) -> tuple[str, dict[str, str] | None, dict[str, str]]:
        """Return (url, query parameters, headers) for a search."""
        raise NotImplementedError

    def _check_payload(self, payload: Any) -> bool:
        """Return False when the payload holds no entries for the word."""
        raise NotImplementedError

    def close(self) -> None:
        """Release the session and the connectivity subscription."""
        self._unsubscribe()
        if self._owns_session:
            self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, *args) -> None:
        self.close()
