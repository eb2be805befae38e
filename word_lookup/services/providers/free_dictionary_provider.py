"""Free Dictionary API provider."""

import logging
from typing import Any
from urllib.parse import quote

import requests

from word_lookup.models import ProviderId
from word_lookup.services.connectivity import ConnectivityMonitor

from .base import BaseProviderClient

logger = logging.getLogger(__name__)


class FreeDictionaryProvider(BaseProviderClient):
    """Online dictionary provider using dictionaryapi.dev.

    No API key is needed. The service answers unknown words with a 404 and
    a ``{"title": "No Definitions Found"}`` object instead of an entry list.

    Implements ProviderClient protocol.
    """

    provider_id = ProviderId.FREE_DICTIONARY
    source_name = "Free Dictionary API"

    def __init__(
        self,
        api_url: str = "https://api.dictionaryapi.dev/api/v2/entries",
        api_key: str | None = None,
        *,
        session: requests.Session | None = None,
        timeout_seconds: float = 10.0,
        connectivity: ConnectivityMonitor | None = None,
    ):
        super().__init__(
            session=session,
            api_key=api_key,
            timeout_seconds=timeout_seconds,
            connectivity=connectivity,
        )
        self._api_url = api_url.rstrip("/")

    def _build_request(self, word: str, target_language: str):
        url = f"{self._api_url}/{quote(target_language)}/{quote(word)}"
        headers = {"X-Api-Key": self._api_key} if self._api_key else {}
        return url, None, headers

    def _check_payload(self, payload: Any) -> bool:
        return isinstance(payload, list) and len(payload) > 0
