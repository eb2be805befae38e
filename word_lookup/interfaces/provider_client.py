"""Protocol for lexical-data provider clients."""

from typing import Protocol

from word_lookup.models import ProviderId, ProviderResponse, SearchParams


class ProviderClient(Protocol):
    """Interface for a client speaking one provider's wire protocol.

    Any lexical API (Lexicala, Free Dictionary, custom dictionaries, etc.)
    implements this protocol to participate in the pluggable lookup system.
    Clients only classify transport outcomes; retrying is the manager's job.
    """

    provider_id: ProviderId

    @property
    def name(self) -> str:
        """Human-readable name for this provider (e.g., 'Lexicala API')."""
        ...

    def is_available(self) -> bool:
        """Check if this client can currently reach its provider."""
        ...

    async def search_word(
        self,
        params: SearchParams,
        timeout: float | None = None,
    ) -> ProviderResponse:
        """Fetch the raw provider payload for a word.

        Args:
            params: Word and language codes to search for.
            timeout: Deadline for the round trip in seconds.

        Returns:
            The raw payload with provenance.

        Raises:
            DictionaryError: WORD_NOT_FOUND, INVALID_REQUEST, NETWORK_ERROR,
                API_ERROR or TIMEOUT.
        """
        ...
