"""Protocol for provider response transformers."""

from datetime import datetime
from typing import Any, Protocol

from word_lookup.models import DictionaryWord


class ResponseTransformer(Protocol):
    """Interface for mapping one provider's payload to a DictionaryWord.

    Implementations are pure: no I/O and no shared state, so the same
    payload always maps to the same word.
    """

    def map(self, payload: Any, retrieved_at: datetime | None = None) -> DictionaryWord:
        """Convert a raw provider payload.

        Args:
            payload: Decoded JSON body returned by the provider.
            retrieved_at: When the payload was fetched; stamped as
                ``last_updated``.

        Returns:
            The canonical word.

        Raises:
            DictionaryError: API_ERROR if the payload is malformed.
        """
        ...

    def validate(self, candidate: Any) -> bool:
        """Check minimal well-formedness of a DictionaryWord."""
        ...
