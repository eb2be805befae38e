"""Dictionary lookup exceptions and the canonical error taxonomy."""

from datetime import datetime, timezone
from enum import Enum
from typing import Any

from .base import WordLookupException


class ErrorCode(str, Enum):
    """Canonical error kinds surfaced to every caller."""

    WORD_NOT_FOUND = "WORD_NOT_FOUND"
    INVALID_REQUEST = "INVALID_REQUEST"
    NETWORK_ERROR = "NETWORK_ERROR"
    API_ERROR = "API_ERROR"
    TIMEOUT = "TIMEOUT"


# Outcomes worth another attempt; everything else is definitive.
RETRIABLE_CODES = frozenset({ErrorCode.API_ERROR, ErrorCode.NETWORK_ERROR, ErrorCode.TIMEOUT})


class DictionaryError(WordLookupException):
    """Raised when a word lookup fails.

    Carries one of the canonical error codes plus details about the
    request that failed (word, languages, timestamp).
    """

    def __init__(self, code: ErrorCode, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.code = ErrorCode(code)
        self.message = message
        self.details = details or {}

    @property
    def retriable(self) -> bool:
        """Whether the retry policy should attempt the request again."""
        return self.code in RETRIABLE_CODES

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the cross-boundary error contract."""
        return {
            "code": self.code.value,
            "message": self.message,
            "details": dict(self.details),
        }

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code.value}, message={self.message!r})"


class ConfigurationError(DictionaryError):
    """Raised when the lookup stack is misconfigured.

    Missing credentials, no client registered for the primary provider or
    no transformer for it. Fatal for the call and never retried.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(ErrorCode.API_ERROR, message, details)

    @property
    def retriable(self) -> bool:
        return False


def build_error_details(
    word: str | None = None,
    from_language: str | None = None,
    target_language: str | None = None,
) -> dict[str, Any]:
    """Build the details mapping attached to a DictionaryError."""
    details: dict[str, Any] = {"word": word}
    if from_language:
        details["from_language"] = from_language
    if target_language:
        details["target_language"] = target_language
    details["timestamp"] = datetime.now(timezone.utc).isoformat()
    return details


def create_dictionary_error(
    code: ErrorCode,
    message: str,
    *,
    word: str | None = None,
    from_language: str | None = None,
    target_language: str | None = None,
) -> DictionaryError:
    """Create a DictionaryError with timestamped request details.

    Args:
        code: Canonical error code
        message: Human-readable message
        word: Word being looked up
        from_language: Reader's native language code, if any
        target_language: Language code of the text being read

    Returns:
        A DictionaryError ready to raise
    """
    return DictionaryError(code, message, build_error_details(word, from_language, target_language))
