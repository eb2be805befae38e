"""Custom exceptions for Word Lookup."""

from .base import WordLookupException
from .lookup import (
    ConfigurationError,
    DictionaryError,
    ErrorCode,
    build_error_details,
    create_dictionary_error,
)

__all__ = [
    "WordLookupException",
    "DictionaryError",
    "ConfigurationError",
    "ErrorCode",
    "build_error_details",
    "create_dictionary_error",
]
