"""Utility functions for Word Lookup."""

from .language import LANGUAGE_CODES, resolve_language_code
from .text_utils import dedupe_preserving_order, normalize_word

__all__ = [
    "normalize_word",
    "dedupe_preserving_order",
    "resolve_language_code",
    "LANGUAGE_CODES",
]
