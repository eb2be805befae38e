"""Dictionary provider implementations."""

from .base import BaseProviderClient
from .free_dictionary_provider import FreeDictionaryProvider
from .lexicala_provider import LexicalaProvider

__all__ = ["BaseProviderClient", "LexicalaProvider", "FreeDictionaryProvider"]
