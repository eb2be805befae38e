"""Interface protocols for Word Lookup."""

from .presenter import PresenterProtocol
from .provider_client import ProviderClient
from .transformer import ResponseTransformer

__all__ = ["ProviderClient", "ResponseTransformer", "PresenterProtocol"]
