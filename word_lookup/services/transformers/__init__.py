"""Response transformers, one per provider."""

from .base import estimate_frequency, frequency_from_rank, validate_word
from .free_dictionary_transformer import FreeDictionaryTransformer
from .lexicala_transformer import LexicalaTransformer

__all__ = [
    "LexicalaTransformer",
    "FreeDictionaryTransformer",
    "estimate_frequency",
    "frequency_from_rank",
    "validate_word",
]
