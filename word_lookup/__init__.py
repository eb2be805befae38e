"""
Word Lookup - Dictionary lookup core for reading applications

Fetches definitions, phonetics, synonyms/antonyms and frequency data from
external lexical providers, normalizes them into one canonical word model,
and keeps recent results in a time-bounded in-memory cache.
"""

__version__ = "1.0.0"
__author__ = "Word Lookup Contributors"
