"""Command-line interface for Word Lookup."""
