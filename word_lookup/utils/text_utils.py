"""Text processing utilities."""

from collections.abc import Iterable


def normalize_word(word: str) -> str:
    """Normalize a lookup term (trim surrounding whitespace, lowercase).

    Args:
        word: Raw word as typed or selected by the reader

    Returns:
        Normalized word
    """
    return (word or "").strip().lower()


def dedupe_preserving_order(values: Iterable[str]) -> tuple[str, ...]:
    """Remove duplicate strings, keeping the first occurrence of each.

    Args:
        values: Strings in provider order

    Returns:
        Tuple of unique strings in first-seen order
    """
    return tuple(dict.fromkeys(v for v in values if v))
