"""Shared helpers for provider response transformers."""

import math
from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any

from word_lookup.models import (
    Definition,
    DictionaryWord,
    FrequencyLevel,
    PartOfSpeech,
    WordFrequency,
)
from word_lookup.utils.text_utils import dedupe_preserving_order, normalize_word

# Upper rank bounds for each frequency band
RANK_BANDS = (
    (1_000, FrequencyLevel.COMMON),
    (10_000, FrequencyLevel.UNCOMMON),
    (50_000, FrequencyLevel.RARE),
)


def frequency_from_rank(rank: int) -> WordFrequency:
    """Derive a frequency band from a provider rank (1 = most common).

    Args:
        rank: Provider frequency rank

    Returns:
        WordFrequency with a log-scaled score in 0..1
    """
    rank = max(rank, 1)
    level = FrequencyLevel.VERY_RARE
    for upper, band in RANK_BANDS:
        if rank <= upper:
            level = band
            break

    score = 1.0 - math.log10(rank) / 6
    return WordFrequency(level=level, score=round(min(max(score, 0.0), 1.0), 3), rank=rank)


def estimate_frequency(word: str, definition_count: int) -> WordFrequency:
    """Guess a frequency band from word shape when the provider has no rank.

    Short words with many senses tend to be everyday vocabulary; long words
    tend to be rarer. This is a rough heuristic, not corpus data.
    """
    word_length = len(word)
    has_many_definitions = definition_count > 3

    if word_length <= 4 and has_many_definitions:
        return WordFrequency(level=FrequencyLevel.COMMON, score=0.8)
    if word_length <= 6 and has_many_definitions:
        return WordFrequency(level=FrequencyLevel.COMMON, score=0.6)
    if word_length > 8:
        return WordFrequency(level=FrequencyLevel.UNCOMMON, score=0.3)
    return WordFrequency(level=FrequencyLevel.COMMON, score=0.5)


def parse_rank(value: Any) -> int | None:
    """Parse a provider rank that may arrive as int or numeric string."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value > 0 else None
    if isinstance(value, str) and value.strip().isdigit():
        rank = int(value.strip())
        return rank if rank > 0 else None
    return None


def clean_strings(values: Any) -> list[str]:
    """Keep the non-blank strings of a possibly missing list, stripped."""
    if not isinstance(values, list):
        return []
    return [v.strip() for v in values if isinstance(v, str) and v.strip()]


def group_parts_of_speech(definitions: Iterable[Definition]) -> tuple[PartOfSpeech, ...]:
    """Group definitions by part of speech, in first-seen order."""
    groups: dict[str, list[Definition]] = {}
    for definition in definitions:
        if definition.part_of_speech:
            groups.setdefault(definition.part_of_speech, []).append(definition)
    return tuple(PartOfSpeech(type=pos, definitions=tuple(defs)) for pos, defs in groups.items())


def build_word(
    *,
    headword: str,
    definitions: list[Definition],
    source: str,
    retrieved_at: datetime | None,
    phonetic: str | None = None,
    examples: Iterable[str] = (),
    synonyms: Iterable[str] = (),
    antonyms: Iterable[str] = (),
    rank: int | None = None,
) -> DictionaryWord:
    """Assemble a DictionaryWord, enforcing the canonical invariants.

    The word is normalized, an empty definition list gets a placeholder,
    and example/synonym/antonym collections are deduplicated.
    """
    word = normalize_word(headword)
    if not definitions:
        definitions = [Definition(definition=f"Word: {word}")]

    frequency = frequency_from_rank(rank) if rank else estimate_frequency(word, len(definitions))

    return DictionaryWord(
        word=word,
        definitions=tuple(definitions),
        source=source,
        last_updated=retrieved_at or datetime.now(timezone.utc),
        phonetic=phonetic or None,
        parts_of_speech=group_parts_of_speech(definitions),
        examples=dedupe_preserving_order(examples),
        synonyms=dedupe_preserving_order(synonyms),
        antonyms=dedupe_preserving_order(antonyms),
        frequency=frequency,
    )


def validate_word(candidate: Any) -> bool:
    """Check minimal well-formedness of a DictionaryWord.

    Requires a non-blank word and at least one definition, each with
    non-blank text.
    """
    if not isinstance(candidate, DictionaryWord):
        return False

    if not isinstance(candidate.word, str) or not candidate.word.strip():
        return False

    if not candidate.definitions:
        return False

    for definition in candidate.definitions:
        text = getattr(definition, "definition", None)
        if not isinstance(text, str) or not text.strip():
            return False

    return True
