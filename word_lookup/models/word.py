"""Data models for canonical dictionary words."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class FrequencyLevel(str, Enum):
    """How often a word shows up in running text."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    VERY_RARE = "very-rare"


@dataclass(frozen=True)
class WordFrequency:
    """Frequency band of a word."""

    level: FrequencyLevel
    score: float  # 0..1, higher = more frequent
    rank: int | None = None  # Provider frequency rank (1 = most common)

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"level": self.level.value, "score": self.score}
        if self.rank is not None:
            result["rank"] = self.rank
        return result


@dataclass(frozen=True)
class Definition:
    """A single sense of a word."""

    definition: str
    part_of_speech: str | None = None
    examples: tuple[str, ...] = ()
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()
    context: str | None = None  # Register/domain label, e.g. "informal"

    def to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {"definition": self.definition}
        if self.part_of_speech:
            result["part_of_speech"] = self.part_of_speech
        if self.examples:
            result["examples"] = list(self.examples)
        if self.synonyms:
            result["synonyms"] = list(self.synonyms)
        if self.antonyms:
            result["antonyms"] = list(self.antonyms)
        if self.context:
            result["context"] = self.context
        return result


@dataclass(frozen=True)
class PartOfSpeech:
    """Definitions grouped under one grammatical category."""

    type: str
    definitions: tuple[Definition, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "definitions": [d.to_dict() for d in self.definitions],
        }


@dataclass(frozen=True)
class DictionaryWord:
    """Provider-independent representation of a looked-up word.

    Created once per successful provider round trip and never modified
    afterwards. ``definitions`` always holds at least one entry and the
    example/synonym/antonym tuples are deduplicated in first-seen order.
    """

    word: str
    definitions: tuple[Definition, ...]
    source: str
    last_updated: datetime
    phonetic: str | None = None
    parts_of_speech: tuple[PartOfSpeech, ...] = ()
    examples: tuple[str, ...] = ()
    synonyms: tuple[str, ...] = ()
    antonyms: tuple[str, ...] = ()
    frequency: WordFrequency | None = None

    @property
    def primary_definition(self) -> str:
        """Text of the first (most relevant) definition."""
        return self.definitions[0].definition

    def to_dict(self) -> dict[str, Any]:
        """Serialize for rendering and downstream persistence."""
        result: dict[str, Any] = {
            "word": self.word,
            "definitions": [d.to_dict() for d in self.definitions],
            "source": self.source,
            "last_updated": self.last_updated.isoformat(),
        }
        if self.phonetic:
            result["phonetic"] = self.phonetic
        if self.parts_of_speech:
            result["parts_of_speech"] = [p.to_dict() for p in self.parts_of_speech]
        if self.examples:
            result["examples"] = list(self.examples)
        if self.synonyms:
            result["synonyms"] = list(self.synonyms)
        if self.antonyms:
            result["antonyms"] = list(self.antonyms)
        if self.frequency:
            result["frequency"] = self.frequency.to_dict()
        return result

    def __str__(self) -> str:
        return f"{self.word}: {self.primary_definition[:50]}"


@dataclass(frozen=True)
class WordLookupResult:
    """Outcome of looking up one word from the CLI (word or error message)."""

    query: str
    word: DictionaryWord | None = None
    error_code: str | None = None
    error_message: str | None = None

    @property
    def found(self) -> bool:
        return self.word is not None
