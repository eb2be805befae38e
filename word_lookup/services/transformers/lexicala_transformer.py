"""Transformer for Lexicala API responses."""

from datetime import datetime
from typing import Any

from word_lookup.exceptions import ErrorCode, create_dictionary_error
from word_lookup.models import Definition, DictionaryWord

from .base import build_word, clean_strings, parse_rank, validate_word

SOURCE_NAME = "Lexicala API"


class LexicalaTransformer:
    """Map a Lexicala ``search-entries`` payload to a DictionaryWord.

    Only the first (most relevant) result is used. Each sense may carry a
    ``see`` cross-reference (e.g. "blew" -> "blow"), a definition, examples
    as strings or ``{"text": ...}`` objects, and synonym/antonym lists.

    Implements ResponseTransformer protocol.
    """

    def map(self, payload: Any, retrieved_at: datetime | None = None) -> DictionaryWord:
        """Transform a raw Lexicala payload.

        Args:
            payload: Decoded ``search-entries`` response
            retrieved_at: Fetch time, stamped as last_updated

        Returns:
            The canonical word

        Raises:
            DictionaryError: API_ERROR if the payload has no usable result
        """
        if not isinstance(payload, dict):
            raise create_dictionary_error(ErrorCode.API_ERROR, "Invalid Lexicala API response format")

        results = payload.get("results")
        if not isinstance(results, list) or not results or not isinstance(results[0], dict):
            raise create_dictionary_error(ErrorCode.API_ERROR, "No results found in Lexicala API response")

        first = results[0]
        headword = self._headword(first)
        headword_text = headword.get("text") if isinstance(headword.get("text"), str) else ""
        if not headword_text.strip():
            raise create_dictionary_error(ErrorCode.API_ERROR, "Lexicala result has no headword")

        default_pos = headword.get("pos") if isinstance(headword.get("pos"), str) else None

        definitions: list[Definition] = []
        examples: list[str] = []
        synonyms: list[str] = []
        antonyms: list[str] = []

        senses = first.get("senses")
        for sense in senses if isinstance(senses, list) else []:
            if not isinstance(sense, dict):
                continue

            part_of_speech = sense.get("partOfSpeech") or default_pos
            sense_examples = self._examples(sense.get("examples"))
            sense_synonyms = clean_strings(sense.get("synonyms"))
            sense_antonyms = clean_strings(sense.get("antonyms"))

            see = sense.get("see")
            if isinstance(see, str) and see.strip():
                definitions.append(Definition(definition=f"See: {see.strip()}", part_of_speech=part_of_speech))

            text = sense.get("definition")
            if isinstance(text, str) and text.strip():
                definitions.append(
                    Definition(
                        definition=text.strip(),
                        part_of_speech=part_of_speech,
                        examples=tuple(sense_examples),
                        synonyms=tuple(sense_synonyms),
                        antonyms=tuple(sense_antonyms),
                        context=sense.get("subcategory") or None,
                    )
                )
                examples.extend(sense_examples)

            synonyms.extend(sense_synonyms)
            antonyms.extend(sense_antonyms)

        return build_word(
            headword=headword_text,
            definitions=definitions,
            source=SOURCE_NAME,
            retrieved_at=retrieved_at,
            phonetic=self._pronunciation(headword),
            examples=examples,
            synonyms=synonyms,
            antonyms=antonyms,
            rank=parse_rank(first.get("frequency")),
        )

    def validate(self, candidate: Any) -> bool:
        return validate_word(candidate)

    @staticmethod
    def _headword(result: dict[str, Any]) -> dict[str, Any]:
        # Some entries carry a list of headwords (spelling variants)
        headword = result.get("headword")
        if isinstance(headword, list):
            headword = headword[0] if headword else None
        return headword if isinstance(headword, dict) else {}

    @staticmethod
    def _pronunciation(headword: dict[str, Any]) -> str | None:
        pronunciation = headword.get("pronunciation")
        if isinstance(pronunciation, list):
            pronunciation = pronunciation[0] if pronunciation else None
        if isinstance(pronunciation, dict):
            value = pronunciation.get("value")
            return value.strip() if isinstance(value, str) and value.strip() else None
        return None

    @staticmethod
    def _examples(raw: Any) -> list[str]:
        if not isinstance(raw, list):
            return []
        examples = []
        for example in raw:
            text = example.get("text") if isinstance(example, dict) else example
            if isinstance(text, str) and text.strip():
                examples.append(text.strip())
        return examples
