"""Transformer for Free Dictionary API responses."""

from datetime import datetime
from typing import Any

from word_lookup.exceptions import ErrorCode, create_dictionary_error
from word_lookup.models import Definition, DictionaryWord

from .base import build_word, clean_strings, validate_word

SOURCE_NAME = "Free Dictionary API"


class FreeDictionaryTransformer:
    """Map a dictionaryapi.dev entry list to a DictionaryWord.

    The payload is a list of entries, each with ``meanings`` (part of speech
    plus definitions). Entries for the same headword are merged; synonyms
    and antonyms appear both per definition and per meaning.

    Implements ResponseTransformer protocol.
    """

    def map(self, payload: Any, retrieved_at: datetime | None = None) -> DictionaryWord:
        if not isinstance(payload, list) or not payload or not isinstance(payload[0], dict):
            raise create_dictionary_error(ErrorCode.API_ERROR, "Invalid Free Dictionary API response format")

        headword = payload[0].get("word")
        if not isinstance(headword, str) or not headword.strip():
            raise create_dictionary_error(ErrorCode.API_ERROR, "Free Dictionary entry has no headword")

        definitions: list[Definition] = []
        examples: list[str] = []
        synonyms: list[str] = []
        antonyms: list[str] = []
        phonetic = None

        for entry in payload:
            if not isinstance(entry, dict):
                continue

            phonetic = phonetic or self._phonetic(entry)

            meanings = entry.get("meanings")
            for meaning in meanings if isinstance(meanings, list) else []:
                if not isinstance(meaning, dict):
                    continue
                part_of_speech = meaning.get("partOfSpeech") or None

                senses = meaning.get("definitions")
                for sense in senses if isinstance(senses, list) else []:
                    if not isinstance(sense, dict):
                        continue
                    text = sense.get("definition")
                    if not isinstance(text, str) or not text.strip():
                        continue

                    example = sense.get("example")
                    sense_examples = [example.strip()] if isinstance(example, str) and example.strip() else []
                    sense_synonyms = clean_strings(sense.get("synonyms"))
                    sense_antonyms = clean_strings(sense.get("antonyms"))

                    definitions.append(
                        Definition(
                            definition=text.strip(),
                            part_of_speech=part_of_speech,
                            examples=tuple(sense_examples),
                            synonyms=tuple(sense_synonyms),
                            antonyms=tuple(sense_antonyms),
                        )
                    )
                    examples.extend(sense_examples)
                    synonyms.extend(sense_synonyms)
                    antonyms.extend(sense_antonyms)

                synonyms.extend(clean_strings(meaning.get("synonyms")))
                antonyms.extend(clean_strings(meaning.get("antonyms")))

        return build_word(
            headword=headword,
            definitions=definitions,
            source=SOURCE_NAME,
            retrieved_at=retrieved_at,
            phonetic=phonetic,
            examples=examples,
            synonyms=synonyms,
            antonyms=antonyms,
        )

    def validate(self, candidate: Any) -> bool:
        return validate_word(candidate)

    @staticmethod
    def _phonetic(entry: dict[str, Any]) -> str | None:
        phonetic = entry.get("phonetic")
        if isinstance(phonetic, str) and phonetic.strip():
            return phonetic.strip()
        phonetics = entry.get("phonetics")
        for item in phonetics if isinstance(phonetics, list) else []:
            text = item.get("text") if isinstance(item, dict) else None
            if isinstance(text, str) and text.strip():
                return text.strip()
        return None
