"""Language code resolution for human-facing language names."""

from word_lookup.utils.text_utils import normalize_word

# ISO 639-1 codes for the languages offered by the reading application
LANGUAGE_CODES = {
    "arabic": "ar",
    "chinese": "zh",
    "dutch": "nl",
    "english": "en",
    "french": "fr",
    "german": "de",
    "greek": "el",
    "hebrew": "he",
    "hindi": "hi",
    "italian": "it",
    "japanese": "ja",
    "korean": "ko",
    "polish": "pl",
    "portuguese": "pt",
    "russian": "ru",
    "spanish": "es",
    "swedish": "sv",
    "turkish": "tr",
}


def resolve_language_code(language: str | None) -> str | None:
    """Map a language name or code to an ISO 639-1 code.

    Args:
        language: "Spanish", "spanish", "es", or None

    Returns:
        Two-letter code, or None if the input is empty

    Raises:
        ValueError: If the language is not recognized
    """
    if language is None:
        return None

    key = normalize_word(language)
    if not key:
        return None
    if key in LANGUAGE_CODES.values():
        return key
    if key in LANGUAGE_CODES:
        return LANGUAGE_CODES[key]
    raise ValueError(f"Unknown language: {language}")
