"""CLI command for looking up words."""

import asyncio
import json

from word_lookup.config import config_from_env
from word_lookup.exceptions import DictionaryError
from word_lookup.interfaces import PresenterProtocol
from word_lookup.models import WordLookupResult
from word_lookup.presenters import ConsolePresenter
from word_lookup.services import LookupService, create_lookup_service
from word_lookup.utils import resolve_language_code


async def lookup_words(
    service: LookupService,
    words: list[str],
    from_language: str | None = None,
    target_language: str | None = None,
) -> list[WordLookupResult]:
    """Look up each word in turn, collecting words and errors alike.

    Args:
        service: Configured lookup service
        words: Words as given on the command line
        from_language: Reader's native language code
        target_language: Language code of the words

    Returns:
        One result per input word, in input order
    """
    results = []
    for query in words:
        try:
            word = await service.get_word_info(query, from_language, target_language)
            results.append(WordLookupResult(query=query, word=word))
        except DictionaryError as e:
            results.append(
                WordLookupResult(query=query, error_code=e.code.value, error_message=e.message)
            )
    return results


def results_to_json(results: list[WordLookupResult]) -> str:
    output = []
    for result in results:
        entry = {"query": result.query, "word": result.word.to_dict() if result.word else None}
        if not result.found:
            entry["error"] = {"code": result.error_code, "message": result.error_message}
        output.append(entry)
    return json.dumps(output, indent=2, ensure_ascii=False)


def show_results(presenter: PresenterProtocol, results: list[WordLookupResult], as_json: bool = False) -> None:
    if as_json:
        presenter.show_info(results_to_json(results))
        return
    for result in results:
        presenter.show_lookup_result(result)


def lookup_command(args) -> int:
    """Execute the lookup subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 = every word found, 1 = otherwise)
    """
    presenter = ConsolePresenter()

    try:
        from_language = resolve_language_code(args.from_language)
        target_language = resolve_language_code(args.target_language)
    except ValueError as e:
        presenter.show_error(str(e))
        return 1

    overrides = {"provider": args.provider} if args.provider else {}

    try:
        config = config_from_env(**overrides)
        service = create_lookup_service(config)
        results = asyncio.run(lookup_words(service, args.words, from_language, target_language))
    except DictionaryError as e:
        presenter.show_error(f"Error: {e.message}")
        return 1
    except Exception as e:
        presenter.show_error(f"Unexpected error: {e}")
        return 1

    show_results(presenter, results, as_json=args.json)
    return 0 if all(result.found for result in results) else 1
