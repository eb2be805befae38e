"""Console presenter for CLI output."""

from word_lookup.models import CacheStats, DictionaryWord, WordLookupResult


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_success(self, message: str) -> None:
        """Display a success message."""
        print(f"[OK] {message}")

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_lookup_result(self, result: WordLookupResult) -> None:
        """Display one looked-up word, or why it could not be found."""
        if result.word is None:
            print(f"[ERROR] {result.query}: {result.error_message} ({result.error_code})")
            return
        self._print_word(result.word)

    def show_cache_stats(self, stats: CacheStats) -> None:
        """Display cache size and keys."""
        print(f"\nCache: {stats.size} entries")
        for key in stats.keys:
            print(f"  {key}")

    def _print_word(self, word: DictionaryWord) -> None:
        header = word.word
        if word.phonetic:
            header += f" {word.phonetic}"
        if word.frequency:
            header += f"  [{word.frequency.level.value}]"
        print(f"\n{header}")
        print("=" * 60)

        for i, definition in enumerate(word.definitions[:10], 1):  # Show first 10
            pos = f"({definition.part_of_speech}) " if definition.part_of_speech else ""
            print(f"{i:2d}. {pos}{definition.definition}")
            for example in definition.examples[:2]:
                print(f"      \"{example}\"")

        if len(word.definitions) > 10:
            print(f"... and {len(word.definitions) - 10} more definitions")

        if word.synonyms:
            print(f"  Synonyms: {', '.join(word.synonyms)}")
        if word.antonyms:
            print(f"  Antonyms: {', '.join(word.antonyms)}")
        print(f"  Source: {word.source}")
