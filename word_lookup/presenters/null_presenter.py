"""Null presenter for testing (no output)."""

from word_lookup.models import CacheStats, WordLookupResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_success(self, message: str) -> None:
        """Display a success message (no-op)."""
        pass

    def show_warning(self, message: str) -> None:
        """Display a warning message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_lookup_result(self, result: WordLookupResult) -> None:
        """Display one looked-up word (no-op)."""
        pass

    def show_cache_stats(self, stats: CacheStats) -> None:
        """Display cache contents (no-op)."""
        pass
