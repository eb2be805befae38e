"""Presenter protocol for output abstraction."""

from typing import Protocol

from word_lookup.models import CacheStats, WordLookupResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    lookup logic to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_success(self, message: str) -> None:
        """Display a success message.

        Args:
            message: The success message to display
        """
        ...

    def show_warning(self, message: str) -> None:
        """Display a warning message.

        Args:
            message: The warning message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_lookup_result(self, result: WordLookupResult) -> None:
        """Display the outcome of looking up one word.

        Args:
            result: The word (or error) to display
        """
        ...

    def show_cache_stats(self, stats: CacheStats) -> None:
        """Display cache contents.

        Args:
            stats: Snapshot of the cache
        """
        ...
