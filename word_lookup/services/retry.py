"""Bounded retry policy with exponential backoff for provider calls."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TypeVar

from tenacity import AsyncRetrying, RetryCallState, retry_if_exception, stop_after_attempt

from word_lookup.exceptions import DictionaryError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def exponential_backoff(unit_seconds: float = 1.0) -> Callable[[int], float]:
    """Backoff of ``2**attempt`` units after the given (1-based) attempt."""

    def backoff(attempt: int) -> float:
        return (2**attempt) * unit_seconds

    return backoff


def is_retriable_error(error: BaseException) -> bool:
    """Retry transient DictionaryErrors; everything else is definitive."""
    return isinstance(error, DictionaryError) and error.retriable


@dataclass(frozen=True)
class RetryPolicy:
    """How many times to attempt a call and how long to wait in between.

    ``max_attempts`` counts every attempt, including the first one. The
    wait after attempt ``n`` is ``backoff(n)``; no wait follows the last
    attempt.
    """

    max_attempts: int = 2
    backoff: Callable[[int], float] = field(default_factory=exponential_backoff)
    is_retriable: Callable[[BaseException], bool] = is_retriable_error

    def _wait(self, retry_state: RetryCallState) -> float:
        return self.backoff(retry_state.attempt_number)

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
        on_retry: Callable[[int, BaseException], None] | None = None,
    ) -> T:
        """Run an async operation under this policy.

        Args:
            operation: Zero-argument coroutine factory, called once per attempt
            sleep: Awaitable used for backoff waits
            on_retry: Optional callback called on each failed attempt
                that will be retried (attempt_num, error)

        Returns:
            The first successful result

        Raises:
            Exception: The non-retriable error, or the last error once
                attempts are exhausted
        """
        attempts = max(self.max_attempts, 1)

        def before_sleep(retry_state: RetryCallState) -> None:
            error = retry_state.outcome.exception()
            delay = retry_state.next_action.sleep if retry_state.next_action else 0.0
            logger.warning(
                f"Attempt {retry_state.attempt_number}/{attempts} failed: {error}; "
                f"retrying in {delay:.1f}s"
            )
            if on_retry:
                on_retry(retry_state.attempt_number, error)

        retrying = AsyncRetrying(
            stop=stop_after_attempt(attempts),
            wait=self._wait,
            retry=retry_if_exception(self.is_retriable),
            sleep=sleep,
            before_sleep=before_sleep,
            reraise=True,
        )
        return await retrying(operation)
