"""Retry policy for fetch cycles."""

import logging
import time
from typing import Callable, TypeVar

from server_stats_monitor.config import Config
from server_stats_monitor.errors import RetriesExhaustedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetryPolicy:
    """Retry an operation a bounded number of times with a fixed delay."""

    def __init__(
        self,
        max_attempts: int = 3,
        delay: float = 2.0,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize retry policy.

        Args:
            max_attempts: Total number of attempts, at least 1.
            delay: Seconds to wait between attempts.
            sleep: Sleep function, replaceable in tests.
        """
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if delay < 0:
            raise ValueError(f"delay must not be negative, got {delay}")
        self.max_attempts = max_attempts
        self.delay = delay
        self._sleep = sleep

    @classmethod
    def from_config(cls, config: Config) -> "RetryPolicy":
        """Create a policy from the retry section of a configuration."""
        return cls(max_attempts=config.retry.max_attempts, delay=config.retry.delay)

    def run(
        self,
        operation: Callable[[], T],
        retry_on: tuple[type[BaseException], ...] = (Exception,),
    ) -> tuple[T, int]:
        """Call ``operation`` until it succeeds.

        Args:
            operation: Callable taking no arguments.
            retry_on: Exception types that count as a failed attempt. Anything
                else propagates immediately.

        Returns:
            Tuple of (result, attempts used).

        Raises:
            RetriesExhaustedError: If every attempt failed.
        """
        last_error: BaseException | None = None

        for attempt in range(1, self.max_attempts + 1):
            try:
                return operation(), attempt
            except retry_on as e:
                last_error = e
                logger.warning(f"Attempt {attempt}/{self.max_attempts} failed: {e}")

            if attempt < self.max_attempts:
                self._sleep(self.delay)

        raise RetriesExhaustedError(self.max_attempts, last_error) from last_error
