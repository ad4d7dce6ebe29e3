r"""Retry strategy for calculating backoff delays.

This module provides the RetryStrategy class that turns the backoff
delay of a failed attempt into the number of seconds to sleep.
"""

from __future__ import annotations

__all__ = ["RetryStrategy"]

import logging

from retryify.backoff import BaseBackoffStrategy, MultiplicativeBackoff

logger: logging.Logger = logging.getLogger(__name__)


class RetryStrategy:
    """Strategy for calculating retry delays.

    Args:
        backoff_strategy: Backoff strategy instance. Defaults to
            ``MultiplicativeBackoff()``.

    Attributes:
        backoff_strategy: Backoff strategy instance.
    """

    def __init__(self, backoff_strategy: BaseBackoffStrategy | None = None) -> None:
        self.backoff_strategy: BaseBackoffStrategy = (
            backoff_strategy if backoff_strategy is not None else MultiplicativeBackoff()
        )

    def calculate_delay(self, attempt: int) -> float:
        """Calculate the delay in milliseconds after a failed attempt.

        Args:
            attempt: Index of the attempt that failed (0-indexed).

        Returns:
            Delay in milliseconds.
        """
        delay = self.backoff_strategy.calculate(attempt)
        logger.debug(f"Waiting {delay:.2f}ms before retry {attempt + 1}")
        return delay

    @staticmethod
    def to_seconds(delay: float) -> float:
        """Convert a delay in milliseconds to seconds for sleeping.

        Args:
            delay: Delay in milliseconds.

        Returns:
            Delay in seconds.

        Example:
            ```pycon
            >>> from retryify.retry import RetryStrategy
            >>> RetryStrategy.to_seconds(250)
            0.25

            ```
        """
        return delay / 1000
