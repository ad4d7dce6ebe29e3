r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy determines how long to wait before retrying a
    failed call based on the index of the attempt that failed.
    """

    @abstractmethod
    def calculate(self, attempt: int) -> float:
        """Calculate the backoff delay after a failed attempt.

        Args:
            attempt: The index of the attempt that failed (0-indexed).
                For example, attempt=0 is followed by the first retry,
                attempt=1 by the second retry, etc.

        Returns:
            The delay in milliseconds before the next attempt.
        """
