r"""Multiplicative (exponential) backoff strategy."""

from __future__ import annotations

__all__ = ["MultiplicativeBackoff", "delay_for"]

from retryify.backoff.base import BaseBackoffStrategy
from retryify.config import DEFAULT_FACTOR, DEFAULT_TIMEOUT
from retryify.validation import validate_backoff_params


def delay_for(attempt: int, timeout: float, factor: float) -> float:
    """Compute the delay that follows a failed attempt.

    The delay before retry ``k`` (1-indexed) is
    ``timeout * factor ** (k - 1)``, and retry ``k`` follows the failed
    attempt with index ``k - 1``. There is no jitter and no cap.

    Args:
        attempt: The index of the attempt that failed (0-indexed).
        timeout: The base delay in milliseconds.
        factor: The multiplier applied after each retry.

    Returns:
        The delay in milliseconds.

    Example:
        ```pycon
        >>> from retryify.backoff import delay_for
        >>> delay_for(0, timeout=100, factor=2)
        100
        >>> delay_for(1, timeout=100, factor=2)
        200
        >>> delay_for(2, timeout=100, factor=2)
        400
        >>> delay_for(5, timeout=100, factor=1)
        100

        ```
    """
    return timeout * factor**attempt


class MultiplicativeBackoff(BaseBackoffStrategy):
    """Multiplicative backoff strategy.

    Calculates delay as: timeout * (factor ** attempt).

    ``factor=1`` gives a constant delay and ``timeout=0`` gives no delay
    at all.

    Args:
        timeout: The base delay in milliseconds (default:
            ``DEFAULT_TIMEOUT``).
        factor: The multiplier applied after each retry (default:
            ``DEFAULT_FACTOR``).

    Raises:
        ConfigError: If ``timeout`` is negative or ``factor`` is below 1.

    Example:
        ```pycon
        >>> from retryify.backoff import MultiplicativeBackoff
        >>> backoff = MultiplicativeBackoff(timeout=5, factor=1.5)
        >>> backoff.calculate(0)  # Before the first retry
        5.0
        >>> backoff.calculate(1)  # Before the second retry
        7.5
        >>> backoff.calculate(2)  # Before the third retry
        11.25

        ```
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT, factor: float = DEFAULT_FACTOR) -> None:
        validate_backoff_params(timeout=timeout, factor=factor)
        self.timeout = timeout
        self.factor = factor

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(timeout={self.timeout}, factor={self.factor})"

    def calculate(self, attempt: int) -> float:
        """Calculate multiplicative backoff delay.

        Args:
            attempt: The index of the attempt that failed (0-indexed).

        Returns:
            The calculated delay in milliseconds:
            timeout * (factor ** attempt).
        """
        return delay_for(attempt, self.timeout, self.factor)
