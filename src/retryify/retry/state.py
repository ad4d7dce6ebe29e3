r"""Per-invocation retry state and attempt outcomes.

A raised exception and a rejected awaitable are both recorded as a
``Failure`` so the retry decision does not depend on the calling
convention of the wrapped callable.
"""

from __future__ import annotations

__all__ = ["AttemptState", "Failure", "Success"]

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class Success:
    """Outcome of an attempt that returned a value.

    Attributes:
        value: The value returned (or resolved) by the wrapped callable.
    """

    value: Any


@dataclass(frozen=True)
class Failure:
    """Outcome of an attempt that raised.

    Attributes:
        error: The exception raised by the wrapped callable or by the
            awaitable it returned.
    """

    error: Exception


@dataclass
class AttemptState:
    """Mutable state of one call of a wrapped callable.

    A new instance is created for every call, so concurrent calls of
    the same wrapped callable never share it.

    Attributes:
        remaining: Retry budget left.
        attempt: Index of the current attempt (0-indexed).
        last_error: The most recent failure, if any.
        delay: The most recent backoff delay in milliseconds.
    """

    remaining: int
    attempt: int = 0
    last_error: Exception | None = None
    delay: float = 0.0

    def advance(self, delay: float) -> None:
        """Consume one retry and move to the next attempt.

        Args:
            delay: The backoff delay in milliseconds preceding the next
                attempt.
        """
        self.delay = delay
        self.remaining -= 1
        self.attempt += 1
