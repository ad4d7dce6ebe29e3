r"""Callback manager for the retry ``log`` hook."""

from __future__ import annotations

__all__ = ["CallbackManager"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable


class CallbackManager:
    """Invokes the user-defined ``log`` callback before each retry.

    Exceptions raised by the callback are not caught: they abort the
    invocation and reach the caller instead of the retryable error.

    Attributes:
        log: Optional callback invoked as ``log(error, attempt)``.
    """

    def __init__(self, log: Callable[[Exception, int], Any] | None = None) -> None:
        """Initialize callback manager.

        Args:
            log: Optional retry callback.
        """
        self.log = log

    def on_retry(self, error: Exception, attempt: int) -> None:
        """Invoke the ``log`` callback, if any.

        Args:
            error: The error that triggered the retry.
            attempt: Index of the attempt that failed (0-indexed).
        """
        if self.log is not None:
            self.log(error, attempt)
