r"""Synchronous retry executor.

This module provides the RetryExecutor class that drives the attempt
loop of a wrapped callable in the calling thread, blocking during
backoff.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import inspect
import logging
import time
from typing import TYPE_CHECKING, Any

from retryify.backoff import MultiplicativeBackoff
from retryify.retry.decider import Decision, RetryDecider
from retryify.retry.executor_core import UNBOUND, call_target, raise_terminal
from retryify.retry.manager import CallbackManager
from retryify.retry.state import AttemptState, Failure, Success
from retryify.retry.strategy import RetryStrategy

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from retryify.config import RetryConfig

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes a synchronous callable with automatic retry logic.

    This is the blocking counterpart of ``AsyncRetryExecutor`` for
    programs without an event loop. The target must not return an
    awaitable.

    Attributes:
        config: Resolved retry configuration.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking the ``log`` callback.

    Example:
        ```pycon
        >>> from retryify.config import RetryConfig
        >>> from retryify.retry import RetryExecutor
        >>> executor = RetryExecutor(RetryConfig(retries=0))
        >>> executor.execute(max, (1, 5, 3))
        5

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        """Initialize retry executor.

        Args:
            config: Resolved retry configuration.
        """
        self.config = config
        self.strategy: RetryStrategy = RetryStrategy(
            MultiplicativeBackoff(timeout=config.timeout, factor=config.factor)
        )
        self.decider: RetryDecider = RetryDecider(config.errors)
        self.callbacks: CallbackManager = CallbackManager(config.log)

    def attempt(
        self,
        fn: Callable[..., Any],
        args: tuple[Any, ...],
        kwargs: Mapping[str, Any],
        receiver: Any = UNBOUND,
    ) -> Success | Failure:
        """Run one attempt and capture its outcome.

        Args:
            fn: The wrapped callable.
            args: The positional arguments.
            kwargs: The keyword arguments.
            receiver: The bound receiver, or ``UNBOUND``.

        Returns:
            ``Success`` with the value, or ``Failure`` with the error.

        Raises:
            TypeError: If ``fn`` returns an awaitable.
        """
        try:
            result = call_target(fn, receiver, args, kwargs)
        except Exception as exc:  # noqa: BLE001
            return Failure(exc)
        if inspect.isawaitable(result):
            if inspect.iscoroutine(result):
                result.close()
            msg = (
                f"{getattr(fn, '__qualname__', fn)!r} returned an awaitable, "
                "wrap it with the asynchronous variant instead"
            )
            raise TypeError(msg)
        return Success(result)

    def execute(
        self,
        fn: Callable[..., Any],
        args: tuple[Any, ...] = (),
        kwargs: Mapping[str, Any] | None = None,
        receiver: Any = UNBOUND,
    ) -> Any:
        """Call ``fn`` until it succeeds or the retries run out.

        Args:
            fn: The wrapped callable.
            args: The positional arguments.
            kwargs: The keyword arguments.
            receiver: The bound receiver, prepended to ``args`` on every
                attempt, or ``UNBOUND``.

        Returns:
            The value returned by the first successful attempt.

        Raises:
            Exception: The error of the last attempt, unchanged, when
                retries are exhausted or the error is not retryable.
                Errors raised by the ``log`` callback propagate as is.
            TypeError: If ``fn`` returns an awaitable.
        """
        if kwargs is None:
            kwargs = {}
        state = AttemptState(remaining=self.config.retries)

        while True:
            outcome = self.attempt(fn, args, kwargs, receiver)
            if isinstance(outcome, Success):
                if state.attempt:
                    logger.debug(f"Call succeeded on attempt {state.attempt + 1}")
                return outcome.value

            state.last_error = outcome.error
            decision = self.decider.decide(outcome, state)
            if decision is not Decision.RETRY:
                raise_terminal(outcome, state, decision)

            logger.debug(
                f"Attempt {state.attempt + 1} failed with {type(outcome.error).__name__}, "
                f"{state.remaining} retries left"
            )
            self.callbacks.on_retry(outcome.error, state.attempt)
            delay = self.strategy.calculate_delay(state.attempt)
            time.sleep(self.strategy.to_seconds(delay))
            state.advance(delay)
