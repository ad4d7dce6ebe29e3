r"""Asynchronous retry executor.

This module provides the AsyncRetryExecutor class that drives the
attempt loop of a wrapped callable on asyncio.
"""

from __future__ import annotations

__all__ = ["AsyncRetryExecutor"]

import asyncio
import inspect
import logging
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


class AsyncRetryExecutor:
    """Executes a callable with automatic retry logic on asyncio.

    The target may be a plain function or return an awaitable (for
    example a coroutine function). A raised exception and a rejected
    awaitable are handled the same way.

    The executor orchestrates the following components:
    - RetryStrategy: Calculates backoff delays between retries
    - RetryDecider: Determines whether a failure is retried
    - CallbackManager: Invokes the user-defined ``log`` callback

    Attributes:
        config: Resolved retry configuration.
        strategy: Strategy for calculating retry delays.
        decider: Logic for deciding whether to retry.
        callbacks: Manager for invoking the ``log`` callback.

    Example:
        ```pycon
        >>> import asyncio
        >>> from retryify.config import RetryConfig
        >>> from retryify.retry import AsyncRetryExecutor
        >>> calls = []
        >>> def flaky(a, b):
        ...     calls.append(a)
        ...     if len(calls) < 2:
        ...         raise ConnectionError("boom")
        ...     return a + b
        ...
        >>> executor = AsyncRetryExecutor(RetryConfig(retries=2, timeout=0))
        >>> asyncio.run(executor.execute(flaky, (1, 2)))
        3
        >>> len(calls)
        2

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        """Initialize async retry executor.

        Args:
            config: Resolved retry configuration.
        """
        self.config = config
        self.strategy: RetryStrategy = RetryStrategy(
            MultiplicativeBackoff(timeout=config.timeout, factor=config.factor)
        )
        self.decider: RetryDecider = RetryDecider(config.errors)
        self.callbacks: CallbackManager = CallbackManager(config.log)

    async def attempt(
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
        """
        try:
            result = call_target(fn, receiver, args, kwargs)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:  # noqa: BLE001
            return Failure(exc)
        return Success(result)

    async def execute(
        self,
        fn: Callable[..., Any],
        args: tuple[Any, ...] = (),
        kwargs: Mapping[str, Any] | None = None,
        receiver: Any = UNBOUND,
    ) -> Any:
        """Call ``fn`` until it succeeds or the retries run out.

        Attempts the call up to ``retries + 1`` times, sleeping
        ``timeout * factor ** attempt`` milliseconds after each failed
        attempt. The receiver and the arguments are the same objects on
        every attempt.

        Note:
            This method uses asyncio.sleep() for backoff delays, allowing
            other tasks to run during retry waits. A zero delay still
            yields to the event loop.

        Args:
            fn: The wrapped callable.
            args: The positional arguments.
            kwargs: The keyword arguments.
            receiver: The bound receiver, prepended to ``args`` on every
                attempt, or ``UNBOUND``.

        Returns:
            The value returned (or resolved) by the first successful
            attempt.

        Raises:
            Exception: The error of the last attempt, unchanged, when
                retries are exhausted or the error is not retryable.
                Errors raised by the ``log`` callback propagate as is.
        """
        if kwargs is None:
            kwargs = {}
        state = AttemptState(remaining=self.config.retries)

        while True:
            outcome = await self.attempt(fn, args, kwargs, receiver)
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
            await asyncio.sleep(self.strategy.to_seconds(delay))
            state.advance(delay)
