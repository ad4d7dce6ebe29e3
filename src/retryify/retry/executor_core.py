r"""Shared core logic for retry executors.

This module provides helpers used by both the synchronous and the
asynchronous retry executors: calling the target with an explicit
receiver, and building the components an executor is made of.
"""

from __future__ import annotations

__all__ = ["UNBOUND", "call_target", "raise_terminal"]

import logging
from typing import TYPE_CHECKING, Any, NoReturn

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping

    from retryify.retry.decider import Decision
    from retryify.retry.state import AttemptState, Failure

logger: logging.Logger = logging.getLogger(__name__)


class _Unbound:
    __slots__ = ()

    def __repr__(self) -> str:
        return "UNBOUND"


# Marker for a call without receiver, since ``None`` is a valid receiver
UNBOUND: Any = _Unbound()


def call_target(
    fn: Callable[..., Any],
    receiver: Any,
    args: tuple[Any, ...],
    kwargs: Mapping[str, Any],
) -> Any:
    """Call the wrapped callable once.

    Args:
        fn: The wrapped callable.
        receiver: The bound receiver, prepended to the positional
            arguments, or ``UNBOUND``.
        args: The positional arguments.
        kwargs: The keyword arguments.

    Returns:
        Whatever ``fn`` returns, possibly an awaitable.

    Example:
        ```pycon
        >>> from retryify.retry.executor_core import UNBOUND, call_target
        >>> call_target(lambda a, b: a + b, UNBOUND, (1, 2), {})
        3
        >>> call_target(lambda self, a: (self, a), "obj", (1,), {})
        ('obj', 1)

        ```
    """
    if receiver is UNBOUND:
        return fn(*args, **kwargs)
    return fn(receiver, *args, **kwargs)


def raise_terminal(failure: Failure, state: AttemptState, decision: Decision) -> NoReturn:
    """Re-raise the error of a terminal failure unchanged.

    Args:
        failure: The failed outcome.
        state: The state of the invocation.
        decision: Why the invocation stops.

    Raises:
        Exception: ``failure.error``, the same object the wrapped
            callable raised.
    """
    logger.debug(
        f"Giving up after {state.attempt + 1} attempt(s) ({decision.value}): "
        f"{type(failure.error).__name__}: {failure.error}"
    )
    raise failure.error
