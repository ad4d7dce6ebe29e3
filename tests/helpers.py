r"""Shared helpers for retryify tests."""

from __future__ import annotations

import asyncio
from typing import Any


class FlakyCallable:
    """Callable failing a fixed number of times before returning a value.

    Args:
        failures: Number of calls that raise before the first success.
        result: Value returned once the failures are used up.
        error_factory: Callable building the error raised on failure.
        delay: When not ``None``, calls return a coroutine sleeping
            ``delay`` seconds before raising or returning.

    Attributes:
        calls: Arguments received by every call, in order.
    """

    def __init__(
        self,
        failures: int,
        result: Any = None,
        error_factory: Any = None,
        delay: float | None = None,
    ) -> None:
        self.failures = failures
        self.result = result
        self.error_factory = error_factory or (lambda: RuntimeError("Oh no! The call failed :0"))
        self.delay = delay
        self.calls: list[tuple[tuple[Any, ...], dict[str, Any]]] = []

    @property
    def call_count(self) -> int:
        return len(self.calls)

    def _outcome(self) -> Any:
        if self.failures > 0:
            self.failures -= 1
            raise self.error_factory()
        return self.result

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        self.calls.append((args, kwargs))
        if self.delay is None:
            return self._outcome()
        return self._delayed()

    async def _delayed(self) -> Any:
        await asyncio.sleep(self.delay)
        return self._outcome()
