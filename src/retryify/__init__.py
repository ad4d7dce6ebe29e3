r"""retryify - Transparent retries for synchronous and asynchronous callables.

This package wraps a callable so that calling it retries on failure,
without restructuring the call sites. It simplifies handling transient
failures such as flaky I/O or intermittent services.

Key Features:
    - Retry budget, base delay and multiplicative backoff factor
    - Layered configuration: built-in defaults, factory defaults, per-call options
    - Selective retries with an allow-list of exception classes and predicates
    - Uniform handling of raised exceptions and rejected awaitables
    - Receiver and arguments preserved on every attempt, methods supported
    - ``log`` callback invoked before each retry
    - Ready-made allow-lists for flaky HTTP services called with httpx

Example:
    ```pycon
    >>> import asyncio
    >>> from retryify import retryify
    >>> wrap = retryify(retries=2, timeout=5, factor=1.5)
    >>> attempts = []
    >>> @wrap
    ... def add(a, b, c):
    ...     attempts.append((a, b, c))
    ...     if len(attempts) < 3:
    ...         raise ConnectionError("Fail!")
    ...     return a + b + c
    ...
    >>> asyncio.run(add(1, 2, 3))
    6
    >>> len(attempts)
    3

    ```
"""

from __future__ import annotations

__all__ = [
    "ConfigError",
    "RetryConfig",
    "Retryify",
    "RetryifiedCallable",
    "__version__",
    "retryify",
]

from importlib.metadata import PackageNotFoundError, version

from retryify.config import RetryConfig
from retryify.exceptions import ConfigError
from retryify.factory import Retryify, RetryifiedCallable, retryify

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
