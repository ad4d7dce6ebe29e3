r"""Error discriminators for flaky HTTP services called with httpx.

These helpers build allow-lists for the ``errors`` option so that
transient transport failures and retryable status codes are retried,
while other client errors fail fast.

Example:
    ```pycon
    >>> import httpx
    >>> from retryify import retryify
    >>> from retryify.http import http_errors
    >>> wrap = retryify(retries=3, timeout=200, errors=http_errors())
    >>> @wrap
    ... async def fetch(client: httpx.AsyncClient, url: str) -> httpx.Response:
    ...     response = await client.get(url)
    ...     return response.raise_for_status()
    ...

    ```
"""

from __future__ import annotations

__all__ = ["RETRY_STATUS_CODES", "TRANSIENT_HTTP_ERRORS", "http_errors", "retry_on_status"]

import logging
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Callable

logger: logging.Logger = logging.getLogger(__name__)

# HTTP status codes that should trigger automatic retry
# 429: Too Many Requests - Rate limiting
# 500: Internal Server Error - Temporary server issue
# 502: Bad Gateway - Upstream server error
# 503: Service Unavailable - Server overloaded or down
# 504: Gateway Timeout - Upstream server timeout
RETRY_STATUS_CODES = (429, 500, 502, 503, 504)

# Transport failures that are usually transient
TRANSIENT_HTTP_ERRORS = (
    httpx.TimeoutException,
    httpx.NetworkError,
    httpx.RemoteProtocolError,
)


def retry_on_status(*status_codes: int) -> Callable[[BaseException], bool]:
    """Build a predicate matching ``httpx.HTTPStatusError`` by status code.

    Args:
        *status_codes: The retryable status codes. Defaults to
            ``RETRY_STATUS_CODES`` when none are given.

    Returns:
        A predicate returning ``True`` for an ``httpx.HTTPStatusError``
        whose response status code is one of ``status_codes``.

    Example:
        ```pycon
        >>> import httpx
        >>> from retryify.http import retry_on_status
        >>> request = httpx.Request("GET", "https://example.com")
        >>> error = httpx.HTTPStatusError(
        ...     "unavailable", request=request, response=httpx.Response(503, request=request)
        ... )
        >>> retry_on_status()(error)
        True
        >>> retry_on_status(429)(error)
        False

        ```
    """
    codes = frozenset(status_codes or RETRY_STATUS_CODES)

    def predicate(error: BaseException) -> bool:
        if not isinstance(error, httpx.HTTPStatusError):
            return False
        status_code = error.response.status_code
        if status_code in codes:
            logger.debug(f"Status {status_code} for {error.request.url} is retryable")
            return True
        return False

    predicate.__qualname__ = f"retry_on_status{tuple(sorted(codes))}"
    return predicate


def http_errors(*status_codes: int) -> tuple[type[Exception] | Callable[[BaseException], bool], ...]:
    """Build an allow-list for transient HTTP failures.

    Args:
        *status_codes: The retryable status codes. Defaults to
            ``RETRY_STATUS_CODES`` when none are given.

    Returns:
        The transient transport exception classes followed by a
        status code predicate, ready to pass as ``errors``.

    Example:
        ```pycon
        >>> import httpx
        >>> from retryify.http import http_errors
        >>> from retryify.retry import is_retryable
        >>> is_retryable(httpx.ConnectTimeout("timed out"), http_errors())
        True
        >>> is_retryable(httpx.InvalidURL("bad url"), http_errors())
        False

        ```
    """
    return (*TRANSIENT_HTTP_ERRORS, retry_on_status(*status_codes))
