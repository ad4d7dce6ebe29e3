r"""Exceptions raised by retryify itself.

Errors raised by the wrapped callables are never wrapped or replaced;
this module only defines the errors the library raises on its own
behalf.
"""

from __future__ import annotations

__all__ = ["ConfigError"]


class ConfigError(ValueError):
    """Raised when a retry configuration is structurally invalid.

    It subclasses ``ValueError`` so callers that already guard against
    bad parameters with ``except ValueError`` keep working.

    Example:
        ```pycon
        >>> from retryify import retryify
        >>> from retryify.exceptions import ConfigError
        >>> try:
        ...     retryify(retries=-1)
        ... except ConfigError as exc:
        ...     print(exc)
        ...
        retries must be >= 0, got -1

        ```
    """
