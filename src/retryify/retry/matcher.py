r"""Error matching against an allow-list of discriminators.

A discriminator is either an exception class, matched with
``isinstance`` so subclasses match too, or a predicate that receives
the error and returns a truthy value when it should be retried.
"""

from __future__ import annotations

__all__ = ["ErrorMatcher", "is_retryable"]

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Iterable


def _matches(error: BaseException, discriminator: Any) -> bool:
    if isinstance(discriminator, type) and issubclass(discriminator, BaseException):
        return isinstance(error, discriminator)
    return bool(discriminator(error))


def is_retryable(error: BaseException, allow_list: Iterable[Any] | None = None) -> bool:
    """Return whether an error may be retried.

    Args:
        error: The error raised by the wrapped callable.
        allow_list: Optional exception classes and predicates. ``None``
            means every error is retryable.

    Returns:
        ``True`` if no allow-list is given or if at least one
        discriminator matches the error.

    Example:
        ```pycon
        >>> from retryify.retry import is_retryable
        >>> is_retryable(KeyError("x"))
        True
        >>> is_retryable(KeyError("x"), [LookupError])
        True
        >>> is_retryable(KeyError("x"), [ValueError, lambda exc: "y" in str(exc)])
        False

        ```
    """
    if allow_list is None:
        return True
    return any(_matches(error, discriminator) for discriminator in allow_list)


class ErrorMatcher:
    """Decides whether an error is retryable.

    Args:
        errors: Optional allow-list of exception classes and predicates.

    Example:
        ```pycon
        >>> from retryify.retry import ErrorMatcher
        >>> matcher = ErrorMatcher((TimeoutError, ConnectionError))
        >>> matcher.matches(ConnectionResetError())
        True
        >>> matcher.matches(ValueError())
        False
        >>> ErrorMatcher().matches(ValueError())
        True

        ```
    """

    def __init__(self, errors: tuple[Any, ...] | None = None) -> None:
        self.errors = errors

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(errors={self.errors!r})"

    def matches(self, error: BaseException) -> bool:
        """Return whether ``error`` matches the allow-list.

        Args:
            error: The error raised by the wrapped callable.

        Returns:
            ``True`` if the error may be retried.
        """
        return is_retryable(error, self.errors)
