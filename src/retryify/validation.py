r"""Parameter validation utilities for retry configuration.

This module provides validation functions for retry parameters to
ensure they meet the required constraints before a wrapped callable is
built.
"""

from __future__ import annotations

__all__ = ["normalize_errors", "validate_backoff_params", "validate_retry_params"]

import numbers
from typing import TYPE_CHECKING, Any

from retryify.exceptions import ConfigError

if TYPE_CHECKING:
    from collections.abc import Callable


def normalize_errors(errors: Any) -> tuple[Any, ...] | None:
    """Normalize the ``errors`` option into a tuple of discriminators.

    A single exception class is accepted as a shorthand for a
    one-element allow-list.

    Args:
        errors: ``None``, an exception class, or an iterable of
            exception classes and predicates.

    Returns:
        ``None`` if no allow-list is configured, otherwise a tuple.

    Raises:
        ConfigError: If ``errors`` is not iterable.

    Example:
        ```pycon
        >>> from retryify.validation import normalize_errors
        >>> normalize_errors(None)
        >>> normalize_errors(KeyError)
        (<class 'KeyError'>,)
        >>> normalize_errors([KeyError, ValueError])
        (<class 'KeyError'>, <class 'ValueError'>)

        ```
    """
    if errors is None:
        return None
    if isinstance(errors, type):
        return (errors,)
    try:
        return tuple(errors)
    except TypeError:
        msg = f"errors must be an exception class or an iterable of discriminators, got {errors!r}"
        raise ConfigError(msg) from None


def validate_backoff_params(timeout: float, factor: float) -> None:
    """Validate backoff parameters.

    Args:
        timeout: Base delay in milliseconds. Must be a real number >= 0.
        factor: Delay multiplier. Must be a real number >= 1.

    Raises:
        ConfigError: If a parameter is not a real number, is NaN, or is
            out of range.

    Example:
        ```pycon
        >>> from retryify.validation import validate_backoff_params
        >>> validate_backoff_params(timeout=0, factor=1.5)
        >>> validate_backoff_params(timeout=float("nan"), factor=2)
        Traceback (most recent call last):
        ...
        retryify.exceptions.ConfigError: timeout must be >= 0, got nan

        ```
    """
    for name, value in (("timeout", timeout), ("factor", factor)):
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            msg = f"{name} must be a real number, got {value!r}"
            raise ConfigError(msg)
    # NaN fails both comparisons
    if not timeout >= 0:
        msg = f"timeout must be >= 0, got {timeout}"
        raise ConfigError(msg)
    if not factor >= 1:
        msg = f"factor must be >= 1, got {factor}"
        raise ConfigError(msg)


def validate_retry_params(
    retries: int,
    timeout: float,
    factor: float,
    errors: tuple[Any, ...] | None = None,
    log: Callable | None = None,
) -> None:
    """Validate retry parameters.

    Args:
        retries: Maximum number of retries after the first failure.
            Must be an integer >= 0. A value of 0 means the callable
            runs once.
        timeout: Base delay in milliseconds before the first retry.
            Must be >= 0.
        factor: Multiplier applied to the delay after each retry.
            Must be >= 1.
        errors: Optional allow-list. Must be non-empty if provided, and
            every entry must be an exception class or a predicate.
            Classes that are not exceptions are rejected.
        log: Optional retry callback. Must be callable if provided.

    Raises:
        ConfigError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from retryify.validation import validate_retry_params
        >>> validate_retry_params(retries=3, timeout=300, factor=2)
        >>> validate_retry_params(retries=0, timeout=0, factor=1, errors=(KeyError,))
        >>> validate_retry_params(retries=-1, timeout=0, factor=1)  # doctest: +SKIP

        ```
    """
    if isinstance(retries, bool) or not isinstance(retries, int):
        msg = f"retries must be an integer, got {retries!r}"
        raise ConfigError(msg)
    if retries < 0:
        msg = f"retries must be >= 0, got {retries}"
        raise ConfigError(msg)
    validate_backoff_params(timeout=timeout, factor=factor)
    if errors is not None:
        if not errors:
            msg = "errors must not be empty, use None to retry on every error"
            raise ConfigError(msg)
        for discriminator in errors:
            if not callable(discriminator) or (
                isinstance(discriminator, type) and not issubclass(discriminator, BaseException)
            ):
                msg = (
                    "errors entries must be exception classes or predicates, "
                    f"got {discriminator!r}"
                )
                raise ConfigError(msg)
    if log is not None and not callable(log):
        msg = f"log must be callable, got {log!r}"
        raise ConfigError(msg)
