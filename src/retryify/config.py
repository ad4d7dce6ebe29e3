r"""Retry configuration dataclass, defaults, and layered resolution.

A configuration is resolved from three layers, narrowest wins:
the built-in defaults below, the defaults given once to a
``retryify`` factory, and the options given when a callable is
wrapped. Fields are merged one by one; a field missing (or ``None``)
in a narrower layer falls back to the wider layer.
"""

from __future__ import annotations

__all__ = [
    "DEFAULT_FACTOR",
    "DEFAULT_RETRIES",
    "DEFAULT_TIMEOUT",
    "OPTION_NAMES",
    "RetryConfig",
    "resolve_config",
]

from dataclasses import dataclass, fields, replace
from typing import TYPE_CHECKING, Any

from retryify.exceptions import ConfigError
from retryify.validation import normalize_errors, validate_retry_params

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping


# Default maximum number of retries
# Total attempts = retries + 1 (initial attempt)
DEFAULT_RETRIES = 3

# Default delay in milliseconds before the first retry
DEFAULT_TIMEOUT = 300

# Default multiplier applied to the delay after each retry
# With the defaults: 1st retry waits 300ms, 2nd waits 600ms, 3rd waits 1200ms
DEFAULT_FACTOR = 2

OPTION_NAMES = ("retries", "timeout", "factor", "errors", "log")


@dataclass(frozen=True)
class RetryConfig:
    """Resolved configuration for one wrapped callable.

    Instances are immutable. ``merge`` returns a new instance, so a
    factory's defaults can be shared by every callable it wraps.

    Args:
        retries: Maximum number of additional attempts after the first
            failure. Must be >= 0.
        timeout: Base delay in milliseconds before the first retry.
            Must be >= 0.
        factor: Multiplier applied to the delay after each retry.
            Must be >= 1.
        errors: Optional allow-list of exception classes and predicates.
            Only failures matching one of them are retried. ``None``
            retries every failure.
        log: Optional callback invoked as ``log(error, attempt)`` before
            each retry.

    Raises:
        ConfigError: If any parameter fails validation.

    Example:
        ```pycon
        >>> from retryify.config import RetryConfig
        >>> config = RetryConfig()
        >>> config.retries, config.timeout, config.factor
        (3, 300, 2)
        >>> merged = config.merge(retries=5)
        >>> merged.retries
        5
        >>> config.retries  # Original unchanged
        3

        ```
    """

    retries: int = DEFAULT_RETRIES
    timeout: float = DEFAULT_TIMEOUT
    factor: float = DEFAULT_FACTOR
    errors: tuple[Any, ...] | None = None
    log: Callable[[Exception, int], Any] | None = None

    def __post_init__(self) -> None:
        errors = normalize_errors(self.errors)
        # frozen dataclass, so bypass __setattr__ for the normalized value
        object.__setattr__(self, "errors", errors)
        validate_retry_params(
            retries=self.retries,
            timeout=self.timeout,
            factor=self.factor,
            errors=errors,
            log=self.log,
        )

    def merge(self, **overrides: Any) -> RetryConfig:
        """Create a new config with the given options overridden.

        Only non-None override values are applied, so a ``None`` in a
        narrower layer keeps the value of this config.

        Args:
            **overrides: Option names and values to override.

        Returns:
            A new ``RetryConfig`` with the overrides applied.

        Raises:
            ConfigError: If an option name is unknown or a value is
                invalid.

        Example:
            ```pycon
            >>> from retryify.config import RetryConfig
            >>> config = RetryConfig(retries=2, timeout=5)
            >>> config.merge(timeout=None, factor=1.5)
            RetryConfig(retries=2, timeout=5, factor=1.5, errors=None, log=None)

            ```
        """
        _check_option_names(overrides)
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        if not filtered_overrides:
            return self
        return replace(self, **filtered_overrides)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary of options.

        Returns:
            Dictionary mapping each option name to its value.

        Example:
            ```pycon
            >>> from retryify.config import RetryConfig
            >>> RetryConfig(retries=1).to_dict()
            {'retries': 1, 'timeout': 300, 'factor': 2, 'errors': None, 'log': None}

            ```
        """
        return {f.name: getattr(self, f.name) for f in fields(self)}


def resolve_config(
    defaults: RetryConfig,
    overrides: Mapping[str, Any] | RetryConfig | None = None,
    **options: Any,
) -> RetryConfig:
    """Resolve the configuration of one layer on top of ``defaults``.

    ``overrides`` is applied first and keyword ``options`` on top of
    it, both field by field.

    Args:
        defaults: The wider layer.
        overrides: Optional mapping of options, or another
            ``RetryConfig`` whose fields all take precedence.
        **options: Extra options applied last.

    Returns:
        The resolved configuration. ``defaults`` is not modified.

    Raises:
        ConfigError: If an option name is unknown or a value is invalid.
        TypeError: If ``overrides`` is neither a mapping nor a
            ``RetryConfig``.

    Example:
        ```pycon
        >>> from retryify.config import RetryConfig, resolve_config
        >>> factory_defaults = RetryConfig(retries=2, timeout=5, factor=1.5)
        >>> resolve_config(factory_defaults, {"retries": 0}).to_dict()
        {'retries': 0, 'timeout': 5, 'factor': 1.5, 'errors': None, 'log': None}

        ```
    """
    if overrides is None:
        layer: dict[str, Any] = {}
    elif isinstance(overrides, RetryConfig):
        layer = overrides.to_dict()
    elif hasattr(overrides, "keys"):
        layer = dict(overrides)
    else:
        msg = f"config must be a mapping or a RetryConfig, got {type(overrides).__qualname__}"
        raise TypeError(msg)
    layer.update(options)
    return defaults.merge(**layer)


def _check_option_names(options: Mapping[str, Any]) -> None:
    unknown = sorted(set(options) - set(OPTION_NAMES))
    if unknown:
        msg = f"unknown retry option(s): {', '.join(unknown)} (expected one of {OPTION_NAMES})"
        raise ConfigError(msg)
