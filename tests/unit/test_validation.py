r"""Unit tests for parameter validation."""

from __future__ import annotations

import pytest

from retryify.exceptions import ConfigError
from retryify.validation import (
    normalize_errors,
    validate_backoff_params,
    validate_retry_params,
)

######################################
#     Tests for normalize_errors     #
######################################


def test_normalize_errors_none() -> None:
    assert normalize_errors(None) is None


def test_normalize_errors_class() -> None:
    assert normalize_errors(OSError) == (OSError,)


def test_normalize_errors_generator() -> None:
    assert normalize_errors(exc for exc in (OSError, KeyError)) == (OSError, KeyError)


def test_normalize_errors_not_iterable() -> None:
    with pytest.raises(ConfigError, match=r"errors must be an exception class"):
        normalize_errors(3.5)


###########################################
#     Tests for validate_retry_params     #
###########################################


def test_validate_retry_params_valid() -> None:
    """Test that valid parameters pass validation."""
    validate_retry_params(retries=3, timeout=300, factor=2)
    validate_retry_params(retries=0, timeout=0, factor=1, errors=(KeyError,), log=print)


def test_validate_retry_params_float_timeout() -> None:
    """Test that fractional timeouts and factors are accepted."""
    validate_retry_params(retries=1, timeout=0.5, factor=1.5)


def test_validate_retry_params_negative_retries() -> None:
    with pytest.raises(ConfigError, match=r"retries must be >= 0, got -1"):
        validate_retry_params(retries=-1, timeout=0, factor=1)


def test_validate_retry_params_negative_timeout() -> None:
    with pytest.raises(ConfigError, match=r"timeout must be >= 0, got -0.1"):
        validate_retry_params(retries=1, timeout=-0.1, factor=1)


def test_validate_retry_params_factor_below_one() -> None:
    with pytest.raises(ConfigError, match=r"factor must be >= 1, got 0.99"):
        validate_retry_params(retries=1, timeout=0, factor=0.99)


def test_validate_retry_params_empty_errors() -> None:
    with pytest.raises(ConfigError, match=r"errors must not be empty"):
        validate_retry_params(retries=1, timeout=0, factor=1, errors=())


def test_validate_retry_params_lambda_discriminator() -> None:
    """Test that any callable is accepted as a discriminator."""
    validate_retry_params(retries=1, timeout=0, factor=1, errors=(lambda exc: True,))


@pytest.mark.parametrize("discriminator", [str, int, object])
def test_validate_retry_params_non_exception_class(discriminator: type) -> None:
    """Test that a class that is not an exception is not taken as a
    predicate."""
    with pytest.raises(ConfigError, match=r"errors entries must be exception classes"):
        validate_retry_params(retries=1, timeout=0, factor=1, errors=(discriminator,))


def test_validate_retry_params_exception_classes_accepted() -> None:
    validate_retry_params(
        retries=1, timeout=0, factor=1, errors=(KeyError, BaseException, KeyboardInterrupt)
    )


def test_validate_retry_params_nan_timeout() -> None:
    with pytest.raises(ConfigError, match=r"timeout must be >= 0, got nan"):
        validate_retry_params(retries=1, timeout=float("nan"), factor=1)


def test_validate_retry_params_nan_factor() -> None:
    with pytest.raises(ConfigError, match=r"factor must be >= 1, got nan"):
        validate_retry_params(retries=1, timeout=0, factor=float("nan"))


@pytest.mark.parametrize("timeout", ["5", None, True, [5]])
def test_validate_retry_params_timeout_not_a_number(timeout: object) -> None:
    with pytest.raises(ConfigError, match=r"timeout must be a real number"):
        validate_retry_params(retries=1, timeout=timeout, factor=1)


@pytest.mark.parametrize("factor", ["2", False, 2j])
def test_validate_retry_params_factor_not_a_number(factor: object) -> None:
    with pytest.raises(ConfigError, match=r"factor must be a real number"):
        validate_retry_params(retries=1, timeout=0, factor=factor)


def test_validate_retry_params_infinite_timeout() -> None:
    """Test that infinity is a valid, if unusual, timeout."""
    validate_retry_params(retries=1, timeout=float("inf"), factor=1)


#############################################
#     Tests for validate_backoff_params     #
#############################################


def test_validate_backoff_params_valid() -> None:
    validate_backoff_params(timeout=0, factor=1)
    validate_backoff_params(timeout=2.5, factor=1.5)


def test_validate_backoff_params_negative_timeout() -> None:
    with pytest.raises(ConfigError, match=r"timeout must be >= 0, got -1"):
        validate_backoff_params(timeout=-1, factor=2)


def test_validate_backoff_params_string_factor() -> None:
    with pytest.raises(ConfigError, match=r"factor must be a real number, got '2'"):
        validate_backoff_params(timeout=0, factor="2")
