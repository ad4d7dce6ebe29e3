r"""Unit tests for error matching."""

from __future__ import annotations

from unittest.mock import Mock

import pytest

from retryify.retry import ErrorMatcher, is_retryable


class FooError(Exception):
    pass


class BarError(Exception):
    pass


class BazError(BarError):
    pass


##################################
#     Tests for is_retryable     #
##################################


def test_is_retryable_without_allow_list() -> None:
    """Test that every error is retryable without an allow-list."""
    assert is_retryable(FooError())
    assert is_retryable(RuntimeError("boom"), None)


def test_is_retryable_class_match() -> None:
    assert is_retryable(BarError(), [FooError, BarError])


def test_is_retryable_subclass_match() -> None:
    """Test that subclasses of a listed class match."""
    assert is_retryable(BazError(), [BarError])


def test_is_retryable_no_match() -> None:
    assert not is_retryable(FooError(), [BarError, BazError])


def test_is_retryable_predicate() -> None:
    """Test that predicates receive the error."""
    predicate = Mock(return_value=True)
    error = FooError("transient")
    assert is_retryable(error, [predicate])
    predicate.assert_called_once_with(error)


def test_is_retryable_predicate_falsy() -> None:
    assert not is_retryable(FooError(), [lambda exc: None])


def test_is_retryable_mixed_order_irrelevant() -> None:
    """Test that the order of discriminators does not change the result."""
    discriminators = [BarError, lambda exc: "retry" in str(exc)]
    error = FooError("please retry")
    assert is_retryable(error, discriminators)
    assert is_retryable(error, list(reversed(discriminators)))


def test_is_retryable_predicate_error_propagates() -> None:
    """Test that errors raised by a predicate are not swallowed."""

    def broken(exc: BaseException) -> bool:
        raise LookupError("broken predicate")

    with pytest.raises(LookupError, match=r"broken predicate"):
        is_retryable(FooError(), [broken])


def test_is_retryable_does_not_touch_error() -> None:
    """Test that a non-matching error is left as it was."""
    error = FooError("This is a FooError")
    error.custom = 42
    assert not is_retryable(error, [BarError])
    assert str(error) == "This is a FooError"
    assert error.custom == 42


##################################
#     Tests for ErrorMatcher     #
##################################


def test_error_matcher_default() -> None:
    matcher = ErrorMatcher()
    assert matcher.errors is None
    assert matcher.matches(FooError())


def test_error_matcher_allow_list() -> None:
    matcher = ErrorMatcher((BarError,))
    assert matcher.matches(BazError())
    assert not matcher.matches(FooError())


def test_error_matcher_repr() -> None:
    assert repr(ErrorMatcher((KeyError,))) == "ErrorMatcher(errors=(<class 'KeyError'>,))"
