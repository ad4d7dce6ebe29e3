r"""Unit tests for attempt state and outcomes."""

from __future__ import annotations

import pytest

from retryify.retry import AttemptState, Failure, Success


def test_attempt_state_initial() -> None:
    state = AttemptState(remaining=3)
    assert state.attempt == 0
    assert state.remaining == 3
    assert state.last_error is None
    assert state.delay == 0.0


def test_attempt_state_advance() -> None:
    state = AttemptState(remaining=2)
    state.advance(5.0)
    assert (state.attempt, state.remaining, state.delay) == (1, 1, 5.0)
    state.advance(7.5)
    assert (state.attempt, state.remaining, state.delay) == (2, 0, 7.5)


def test_success_holds_value() -> None:
    assert Success(6).value == 6


def test_failure_holds_error() -> None:
    error = RuntimeError("Fail!")
    assert Failure(error).error is error


def test_outcomes_are_frozen() -> None:
    with pytest.raises(AttributeError):
        Success(1).value = 2  # type: ignore[misc]
