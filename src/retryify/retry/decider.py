r"""Retry decision logic for failed attempts.

This module provides the RetryDecider class that classifies a failed
attempt as retryable, exhausted, or non-retryable.
"""

from __future__ import annotations

__all__ = ["Decision", "RetryDecider"]

import enum
import logging
from typing import TYPE_CHECKING, Any

from retryify.retry.matcher import ErrorMatcher

if TYPE_CHECKING:
    from retryify.retry.state import AttemptState, Failure

logger: logging.Logger = logging.getLogger(__name__)


class Decision(enum.Enum):
    """What happens after a failed attempt."""

    RETRY = "retry"
    EXHAUSTED = "exhausted"
    NON_RETRYABLE = "non_retryable"


class RetryDecider:
    """Decides whether a failed attempt should be retried."""

    def __init__(self, errors: tuple[Any, ...] | None = None) -> None:
        """Initialize retry decider.

        Args:
            errors: Optional allow-list of exception classes and
                predicates.
        """
        self.matcher = ErrorMatcher(errors)

    def decide(self, failure: Failure, state: AttemptState) -> Decision:
        """Classify a failed attempt.

        The allow-list is checked before the budget, so a non-matching
        error stops the loop even when retries remain.

        Args:
            failure: The failed outcome.
            state: The state of the invocation.

        Returns:
            The decision for this failure.
        """
        error = failure.error
        if not self.matcher.matches(error):
            logger.debug(
                f"{type(error).__name__} on attempt {state.attempt} does not match "
                "the retryable errors"
            )
            return Decision.NON_RETRYABLE
        if state.remaining <= 0:
            logger.debug(
                f"{type(error).__name__} on attempt {state.attempt}: retries exhausted"
            )
            return Decision.EXHAUSTED
        return Decision.RETRY
