r"""Retry package implementing class-based composition pattern.

This package provides the attempt loop of wrapped callables, composed
of small strategy objects.

Public API:
    - ErrorMatcher / is_retryable: Allow-list matching of errors
    - RetryDecider: Logic for deciding whether to retry
    - RetryStrategy: Strategy for calculating retry delays
    - CallbackManager: Invocation of the ``log`` callback
    - AttemptState, Success, Failure: Per-invocation state and outcomes
    - RetryExecutor: Synchronous retry executor
    - AsyncRetryExecutor: Asynchronous retry executor
"""

from __future__ import annotations

__all__ = [
    "AsyncRetryExecutor",
    "AttemptState",
    "CallbackManager",
    "Decision",
    "ErrorMatcher",
    "Failure",
    "RetryDecider",
    "RetryExecutor",
    "RetryStrategy",
    "Success",
    "is_retryable",
]

from retryify.retry.decider import Decision, RetryDecider
from retryify.retry.executor import RetryExecutor
from retryify.retry.executor_async import AsyncRetryExecutor
from retryify.retry.manager import CallbackManager
from retryify.retry.matcher import ErrorMatcher, is_retryable
from retryify.retry.state import AttemptState, Failure, Success
from retryify.retry.strategy import RetryStrategy
