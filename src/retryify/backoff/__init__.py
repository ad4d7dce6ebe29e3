r"""Backoff strategies for retry delays.

This package provides the deterministic multiplicative backoff used
between attempts of a wrapped callable.
"""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy", "MultiplicativeBackoff", "delay_for"]

from retryify.backoff.base import BaseBackoffStrategy
from retryify.backoff.multiplicative import MultiplicativeBackoff, delay_for
