from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def mock_sleep() -> Generator[Mock, None, None]:
    """Patch time.sleep to make tests run faster."""
    with patch("time.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_asleep() -> Generator[Mock, None, None]:
    """Patch asyncio.sleep to make tests run faster."""
    with patch("asyncio.sleep", return_value=None) as mock:
        yield mock


@pytest.fixture
def mock_log() -> Mock:
    """Create a mock ``log`` callback for testing retries.

    Returns:
        A Mock object that records ``(error, attempt)`` calls.

    Example:
        >>> def test_log(mock_log, mock_sleep, always_fail):
        ...     wrapped = retryify(retries=1, log=mock_log).sync(always_fail)
        ...     with pytest.raises(RuntimeError):
        ...         wrapped()
        ...     mock_log.assert_called_once()
    """
    return Mock()


@pytest.fixture
def always_fail() -> Mock:
    """Create a callable that always raises ``RuntimeError('Fail!')``."""
    return Mock(side_effect=RuntimeError("Fail!"))
