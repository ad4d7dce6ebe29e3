from __future__ import annotations

import asyncio
import logging
import sys

import retryify

logger: logging.Logger = logging.getLogger(__name__)


def check_async_wrap() -> None:
    logger.info("Checking asynchronous wrap...")
    attempts = []

    async def flaky(a: int, b: int) -> int:
        attempts.append((a, b))
        if len(attempts) < 2:
            raise ConnectionError("transient")
        return a + b

    wrapped = retryify.retryify(retries=2, timeout=1)(flaky)
    assert asyncio.run(wrapped(1, 2)) == 3
    assert len(attempts) == 2


def check_sync_wrap() -> None:
    logger.info("Checking blocking wrap...")
    wrapped = retryify.retryify().sync({"retries": 0}, lambda a, b, c: a + b + c)
    assert wrapped(1, 2, 3) == 6


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_async_wrap()
        check_sync_wrap()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    main()
