# SPDX-License-Identifier: MIT
# Copyright (c) 2025 cloud-error-reporting contributors

"""Retry helper for delivering reports over unreliable networks."""

import logging
import time
from typing import Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T')


def retry_with_backoff(
    func: Callable[[], T],
    max_attempts: int = 4,
    backoff_seconds: float = 1.0,
    max_backoff_seconds: float = 30.0,
    should_retry: Optional[Callable[[Exception], bool]] = None,
    on_retry: Optional[Callable[[Exception, int], None]] = None,
) -> T:
    """Execute a function with exponential backoff retry logic.

    Args:
        func: Function to execute
        max_attempts: Maximum number of attempts, including the first
        backoff_seconds: Base backoff time in seconds
        max_backoff_seconds: Maximum backoff time (cap)
        should_retry: Predicate deciding whether an exception is transient.
            Exceptions it rejects are raised immediately. Defaults to
            retrying every exception.
        on_retry: Callback called before each retry (exception, attempt_number)

    Returns:
        Result of successful function execution

    Raises:
        Exception: The last exception if all attempts fail, or the first
            exception that should_retry rejects
    """
    attempt = 0
    while True:
        try:
            return func()
        except Exception as e:
            attempt += 1
            if should_retry is not None and not should_retry(e):
                raise
            if attempt >= max_attempts:
                logger.error(f"All {max_attempts} delivery attempts exhausted")
                raise

            backoff = min(backoff_seconds * (2 ** (attempt - 1)), max_backoff_seconds)
            logger.info(f"Retry attempt {attempt}/{max_attempts}, waiting {backoff}s")

            if on_retry:
                on_retry(e, attempt)

            time.sleep(backoff)
