"""
Bounded retry with a fixed delay for fallible network operations.

The executor knows nothing about what it runs: callers hand it a
zero-argument callable (build one per call with :func:`functools.partial`
rather than closing over loop variables) and a :class:`RetryPolicy`.

Example:
    >>> from functools import partial
    >>> page = execute_with_retry(partial(client.fetch_page, 3), policy, "page fetch (page 3)")  # doctest: +SKIP
"""

import logging
import time
from typing import TYPE_CHECKING, Callable, Tuple, Type, TypeVar

import httpx

from .error_handling import RetryExhaustedError, describe_failure

if TYPE_CHECKING:
    from ..models.context import RetryPolicy

T = TypeVar("T")

# Failures worth another attempt: timeouts, connection resets, HTTP status
# errors, disk errors while writing, and unparseable page bodies
TRANSIENT_ERRORS: Tuple[Type[BaseException], ...] = (httpx.HTTPError, OSError, ValueError)


def execute_with_retry(
    operation: Callable[[], T],
    policy: "RetryPolicy",
    context: str,
    *,
    retry_on: Tuple[Type[BaseException], ...] = TRANSIENT_ERRORS,
) -> T:
    """
    Run ``operation`` until it succeeds or the policy is exhausted.

    The first attempt always runs. After a failure the executor sleeps
    ``policy.delay`` seconds and tries again, up to ``policy.max_attempts``
    retries, so the operation runs at most ``policy.max_attempts + 1`` times.
    A successful attempt returns immediately, without any delay.

    Args:
        operation: Zero-argument callable, assumed safe to repeat
        policy: Retry count and fixed delay
        context: Description of the operation used in log messages and errors
        retry_on: Exception types that trigger another attempt; anything else
            propagates from the first attempt that raises it

    Returns:
        Whatever ``operation`` returned on its successful attempt

    Raises:
        RetryExhaustedError: If every allowed attempt failed
    """
    attempt = 1
    while True:
        logging.info("Attempt %d for %s", attempt, context)
        try:
            result = operation()
        except retry_on as e:
            logging.warning("Attempt %d for %s failed: %s", attempt, context, describe_failure(e))
            if attempt > policy.max_attempts:
                logging.error("Exhausted %d attempt(s) for %s", attempt, context)
                raise RetryExhaustedError(context, attempt, e) from e
            logging.debug("Waiting %.1fs before retrying %s", policy.delay, context)
            time.sleep(policy.delay)
            attempt += 1
        else:
            logging.info("Attempt %d for %s succeeded", attempt, context)
            return result


__all__ = ["TRANSIENT_ERRORS", "execute_with_retry"]
