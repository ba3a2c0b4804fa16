"""
Error types and standardized error logging.

A failed network operation is retried by :mod:`pbiviz_downloader.utils.retry`
until its policy is exhausted, at which point a :class:`RetryExhaustedError`
carries the operation context and the last underlying failure. Page fetches
escalate that to :class:`FatalPaginationError`; single downloads do not.
"""

import logging
import traceback
from typing import Optional

import httpx


class RetryExhaustedError(Exception):
    """
    Raised once an operation has failed on every attempt its policy allows.

    Attributes:
        context: Human-readable description of the operation
            (e.g. ``"page fetch (page 3)"``)
        attempts: Number of attempts that were made
        cause: The exception raised by the last attempt
    """

    def __init__(self, context: str, attempts: int, cause: BaseException) -> None:
        self.context = context
        self.attempts = attempts
        self.cause = cause
        super().__init__(f"{context} failed after {attempts} attempt(s): {describe_failure(cause)}")


class FatalPaginationError(RetryExhaustedError):
    """A page could not be fetched; pagination cannot continue past it."""

    def __init__(self, page_number: int, attempts: int, cause: BaseException, context: Optional[str] = None) -> None:
        self.page_number = page_number
        super().__init__(context or f"page fetch (page {page_number})", attempts, cause)

    @classmethod
    def from_exhausted(cls, page_number: int, error: RetryExhaustedError) -> "FatalPaginationError":
        """Escalate an exhausted page fetch."""
        return cls(page_number, error.attempts, error.cause, context=error.context)


def describe_failure(error: BaseException) -> str:
    """
    Render an exception as a one-line diagnostic.

    HTTP status errors name the status code and URL; anything else falls
    back to the exception type and message.

    Example:
        >>> describe_failure(ValueError("bad page"))
        'ValueError: bad page'
    """
    if isinstance(error, httpx.HTTPStatusError):
        return f"HTTP {error.response.status_code} from {error.request.url}"
    message = str(error)
    return f"{type(error).__name__}: {message}" if message else type(error).__name__


def handle_http_error(error: httpx.HTTPError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle HTTP errors with standardized logging.

    Args:
        error: The HTTP error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    if isinstance(error, httpx.TimeoutException):
        logging.error("Timed out during %s: %s", operation, error)
    elif isinstance(error, httpx.HTTPStatusError):
        status = error.response.status_code
        if status == 404:
            logging.error("Resource not found during %s: %s", operation, error.request.url)
        elif status == 429:
            logging.error("Rate limited by the catalog during %s", operation)
        elif status >= 500:
            logging.error("Server error during %s: %s", operation, describe_failure(error))
        else:
            logging.error("HTTP error during %s: %s", operation, describe_failure(error))
    else:
        logging.error("Network error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def handle_retry_exhausted(error: RetryExhaustedError) -> None:
    """Log an exhausted operation, dispatching on the type of its last failure."""
    if isinstance(error.cause, httpx.HTTPError):
        handle_http_error(error.cause, error.context, log_traceback=False)
    else:
        logging.error("Error during %s: %s", error.context, describe_failure(error.cause))
    logging.error("Gave up on %s after %d attempt(s)", error.context, error.attempts)


__all__ = [
    "RetryExhaustedError",
    "FatalPaginationError",
    "describe_failure",
    "handle_http_error",
    "handle_generic_error",
    "handle_retry_exhausted",
]
