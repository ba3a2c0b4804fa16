"""
Logging configuration for the pbiviz-downloader package.

This module provides logging setup and a wrapping formatter so that long
catalog titles and URLs stay readable in a terminal.
"""

import logging
import textwrap
from typing import Optional

# ============================================================================
# Logging Configuration Constants
# ============================================================================

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Default width for log message wrapping
DEFAULT_LOG_WIDTH = 120

# Loggers of the HTTP stack, silenced below maximum verbosity
HTTP_LOGGERS = ("httpx", "httpcore")

# ============================================================================
# Custom Formatters
# ============================================================================


class WrappingFormatter(logging.Formatter):
    """
    Formatter that wraps long log messages at a fixed width.

    Continuation lines are indented so a wrapped download URL is still
    visually attached to the record it belongs to.
    """

    def __init__(
        self, fmt: Optional[str] = None, datefmt: Optional[str] = None, width: int = DEFAULT_LOG_WIDTH
    ) -> None:
        """
        Initialize the wrapping formatter.

        Args:
            fmt: Format string for log messages
            datefmt: Date format string
            width: Maximum width of a single output line
        """
        super().__init__(fmt, datefmt)
        self.width = width

    def format(self, record: logging.LogRecord) -> str:
        formatted = super().format(record)
        if len(formatted) <= self.width:
            return formatted
        return textwrap.fill(
            formatted,
            width=self.width,
            subsequent_indent="    ",
            break_long_words=False,
            break_on_hyphens=False,
        )


# ============================================================================
# Logging Setup Functions
# ============================================================================


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-d`` count to a logging level (0=WARNING, 1=INFO, 2+=DEBUG)."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0, use_wrapping: bool = False) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
        use_wrapping: If True, use wrapping formatter for long messages

    Verbosity Levels:
        0 (default): WARNING - failures and the end-of-run summary
        1 (-d):      INFO - every page, download, skip and retry attempt
        2 (-dd):     DEBUG - destination paths, chunk sizes, tracebacks
        3+ (-ddd):   DEBUG - additionally every HTTP request made by httpx

    Example:
        >>> from pbiviz_downloader.utils import setup_logging
        >>> setup_logging(1)  # INFO level
    """
    level = level_for_verbosity(verbosity)

    if use_wrapping:
        handler = logging.StreamHandler()
        handler.setFormatter(WrappingFormatter(fmt=LOG_FORMAT, width=DEFAULT_LOG_WIDTH))

        root_logger = logging.getLogger()
        root_logger.handlers.clear()
        root_logger.addHandler(handler)
        root_logger.setLevel(level)
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)

    # httpx logs every request at INFO, which would drown the per-entry messages
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


__all__ = [
    "WrappingFormatter",
    "level_for_verbosity",
    "setup_logging",
]
