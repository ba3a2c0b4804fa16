"""
Reporting for download runs.

The summary is logged at WARNING level so it is visible at the default
verbosity; per-item details follow at INFO.
"""

import logging

from ..models.context import DownloadContext
from ..models.results import DownloadResult
from ..utils.constants import SEPARATOR_WIDTH


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}{'s' if count != 1 else ''}"


def log_download_summary(result: DownloadResult, context: DownloadContext) -> None:
    """Log what a run did.

    Args:
        result: Statistics returned by the pagination loop
        context: Configuration the run used
    """
    logging.info("=" * SEPARATOR_WIDTH)

    if context.dry_run:
        logging.warning(
            "Dry run complete: %s would be downloaded, %d skipped (%s fetched)",
            _plural(len(result.planned), "visual"),
            result.skipped,
            _plural(result.pages_fetched, "page"),
        )
        for path in result.planned:
            logging.info("  - %s", path)
        return

    logging.warning(
        "Download complete: %s saved to '%s', %d skipped, %d failed (%s fetched)",
        _plural(result.downloaded_count, "visual"),
        context.destination,
        result.skipped,
        result.failed_count,
        _plural(result.pages_fetched, "page"),
    )

    if result.failed:
        logging.warning("Failed downloads:")
        for title in result.failed:
            logging.warning("  - %s", title)

    logging.debug("Filters: %s", context.download_filter)
    logging.debug(
        "Retry policy: %s (%.1fs apart)",
        _plural(context.retry_policy.total_attempts, "attempt"),
        context.retry_policy.delay,
    )


__all__ = ["log_download_summary"]
