"""
Pagination and filter loop.

The loop is a small state machine driven by :func:`advance`::

    FETCHING_PAGE --non-empty page--> PROCESSING_ENTRIES --all entries--> FETCHING_PAGE (page + 1)
    FETCHING_PAGE --empty page------> DONE

Every network operation goes through the retry executor. A page that cannot
be fetched ends the run with :class:`FatalPaginationError`; a visual that
cannot be downloaded is logged and counted, and the loop moves on.
"""

import logging
import traceback
from enum import Enum
from functools import partial
from typing import Optional

from pydantic import ConfigDict, Field

from ..api import CatalogClient
from ..models.base import DownloaderBaseModel
from ..models.catalog import CatalogEntry, CatalogPage
from ..models.context import DownloadContext
from ..models.results import DownloadResult
from ..utils.constants import FIRST_PAGE
from ..utils.error_handling import (
    FatalPaginationError,
    RetryExhaustedError,
    handle_generic_error,
    handle_retry_exhausted,
)
from ..utils.path_utils import ensure_directory_exists, get_visual_save_path
from ..utils.retry import execute_with_retry


class LoopStage(str, Enum):
    """Stages of the pagination loop."""

    FETCHING_PAGE = "fetching_page"
    PROCESSING_ENTRIES = "processing_entries"
    DONE = "done"


class LoopState(DownloaderBaseModel):
    """
    Snapshot of the loop between two steps.

    Attributes:
        stage: What the next step will do
        page_number: Page being fetched or processed
        page: The fetched page while its entries are processed
        result: Statistics so far; every step returns a new copy and leaves
            the one held by the previous state untouched
    """

    model_config = ConfigDict(frozen=True)

    stage: LoopStage = LoopStage.FETCHING_PAGE
    page_number: int = Field(default=FIRST_PAGE, ge=1)
    page: Optional[CatalogPage] = None
    result: DownloadResult = Field(default_factory=DownloadResult)


def fetch_page(state: LoopState, client: CatalogClient, context: DownloadContext) -> LoopState:
    """FETCHING_PAGE step: fetch the current page and decide where to go next."""
    page_number = state.page_number
    operation = f"page fetch (page {page_number})"

    try:
        page = execute_with_retry(partial(client.fetch_page, page_number), context.retry_policy, operation)
    except RetryExhaustedError as e:
        raise FatalPaginationError.from_exhausted(page_number, e) from e

    result = state.result.model_copy(update={"pages_fetched": state.result.pages_fetched + 1})

    if page.is_empty:
        logging.info("Catalog page %d is empty, stopping", page_number)
        return state.model_copy(update={"stage": LoopStage.DONE, "page": None, "result": result})

    return state.model_copy(update={"stage": LoopStage.PROCESSING_ENTRIES, "page": page, "result": result})


def process_entry(
    entry: CatalogEntry, client: CatalogClient, context: DownloadContext, result: DownloadResult
) -> None:
    """Filter one entry and download it if it passes."""
    reason = context.download_filter.rejection_reason(entry)
    if reason:
        logging.info("Skipping %s: %s", entry.title, reason)
        result.skipped += 1
        return

    destination = get_visual_save_path(entry.title, context.destination)

    if context.dry_run:
        logging.info("Would download %s to %s", entry.title, destination)
        result.planned.append(destination)
        return

    operation = f"entry download ({entry.title})"
    try:
        execute_with_retry(partial(client.download, entry.download_url, destination), context.retry_policy, operation)
    except RetryExhaustedError as e:
        handle_retry_exhausted(e)
        result.failed.append(entry.title)
        return
    except Exception as e:  # pylint: disable=broad-exception-caught
        # Not retryable (e.g. httpx.InvalidURL for a malformed link); the run goes on
        handle_generic_error(e, operation, log_traceback=False)
        logging.debug("Traceback: %s", traceback.format_exc())
        result.failed.append(entry.title)
        return

    logging.info("Saved %s to %s", entry.title, destination)
    result.downloaded.append(destination)


def process_entries(state: LoopState, client: CatalogClient, context: DownloadContext) -> LoopState:
    """PROCESSING_ENTRIES step: handle every entry of the page in API order."""
    if state.page is None:
        raise RuntimeError(f"No page loaded for page {state.page_number}")

    result = state.result.model_copy(deep=True)
    for entry in state.page.entries:
        process_entry(entry, client, context, result)

    return state.model_copy(
        update={
            "stage": LoopStage.FETCHING_PAGE,
            "page_number": state.page_number + 1,
            "page": None,
            "result": result,
        }
    )


def advance(state: LoopState, client: CatalogClient, context: DownloadContext) -> LoopState:
    """
    Run one step of the loop.

    Args:
        state: Current loop state
        client: Catalog client used for fetches and downloads
        context: Run configuration

    Returns:
        The next loop state; a DONE state is returned unchanged

    Raises:
        FatalPaginationError: If the current page cannot be fetched
    """
    if state.stage is LoopStage.FETCHING_PAGE:
        return fetch_page(state, client, context)
    if state.stage is LoopStage.PROCESSING_ENTRIES:
        return process_entries(state, client, context)
    return state


def run_bulk_download(client: CatalogClient, context: DownloadContext) -> DownloadResult:
    """
    Walk the catalog from page 1 until a page comes back empty.

    There is no page cap: a catalog that never returns an empty page keeps
    the loop running.

    Args:
        client: Catalog client used for fetches and downloads
        context: Run configuration

    Returns:
        DownloadResult with the statistics of the run

    Raises:
        FatalPaginationError: If a page cannot be fetched after all retries
    """
    if not context.dry_run:
        ensure_directory_exists(context.destination)
        logging.debug("Saving visuals to %s", context.destination)

    state = LoopState()
    while state.stage is not LoopStage.DONE:
        state = advance(state, client, context)

    return state.result


__all__ = [
    "LoopStage",
    "LoopState",
    "fetch_page",
    "process_entry",
    "process_entries",
    "advance",
    "run_bulk_download",
]
