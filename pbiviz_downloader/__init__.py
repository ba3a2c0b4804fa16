"""
pbiviz-downloader - Bulk downloader for the Power BI custom visuals catalog.

This package pages through the marketplace catalog, filters visuals by
certification and publisher, and saves each matching ``.pbiviz`` package
to a local folder, retrying failed requests with a fixed delay.
"""

from ._version import __version__

# Import main classes and functions for easy access
from .api import CatalogClient
from .bulk import run_bulk_download
from .models import DownloadContext, DownloadFilter, RetryPolicy
from .utils import (
    FatalPaginationError,
    RetryExhaustedError,
    create_session,
    execute_with_retry,
    setup_logging,
)
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "CatalogClient",
    "run_bulk_download",
    "DownloadContext",
    "DownloadFilter",
    "RetryPolicy",
    "FatalPaginationError",
    "RetryExhaustedError",
    "create_session",
    "execute_with_retry",
    "setup_logging",
    "cli_main",
    "cli_group",
]
