"""
Bulk download of catalog visuals.

Modules:
    - pagination: The page-by-page fetch, filter and download loop
    - reporting: End-of-run summary logging
"""

from .pagination import LoopStage, LoopState, advance, run_bulk_download
from .reporting import log_download_summary

__all__ = [
    "LoopStage",
    "LoopState",
    "advance",
    "run_bulk_download",
    "log_download_summary",
]
