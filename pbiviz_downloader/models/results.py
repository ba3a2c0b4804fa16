"""Result models for download runs."""

from typing import List

from pydantic import Field

from .base import DownloaderBaseModel


class DownloadResult(DownloaderBaseModel):
    """
    Statistics accumulated over one run of the pagination loop.

    Attributes:
        pages_fetched: Number of pages fetched, including the final empty one
        downloaded: Paths of files written, in download order
        planned: Paths that would have been written (dry run only)
        skipped: Number of entries rejected by a filter
        failed: Titles of entries whose download exhausted its retries or
            failed with an error that is not retried
    """

    pages_fetched: int = Field(default=0, ge=0)
    downloaded: List[str] = Field(default_factory=list)
    planned: List[str] = Field(default_factory=list)
    skipped: int = Field(default=0, ge=0)
    failed: List[str] = Field(default_factory=list)

    @property
    def downloaded_count(self) -> int:
        return len(self.downloaded)

    @property
    def failed_count(self) -> int:
        return len(self.failed)

    @property
    def total_seen(self) -> int:
        """Total number of catalog entries processed."""
        return self.downloaded_count + len(self.planned) + self.skipped + self.failed_count


__all__ = ["DownloadResult"]
