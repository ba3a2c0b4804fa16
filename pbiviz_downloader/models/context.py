"""Context and configuration models for download runs."""

import os
from typing import Any, Mapping, Optional

from pydantic import ConfigDict, Field, field_validator

from ..utils.constants import (
    CATALOG_URL_TEMPLATE,
    DEFAULT_DESTINATION,
    DEFAULT_RETRY_COUNT,
    DEFAULT_RETRY_DELAY,
    DEFAULT_TIMEOUT,
    MICROSOFT_PUBLISHER,
)
from ..utils.predicates import is_certified, is_microsoft_published, is_remote_url
from .base import DownloaderBaseModel
from .catalog import CatalogEntry


class RetryPolicy(DownloaderBaseModel):
    """
    How often and how patiently a fallible operation is retried.

    Attributes:
        max_attempts: Retries allowed after the first attempt (0 = single attempt)
        delay: Fixed pause between attempts in seconds, never increased
    """

    model_config = ConfigDict(frozen=True)

    max_attempts: int = Field(default=DEFAULT_RETRY_COUNT, ge=0)
    delay: float = Field(default=DEFAULT_RETRY_DELAY, ge=0)

    @property
    def total_attempts(self) -> int:
        return self.max_attempts + 1


class DownloadFilter(DownloaderBaseModel):
    """
    Stateless include/exclude rules applied to every catalog entry.

    The certification check runs first, so an uncertified third-party
    entry is reported as uncertified when both filters are enabled.
    """

    model_config = ConfigDict(frozen=True)

    certified_only: bool = False
    microsoft_only: bool = False

    def rejection_reason(self, entry: CatalogEntry) -> Optional[str]:
        """
        Explain why ``entry`` must not be downloaded.

        Returns:
            A short reason, or None if the entry passes every enabled filter
        """
        if self.certified_only and not is_certified(entry):
            return "not certified"
        if self.microsoft_only and not is_microsoft_published(entry):
            return f"published by {entry.publisher!r}, not {MICROSOFT_PUBLISHER!r}"
        return None


class DownloadContext(DownloaderBaseModel):
    """
    Everything a single download run needs.

    Attributes:
        catalog_url: Catalog endpoint template containing a ``{page}`` placeholder
        destination: Folder the visuals are written to
        retry_policy: Policy shared by page fetches and downloads
        download_filter: Certification and publisher filters
        timeout: Per-request timeout in seconds
        dry_run: Walk and filter the catalog without writing any file
        debug: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
    """

    catalog_url: str = CATALOG_URL_TEMPLATE
    destination: str = DEFAULT_DESTINATION
    retry_policy: RetryPolicy = Field(default_factory=RetryPolicy)
    download_filter: DownloadFilter = Field(default_factory=DownloadFilter)
    timeout: int = Field(default=DEFAULT_TIMEOUT, gt=0)
    dry_run: bool = False
    debug: int = Field(default=0, ge=0)

    @field_validator("catalog_url")
    @classmethod
    def validate_catalog_url(cls, v: str) -> str:
        """Require a remote URL with a page placeholder."""
        if not is_remote_url(v):
            raise ValueError(f"Catalog URL must start with http:// or https://: {v}")
        if "{page}" not in v:
            raise ValueError(f"Catalog URL must contain a {{page}} placeholder: {v}")
        return v

    @field_validator("destination")
    @classmethod
    def expand_destination(cls, v: str) -> str:
        """Expand a leading ``~`` so config files can point into the home folder."""
        return os.path.expanduser(v)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> "DownloadContext":
        """
        Build a context from flat settings, as found in the config file's
        ``[downloader]`` section merged with command-line flags.

        Recognized keys: ``catalog_url``, ``destination``, ``retry_count``,
        ``retry_delay``, ``timeout``, ``certified_only``, ``microsoft_only``,
        ``dry_run``, ``debug``. Missing keys keep their defaults.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        values = dict(settings)

        policy_values = {}
        if "retry_count" in values:
            policy_values["max_attempts"] = values.pop("retry_count")
        if "retry_delay" in values:
            policy_values["delay"] = values.pop("retry_delay")

        filter_values = {key: values.pop(key) for key in ("certified_only", "microsoft_only") if key in values}

        unknown = sorted(set(values) - {"catalog_url", "destination", "timeout", "dry_run", "debug"})
        if unknown:
            raise ValueError(f"Unknown setting(s): {', '.join(unknown)}")

        return cls(
            retry_policy=RetryPolicy(**policy_values),
            download_filter=DownloadFilter(**filter_values),
            **values,
        )


__all__ = [
    "RetryPolicy",
    "DownloadFilter",
    "DownloadContext",
]
