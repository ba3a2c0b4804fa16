"""
Pydantic models for pbiviz-downloader.

This package contains all Pydantic models used in the application:
- catalog: Models for catalog API responses
- base, context, results: Domain models
"""

# Catalog API Response Models
from .catalog import CatalogTag, CatalogEntry, CatalogPage

# Domain Models
from .base import DownloaderBaseModel, CatalogBaseModel
from .context import RetryPolicy, DownloadFilter, DownloadContext
from .results import DownloadResult

__all__ = [
    # Catalog API Models
    "CatalogTag",
    "CatalogEntry",
    "CatalogPage",
    # Domain Models
    "DownloaderBaseModel",
    "CatalogBaseModel",
    "RetryPolicy",
    "DownloadFilter",
    "DownloadContext",
    "DownloadResult",
]
