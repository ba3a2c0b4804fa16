"""
API client for the visuals catalog.

This package provides the HTTP client used to page through the catalog
and download visual packages.
"""

from .catalog_client import CatalogClient

__all__ = ["CatalogClient"]
