"""
Boolean predicates used by the download filters.

Each predicate takes a single catalog entry and answers one question about
it, so :class:`~pbiviz_downloader.models.context.DownloadFilter` can compose
them without knowing how the catalog encodes certification or publishers.
"""

from typing import TYPE_CHECKING

from .constants import CERTIFIED_TAG_ID, MICROSOFT_PUBLISHER

if TYPE_CHECKING:
    from ..models.catalog import CatalogEntry


def is_certified(entry: "CatalogEntry") -> bool:
    """
    Check if a catalog entry carries the certified tag.

    Args:
        entry: Catalog entry to check

    Returns:
        True if one of the entry's tag identifiers equals the certified marker

    Example:
        >>> is_certified(CatalogEntry(title="Gantt", downloadLink="https://x", publisher="p",
        ...                           tags=[{"Id": "PowerBICertified"}]))  # doctest: +SKIP
        True
    """
    return CERTIFIED_TAG_ID in entry.tag_ids


def is_microsoft_published(entry: "CatalogEntry") -> bool:
    """
    Check if a catalog entry was published by Microsoft.

    The comparison is exact: ``"Microsoft"`` or ``"microsoft corporation"``
    do not match.

    Args:
        entry: Catalog entry to check

    Returns:
        True if the publisher string equals the Microsoft publisher name
    """
    return entry.publisher == MICROSOFT_PUBLISHER


def is_remote_url(url: str) -> bool:
    """
    Check if a URL is a remote HTTP/HTTPS URL.

    Example:
        >>> is_remote_url("https://example.com/file")
        True
        >>> is_remote_url("/local/path/file")
        False
    """
    return url.startswith(("http://", "https://"))


__all__ = [
    "is_certified",
    "is_microsoft_published",
    "is_remote_url",
]
