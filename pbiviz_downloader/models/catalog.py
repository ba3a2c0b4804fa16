"""
Pydantic models for catalog API responses.

A catalog page is a JSON document whose entries live under
``apps.dataList``. Only the handful of fields the downloader reads are
declared; everything else the API sends is kept as extra data.
"""

import logging
from typing import Any, FrozenSet, List

from pydantic import Field, field_validator

from .base import CatalogBaseModel


class CatalogTag(CatalogBaseModel):
    """A category tag attached to a catalog entry."""

    id: str = Field(alias="Id")


class CatalogEntry(CatalogBaseModel):
    """
    One marketplace visual.

    Attributes:
        title: Display title, also the source of the local file name
        download_url: Link to the ``.pbiviz`` package (API field ``downloadLink``)
        publisher: Publisher display name
        tags: Category tags, used to test certification
    """

    title: str
    download_url: str = Field(alias="downloadLink")
    publisher: str = ""
    tags: List[CatalogTag] = Field(default_factory=list)

    @field_validator("publisher", mode="before")
    @classmethod
    def none_publisher_to_empty(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def none_tags_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def tag_ids(self) -> FrozenSet[str]:
        """Identifiers of all tags carried by the entry."""
        return frozenset(tag.id for tag in self.tags)


class CatalogPage(CatalogBaseModel):
    """
    One fetched page of catalog entries, in API order.

    Attributes:
        page_number: 1-based page number the entries were requested with
        entries: Entries on the page; an empty list marks the end of the catalog
    """

    page_number: int = Field(ge=1)
    entries: List[CatalogEntry] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    @classmethod
    def from_response(cls, page_number: int, payload: Any) -> "CatalogPage":
        """
        Build a page from a decoded catalog response body.

        Args:
            page_number: Page number the body was requested with
            payload: Decoded JSON body

        Returns:
            CatalogPage; a body without an entry list yields an empty page

        Raises:
            ValueError: If the body or its entries do not have the expected shape
        """
        if not isinstance(payload, dict):
            raise ValueError(f"Catalog page {page_number} is not a JSON object")

        apps = payload.get("apps")
        data_list = apps.get("dataList") if isinstance(apps, dict) else None
        if data_list is None:
            logging.warning("Catalog page %d has no entry list, treating it as empty", page_number)
            return cls(page_number=page_number)

        if not isinstance(data_list, list):
            raise ValueError(f"Catalog page {page_number} has a malformed entry list")

        return cls(page_number=page_number, entries=data_list)


__all__ = ["CatalogTag", "CatalogEntry", "CatalogPage"]
