"""Base models for pbiviz-downloader."""

from pydantic import BaseModel, ConfigDict


class DownloaderBaseModel(BaseModel):
    """Base model for all locally constructed models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=False,  # Allow modification (can be changed per model)
        validate_assignment=True,  # Validate on attribute assignment
    )


class CatalogBaseModel(BaseModel):
    """Base model for catalog API payloads."""

    model_config = ConfigDict(
        extra="allow",  # The catalog sends far more fields than we read
        frozen=True,
        populate_by_name=True,
    )


__all__ = ["DownloaderBaseModel", "CatalogBaseModel"]
