"""
Test fixtures and mock data for pbiviz-downloader tests.

This module provides common fixtures, sample catalog payloads, and helpers
for mocking the catalog API with respx.
"""

from typing import Any, Dict, List
from unittest.mock import patch

import httpx
import pytest
import respx

from pbiviz_downloader.api import CatalogClient
from pbiviz_downloader.models import CatalogEntry, DownloadContext, DownloadFilter, RetryPolicy

CATALOG_HOST = "catalog.test"
CATALOG_PATH = "/view/tiledata/"
CATALOG_TEMPLATE = f"https://{CATALOG_HOST}{CATALOG_PATH}?product=power-bi-visuals&page={{page}}"


# ============================================================================
# Sample catalog data
# ============================================================================


def make_entry(
    title: str,
    download_link: str,
    publisher: str = "Microsoft Corporation",
    tags: List[str] = (),
) -> Dict[str, Any]:
    """Build a catalog entry as the API sends it."""
    return {
        "title": title,
        "downloadLink": download_link,
        "publisher": publisher,
        "tags": [{"Id": tag, "Title": tag} for tag in tags],
        "rating": 4.5,
    }


def page_body(entries: List[Dict[str, Any]]) -> Dict[str, Any]:
    """Wrap entries in a catalog page body."""
    return {"apps": {"dataList": list(entries), "count": len(entries)}}


@pytest.fixture
def certified_microsoft_entry():
    """A certified visual published by Microsoft."""
    return make_entry(
        "Gantt Chart! v2.0",
        "https://cdn.test/visuals/gantt.pbiviz",
        publisher="Microsoft Corporation",
        tags=["PowerBICertified", "Time"],
    )


@pytest.fixture
def uncertified_third_party_entry():
    """An uncertified visual from another publisher."""
    return make_entry(
        "Word Cloud (Beta)",
        "https://cdn.test/visuals/wordcloud.pbiviz",
        publisher="Contoso Ltd",
        tags=["Infographics"],
    )


@pytest.fixture
def certified_third_party_entry():
    """A certified visual from another publisher."""
    return make_entry(
        "Sankey Flow",
        "https://cdn.test/visuals/sankey.pbiviz",
        publisher="Contoso Ltd",
        tags=["PowerBICertified"],
    )


@pytest.fixture
def uncertified_microsoft_entry():
    """An uncertified visual published by Microsoft."""
    return make_entry(
        "Timeline Slicer",
        "https://cdn.test/visuals/timeline.pbiviz",
        publisher="Microsoft Corporation",
        tags=["Filters"],
    )


@pytest.fixture
def as_entry():
    """Turn a raw entry dict into a CatalogEntry model."""
    return CatalogEntry.model_validate


# ============================================================================
# HTTP mocking
# ============================================================================


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking."""
    with respx.mock(assert_all_called=False) as mock:
        yield mock


@pytest.fixture
def mock_catalog(httpx_mock):
    """
    Serve catalog pages from a list of entry lists.

    Usage:
        route = mock_catalog([entry_a, entry_b], [])
        ...
        assert route.call_count == 2

    Pages past the end of the list are served empty.
    """

    def _serve(*pages: List[Dict[str, Any]]):
        def handler(request: httpx.Request) -> httpx.Response:
            page_number = int(request.url.params["page"])
            entries = pages[page_number - 1] if page_number <= len(pages) else []
            return httpx.Response(200, json=page_body(entries))

        return httpx_mock.get(host=CATALOG_HOST, path=CATALOG_PATH).mock(side_effect=handler)

    return _serve


@pytest.fixture
def no_sleep():
    """Patch out the retry delay and expose the mock."""
    with patch("pbiviz_downloader.utils.retry.time.sleep") as mock_sleep:
        yield mock_sleep


# ============================================================================
# Clients and contexts
# ============================================================================


@pytest.fixture
def catalog_client():
    """CatalogClient pointed at the mocked catalog host."""
    client = CatalogClient(CATALOG_TEMPLATE, timeout=5)
    yield client
    client.close()


@pytest.fixture
def make_context(tmp_path):
    """Build a DownloadContext writing into a temporary folder."""

    def _make(
        certified_only: bool = False,
        microsoft_only: bool = False,
        max_attempts: int = 2,
        dry_run: bool = False,
    ) -> DownloadContext:
        return DownloadContext(
            catalog_url=CATALOG_TEMPLATE,
            destination=str(tmp_path / "downloads"),
            retry_policy=RetryPolicy(max_attempts=max_attempts, delay=0.5),
            download_filter=DownloadFilter(certified_only=certified_only, microsoft_only=microsoft_only),
            dry_run=dry_run,
        )

    return _make
