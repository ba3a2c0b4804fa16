"""
Tests for CatalogClient class.

HTTP traffic is mocked with respx.
"""

import httpx
import pytest

from pbiviz_downloader.api import CatalogClient
from pbiviz_downloader.models import CatalogPage

from ..conftest import CATALOG_HOST, CATALOG_PATH, CATALOG_TEMPLATE, page_body


class TestCatalogClientInit:
    """Test CatalogClient construction."""

    def test_init_creates_session(self):
        with CatalogClient(CATALOG_TEMPLATE, timeout=12) as client:
            assert client.catalog_url == CATALOG_TEMPLATE
            assert isinstance(client.session, httpx.Client)
            assert client.session.timeout.read == 12

    def test_init_with_session(self):
        session = httpx.Client()
        client = CatalogClient(CATALOG_TEMPLATE, session=session)

        assert client.session is session
        client.close()
        assert session.is_closed

    def test_context_manager_closes_session(self):
        with CatalogClient(CATALOG_TEMPLATE) as client:
            pass
        assert client.session.is_closed


class TestPageUrl:
    """Test page URL construction."""

    @pytest.mark.parametrize("page_number", [1, 2, 37])
    def test_page_url(self, catalog_client, page_number):
        assert catalog_client.page_url(page_number) == (
            f"https://{CATALOG_HOST}{CATALOG_PATH}?product=power-bi-visuals&page={page_number}"
        )


class TestFetchPage:
    """Test fetch_page."""

    def test_fetch_page(self, catalog_client, httpx_mock, certified_microsoft_entry, uncertified_third_party_entry):
        route = httpx_mock.get(host=CATALOG_HOST, path=CATALOG_PATH, params={"page": "2"}).mock(
            return_value=httpx.Response(200, json=page_body([certified_microsoft_entry, uncertified_third_party_entry]))
        )

        page = catalog_client.fetch_page(2)

        assert route.called
        assert isinstance(page, CatalogPage)
        assert page.page_number == 2
        assert [entry.title for entry in page.entries] == ["Gantt Chart! v2.0", "Word Cloud (Beta)"]
        assert page.entries[0].download_url == "https://cdn.test/visuals/gantt.pbiviz"

    def test_fetch_page_sends_accept_language(self, catalog_client, httpx_mock):
        route = httpx_mock.get(host=CATALOG_HOST, path=CATALOG_PATH).mock(
            return_value=httpx.Response(200, json=page_body([]))
        )

        catalog_client.fetch_page(1)

        assert route.calls.last.request.headers["Accept-Language"] == "en-US"

    def test_fetch_empty_page(self, catalog_client, httpx_mock):
        httpx_mock.get(host=CATALOG_HOST, path=CATALOG_PATH).mock(return_value=httpx.Response(200, json=page_body([])))

        assert catalog_client.fetch_page(9).is_empty

    def test_fetch_page_http_error(self, catalog_client, httpx_mock):
        httpx_mock.get(host=CATALOG_HOST, path=CATALOG_PATH).mock(return_value=httpx.Response(503))

        with pytest.raises(httpx.HTTPStatusError):
            catalog_client.fetch_page(1)

    def test_fetch_page_invalid_json(self, catalog_client, httpx_mock):
        httpx_mock.get(host=CATALOG_HOST, path=CATALOG_PATH).mock(
            return_value=httpx.Response(200, text="<html>maintenance</html>")
        )

        with pytest.raises(ValueError):
            catalog_client.fetch_page(1)

    def test_fetch_page_connection_error(self, catalog_client, httpx_mock):
        httpx_mock.get(host=CATALOG_HOST, path=CATALOG_PATH).mock(side_effect=httpx.ConnectError("refused"))

        with pytest.raises(httpx.ConnectError):
            catalog_client.fetch_page(1)


class TestDownload:
    """Test download."""

    def test_download_writes_file(self, catalog_client, httpx_mock, tmp_path):
        httpx_mock.get("https://cdn.test/visuals/gantt.pbiviz").mock(
            return_value=httpx.Response(200, content=b"PK\x03\x04visual", headers={"content-length": "10"})
        )
        destination = tmp_path / "GanttChartv20.pbiviz"

        result = catalog_client.download("https://cdn.test/visuals/gantt.pbiviz", str(destination))

        assert result == str(destination)
        assert destination.read_bytes() == b"PK\x03\x04visual"

    def test_download_overwrites_existing_file(self, catalog_client, httpx_mock, tmp_path):
        httpx_mock.get("https://cdn.test/visuals/gantt.pbiviz").mock(return_value=httpx.Response(200, content=b"new"))
        destination = tmp_path / "GanttChartv20.pbiviz"
        destination.write_bytes(b"old partial content")

        catalog_client.download("https://cdn.test/visuals/gantt.pbiviz", str(destination))

        assert destination.read_bytes() == b"new"

    def test_download_follows_redirect(self, catalog_client, httpx_mock, tmp_path):
        httpx_mock.get("https://cdn.test/visuals/gantt.pbiviz").mock(
            return_value=httpx.Response(302, headers={"location": "https://blob.test/gantt.pbiviz"})
        )
        httpx_mock.get("https://blob.test/gantt.pbiviz").mock(return_value=httpx.Response(200, content=b"visual"))
        destination = tmp_path / "Gantt.pbiviz"

        catalog_client.download("https://cdn.test/visuals/gantt.pbiviz", str(destination))

        assert destination.read_bytes() == b"visual"

    def test_download_http_error_writes_nothing(self, catalog_client, httpx_mock, tmp_path):
        httpx_mock.get("https://cdn.test/visuals/gantt.pbiviz").mock(return_value=httpx.Response(404))
        destination = tmp_path / "Gantt.pbiviz"

        with pytest.raises(httpx.HTTPStatusError):
            catalog_client.download("https://cdn.test/visuals/gantt.pbiviz", str(destination))

        assert not destination.exists()

    def test_download_missing_directory(self, catalog_client, httpx_mock, tmp_path):
        httpx_mock.get("https://cdn.test/visuals/gantt.pbiviz").mock(return_value=httpx.Response(200, content=b"x"))

        with pytest.raises(OSError):
            catalog_client.download("https://cdn.test/visuals/gantt.pbiviz", str(tmp_path / "missing" / "Gantt.pbiviz"))
