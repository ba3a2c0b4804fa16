"""Tests for catalog API response models."""

import pytest
from pydantic import ValidationError

from pbiviz_downloader.models import CatalogEntry, CatalogPage, CatalogTag

from ..conftest import make_entry, page_body


class TestCatalogEntry:
    """Test CatalogEntry model."""

    def test_from_api_payload(self, certified_microsoft_entry):
        entry = CatalogEntry.model_validate(certified_microsoft_entry)

        assert entry.title == "Gantt Chart! v2.0"
        assert entry.download_url == "https://cdn.test/visuals/gantt.pbiviz"
        assert entry.publisher == "Microsoft Corporation"
        assert entry.tag_ids == frozenset({"PowerBICertified", "Time"})

    def test_extra_fields_are_kept(self, certified_microsoft_entry):
        entry = CatalogEntry.model_validate(certified_microsoft_entry)
        assert entry.model_extra["rating"] == 4.5

    def test_populate_by_field_name(self):
        entry = CatalogEntry(title="Gantt", download_url="https://cdn.test/gantt.pbiviz")
        assert entry.download_url == "https://cdn.test/gantt.pbiviz"
        assert entry.tags == []

    def test_null_publisher_and_tags(self):
        entry = CatalogEntry.model_validate(
            {"title": "Gantt", "downloadLink": "https://cdn.test/gantt.pbiviz", "publisher": None, "tags": None}
        )
        assert entry.publisher == ""
        assert entry.tag_ids == frozenset()

    def test_missing_download_link(self):
        with pytest.raises(ValidationError):
            CatalogEntry.model_validate({"title": "Gantt", "publisher": "Contoso"})

    def test_entries_are_immutable(self, certified_microsoft_entry):
        entry = CatalogEntry.model_validate(certified_microsoft_entry)
        with pytest.raises(ValidationError):
            entry.title = "Other"


class TestCatalogTag:
    """Test CatalogTag model."""

    def test_alias(self):
        assert CatalogTag.model_validate({"Id": "PowerBICertified"}).id == "PowerBICertified"


class TestCatalogPage:
    """Test CatalogPage.from_response."""

    def test_entries_in_api_order(self):
        body = page_body(
            [
                make_entry("B", "https://cdn.test/b.pbiviz"),
                make_entry("A", "https://cdn.test/a.pbiviz"),
                make_entry("C", "https://cdn.test/c.pbiviz"),
            ]
        )

        page = CatalogPage.from_response(4, body)

        assert page.page_number == 4
        assert [entry.title for entry in page.entries] == ["B", "A", "C"]
        assert not page.is_empty

    def test_empty_list(self):
        assert CatalogPage.from_response(2, page_body([])).is_empty

    @pytest.mark.parametrize("body", [{}, {"apps": {}}, {"apps": None}, {"apps": {"dataList": None}}])
    def test_missing_list_is_empty_page(self, body, caplog):
        page = CatalogPage.from_response(3, body)

        assert page.is_empty
        assert "no entry list" in caplog.text

    @pytest.mark.parametrize("body", [[], "text", None])
    def test_non_object_body(self, body):
        with pytest.raises(ValueError, match="not a JSON object"):
            CatalogPage.from_response(1, body)

    def test_malformed_list(self):
        with pytest.raises(ValueError, match="malformed entry list"):
            CatalogPage.from_response(1, {"apps": {"dataList": {"title": "x"}}})

    def test_malformed_entry(self):
        with pytest.raises(ValidationError):
            CatalogPage.from_response(1, page_body([{"title": "no link"}]))

    def test_page_number_must_be_positive(self):
        with pytest.raises(ValidationError):
            CatalogPage(page_number=0)
