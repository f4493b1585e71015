import pytest

from core.mappers.summary_mapper import map_search_result, parse_search_result
from core.models.errors import MappingError


class TestSummaryMapper:
    def test_preserves_cardinality_and_order(self, make_search_result) -> None:
        listing = map_search_result(make_search_result("A", "B", "C"))

        assert [entry.detail_ref for entry in listing.entries] == [
            "https://catalog.test/images/A",
            "https://catalog.test/images/B",
            "https://catalog.test/images/C",
        ]
        assert [entry.preview_url for entry in listing.entries] == [
            "https://catalog.test/raw/A.jpg",
            "https://catalog.test/raw/B.jpg",
            "https://catalog.test/raw/C.jpg",
        ]

    def test_empty_results_is_not_an_error(self) -> None:
        listing = map_search_result({"totalCount": 0, "results": []})

        assert listing.entries == []
        assert listing.is_empty is True
        assert listing.total_count == 0

    def test_accepts_validated_result(self, make_search_result) -> None:
        result = parse_search_result(make_search_result("1"))

        listing = map_search_result(result)

        assert len(listing.entries) == 1
        assert listing.page == 1
        assert listing.page_size == 10
        assert listing.language == "en"

    def test_display_extras(self, make_search_result) -> None:
        entry = map_search_result(make_search_result("7")).entries[0]

        assert entry.title == "Image 7"
        assert entry.alt_text == "Alt for Image 7"
        assert entry.license == "CC-BY-4.0"
        assert entry.contributors == "Ola Nordmann, Kari Nordmann"

    def test_missing_meta_url_raises_mapping_error(self, make_search_result) -> None:
        body = make_search_result("1")
        del body["results"][0]["metaUrl"]

        with pytest.raises(MappingError) as exc:
            map_search_result(body)

        assert exc.value.error_code == "MISSING_FIELD"
        fields = [err["field"] for err in exc.value.details["errors"]]
        assert "results.0.metaUrl" in fields

    def test_non_object_body_raises_mapping_error(self) -> None:
        with pytest.raises(MappingError):
            map_search_result(["not", "an", "object"])
