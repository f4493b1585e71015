"""Unit tests for search inputs."""

from handlers.search_images.models import SearchInputs


class TestSearchInputs:
    def test_all_fields_default_to_none(self) -> None:
        inputs = SearchInputs()

        assert inputs.model_dump() == {
            "query": None,
            "minimum_size": None,
            "license": None,
            "language": None,
            "page": None,
            "page_size": None,
        }

    def test_whitespace_only_strings_become_none(self) -> None:
        inputs = SearchInputs(query="   ", license="", language="\t", minimum_size=" ")

        assert inputs.query is None
        assert inputs.license is None
        assert inputs.language is None
        assert inputs.minimum_size is None

    def test_strings_are_stripped(self) -> None:
        inputs = SearchInputs(query="  sunset ")

        assert inputs.query == "sunset"

    def test_minimum_size_accepts_non_numeric(self) -> None:
        inputs = SearchInputs(minimum_size="large")

        assert inputs.minimum_size == "large"

    def test_with_query_keeps_other_filters(self) -> None:
        inputs = SearchInputs(query="cat", minimum_size=100, language="nb")

        updated = inputs.with_query("sea")

        assert updated.query == "sea"
        assert updated.minimum_size == 100
        assert updated.language == "nb"
        assert inputs.query == "cat"

    def test_non_integer_sizes_pass_through(self) -> None:
        inputs = SearchInputs(minimum_size=1000.5, page="2x", page_size=2.5)

        assert inputs.minimum_size == "1000.5"
        assert inputs.page == "2x"
        assert inputs.page_size == "2.5"

    def test_blank_page_becomes_none(self) -> None:
        inputs = SearchInputs(page="  ", page_size="")

        assert inputs.page is None
        assert inputs.page_size is None
