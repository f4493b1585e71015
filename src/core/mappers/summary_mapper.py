"""Map search responses to the listing view."""

from typing import Any

from core.models.image import ImageMetaSummary
from core.models.search import SearchResult
from core.models.view import ListingViewModel, PreviewEntry
from core.utils.constants import AUTHOR_SEPARATOR
from core.utils.validators import parse_payload


def parse_search_result(payload: Any) -> SearchResult:
    """Validate a raw search response body.

    Raises:
        MappingError: If a required field is missing
    """
    return parse_payload(SearchResult, payload)


def to_preview_entry(summary: ImageMetaSummary) -> PreviewEntry:
    return PreviewEntry(
        preview_url=summary.preview_url,
        detail_ref=summary.meta_url,
        title=summary.title.title,
        alt_text=summary.alt_text.alttext,
        license=summary.license,
        contributors=AUTHOR_SEPARATOR.join(summary.contributors),
    )


def map_search_result(result: SearchResult | Any) -> ListingViewModel:
    """
    Turn a search result into the listing view model.

    Accepts either a validated `SearchResult` or the raw response body.
    Entries keep the server's order; an empty result set maps to an
    empty listing, not an error.
    """
    if not isinstance(result, SearchResult):
        result = parse_search_result(result)

    return ListingViewModel(
        total_count=result.total_count,
        entries=[to_preview_entry(summary) for summary in result.results],
        page=result.page,
        page_size=result.page_size,
        language=result.language,
    )
