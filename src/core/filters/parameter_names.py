"""Canonical search parameters and their endpoint spellings.

The catalog has spelled its query parameters differently across versions
(`tags` vs `query`, `minimumSize` vs `minimum-size`). Callers work with
`SearchParameter`; the wire spelling is chosen once, by configuration,
through `PARAMETER_SPELLINGS`.
"""

from collections.abc import Mapping
from enum import Enum
from typing import Final

from core.utils.constants import (
    PARAMETER_SPELLING_CURRENT,
    PARAMETER_SPELLING_HYPHENATED,
    PARAMETER_SPELLING_TAGS,
)


class SearchParameter(str, Enum):
    """Logical search filters, in the order they are emitted."""

    QUERY = "query"
    MINIMUM_SIZE = "minimum_size"
    LICENSE = "license"
    LANGUAGE = "language"
    PAGE = "page"
    PAGE_SIZE = "page_size"


PARAMETER_SPELLINGS: Final[Mapping[str, Mapping[SearchParameter, str]]] = {
    PARAMETER_SPELLING_CURRENT: {
        SearchParameter.QUERY: "query",
        SearchParameter.MINIMUM_SIZE: "minimumSize",
        SearchParameter.LICENSE: "license",
        SearchParameter.LANGUAGE: "language",
        SearchParameter.PAGE: "page",
        SearchParameter.PAGE_SIZE: "pageSize",
    },
    PARAMETER_SPELLING_TAGS: {
        SearchParameter.QUERY: "tags",
        SearchParameter.MINIMUM_SIZE: "minimumSize",
        SearchParameter.LICENSE: "license",
        SearchParameter.LANGUAGE: "language",
        SearchParameter.PAGE: "page",
        SearchParameter.PAGE_SIZE: "pageSize",
    },
    PARAMETER_SPELLING_HYPHENATED: {
        SearchParameter.QUERY: "query",
        SearchParameter.MINIMUM_SIZE: "minimum-size",
        SearchParameter.LICENSE: "license",
        SearchParameter.LANGUAGE: "language",
        SearchParameter.PAGE: "page",
        SearchParameter.PAGE_SIZE: "page-size",
    },
}


def wire_name(parameter: SearchParameter, spelling: str) -> str:
    """Return the endpoint-facing name of a parameter.

    Raises:
        KeyError: If the spelling is unknown
    """
    return PARAMETER_SPELLINGS[spelling][parameter]
