"""
Query building for catalog searches.

Turns independently-optional user inputs into the ordered parameter
pairs attached to the search endpoint. The builder is pure: it never
fails and never validates ranges, leaving rejection to the endpoint.
"""

from core.filters.parameter_names import SearchParameter, wire_name
from core.utils.constants import DEFAULT_PARAMETER_SPELLING

QueryPairs = list[tuple[str, str]]
InputValue = str | int | None


class QueryBuilder:
    """Build canonical search query parameters.

    Typical usage:
    1. Create a builder for the configured parameter spelling
    2. Call `build` with whatever inputs the user supplied
    3. Hand the resulting pairs to the transport
    """

    def __init__(self, spelling: str = DEFAULT_PARAMETER_SPELLING) -> None:
        # Fail on construction rather than on the first search.
        wire_name(SearchParameter.QUERY, spelling)
        self.spelling = spelling

    def build(
        self,
        *,
        query: InputValue = None,
        minimum_size: InputValue = None,
        license: InputValue = None,
        language: InputValue = None,
        page: InputValue = None,
        page_size: InputValue = None,
    ) -> QueryPairs:
        """
        Build the parameter pairs for a search.

        A parameter is emitted only when its input is present and, for
        strings, non-blank. Numbers are emitted in decimal form; any other
        value is passed through verbatim. Pairs always follow the order of
        `SearchParameter`.

        Example:
            build(query="sunset", minimum_size=1000)

            → [("query", "sunset"), ("minimumSize", "1000")]
        """
        inputs: dict[SearchParameter, InputValue] = {
            SearchParameter.QUERY: query,
            SearchParameter.MINIMUM_SIZE: minimum_size,
            SearchParameter.LICENSE: license,
            SearchParameter.LANGUAGE: language,
            SearchParameter.PAGE: page,
            SearchParameter.PAGE_SIZE: page_size,
        }

        pairs: QueryPairs = []
        for parameter in SearchParameter:
            value = self.normalize(inputs[parameter])
            if value is None:
                continue
            pairs.append((wire_name(parameter, self.spelling), value))

        return pairs

    @staticmethod
    def normalize(value: InputValue) -> str | None:
        """Return the wire form of an input, or None when it is absent."""
        if value is None:
            return None

        if isinstance(value, str):
            stripped = value.strip()
            return stripped or None

        return str(value)
