"""
Pydantic models for search inputs.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchInputs(BaseModel):
    """
    User-supplied search inputs.

    Every field is independently optional:
    - query: tag / keyword string
    - minimum_size: minimum pixel size, passed through verbatim
    - license, language: exact-match filters
    - page, page_size: page selection exposed by the catalog contract

    Blank strings are treated as absent. Numeric fields accept any value;
    values that are neither int nor str are kept as their string form,
    leaving rejection to the endpoint.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    query: str | None = Field(None, description="Tags or keywords to search for")
    minimum_size: int | str | None = Field(
        None,
        description="Minimum image size in pixels (not range-checked)",
    )
    license: str | None = Field(None, description="License code filter")
    language: str | None = Field(None, description="Language code filter")
    page: int | str | None = Field(None, description="Page number")
    page_size: int | str | None = Field(None, description="Results per page")

    @field_validator("minimum_size", "page", "page_size", mode="before")
    @classmethod
    def passthrough_numeric(cls, value: Any) -> Any:
        if value is None or isinstance(value, (int, str)):
            return value
        return str(value)

    @field_validator(
        "query", "minimum_size", "license", "language", "page", "page_size", mode="after"
    )
    @classmethod
    def blank_to_none(cls, value: int | str | None) -> int | str | None:
        if isinstance(value, str) and not value:
            return None
        return value

    def with_query(self, query: str) -> "SearchInputs":
        """Return a copy of these inputs searching for `query` instead."""
        return self.model_copy(update={"query": query})
