"""Search request and response contracts."""

from pydantic import Field, StrictBool, StrictInt, StrictStr

from core.models.base import CatalogModel
from core.models.image import ImageMetaSummary


class SearchParams(CatalogModel):
    """Search parameters understood by the catalog.

    Every field is optional. Absence means no filter on that dimension;
    no default is substituted client-side.
    """

    query: StrictStr | None = None
    license: StrictStr | None = None
    language: StrictStr | None = None
    minimum_size: StrictInt | None = None
    include_copyrighted: StrictBool | None = None
    sort: StrictStr | None = None
    page: StrictInt | None = None
    page_size: StrictInt | None = None
    scroll_id: StrictStr | None = None
    model_released: list[StrictStr] | None = None


class SearchResult(CatalogModel):
    """Page of image summaries, in server order."""

    total_count: StrictInt = Field(..., ge=0, description="Total number of matching images")
    page: StrictInt | None = None
    page_size: StrictInt | None = None
    language: StrictStr | None = None
    results: list[ImageMetaSummary] = Field(default_factory=list)


class TagsSearchResult(CatalogModel):
    """Page of tag strings returned by the tag search endpoint."""

    total_count: StrictInt = Field(..., ge=0)
    page: StrictInt
    page_size: StrictInt
    language: StrictStr
    results: list[StrictStr] = Field(default_factory=list)
