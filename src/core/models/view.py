"""View models handed to the render capability.

These shapes are free of wire-format concerns: every field is already
a display string, a link, or a trigger the view can act on.
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class ViewModel(BaseModel):
    model_config = ConfigDict(frozen=True, protected_namespaces=())


class ViewState(str, Enum):
    """Which pane is visible."""

    LISTING = "listing"
    DETAILING = "detailing"


class PreviewEntry(ViewModel):
    """One search hit: a preview image and the reference to its full record."""

    preview_url: str
    detail_ref: str
    title: str = ""
    alt_text: str = ""
    license: str = ""
    contributors: str = ""


class ListingViewModel(ViewModel):
    total_count: int = 0
    entries: list[PreviewEntry] = Field(default_factory=list)
    page: int | None = None
    page_size: int | None = None
    language: str | None = None

    @property
    def is_empty(self) -> bool:
        return not self.entries


class LicenseDisplay(ViewModel):
    text: str
    url: str | None = None


class LinkDisplay(ViewModel):
    text: str
    href: str


class TagTrigger(ViewModel):
    """Clickable tag. `query` is the literal tag, reused as the next search query."""

    label: str
    query: str


class DetailViewModel(ViewModel):
    image_id: str
    title_lines: list[str]
    alt_text_lines: list[str]
    caption_lines: list[str]
    image_url: str
    size: int
    size_display: str
    content_type: str
    license: LicenseDisplay
    origin: LinkDisplay
    creators: str
    processors: str
    rightsholders: str
    tags: list[TagTrigger]
    supported_languages: list[str]
    created: str
    created_by: str
    model_release: str = ""
    editor_notes: list[str] = Field(default_factory=list)


class Notice(ViewModel):
    """Non-blocking failure indicator shown next to the current view."""

    kind: Literal["transport_failure", "mapping_error"]
    message: str
    error_code: str
