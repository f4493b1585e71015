"""Render capability and a plain-text implementation of it."""

import sys
from typing import Protocol, TextIO

from core.models.view import DetailViewModel, ListingViewModel

from .models import ControllerState

ViewModelT = ListingViewModel | DetailViewModel


class Renderer(Protocol):
    """Draws a view model onto the visible surface. Always succeeds."""

    def render(self, view_model: ViewModelT, state: ControllerState) -> None: ...


class ConsoleRenderer:
    """Writes listings and records to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def render(self, view_model: ViewModelT, state: ControllerState) -> None:
        if isinstance(view_model, DetailViewModel):
            lines = self.detail_lines(view_model)
        else:
            lines = self.listing_lines(view_model)

        if state.notice is not None:
            lines.append(f"! {state.notice.message} [{state.notice.error_code}]")

        self.stream.write("\n".join(lines) + "\n")

    @staticmethod
    def listing_lines(listing: ListingViewModel) -> list[str]:
        if listing.is_empty:
            return ["No results"]

        lines = [f"{listing.total_count} result(s)"]
        for number, entry in enumerate(listing.entries, start=1):
            lines.append(f"{number}. {entry.title} <{entry.preview_url}>")
        return lines

    @staticmethod
    def detail_lines(detail: DetailViewModel) -> list[str]:
        lines = [*detail.title_lines, *detail.alt_text_lines, *detail.caption_lines]
        lines.append(f"Image: {detail.image_url} ({detail.size_display}, {detail.content_type})")

        license_line = f"License: {detail.license.text}"
        if detail.license.url:
            license_line += f" <{detail.license.url}>"
        lines.append(license_line)

        lines.append(f"Origin: <{detail.origin.href}>")
        lines.append(f"Creators: {detail.creators}")
        if detail.processors:
            lines.append(f"Processors: {detail.processors}")
        if detail.rightsholders:
            lines.append(f"Rightsholders: {detail.rightsholders}")
        lines.append("Tags: " + " ".join(f"[{tag.label}]" for tag in detail.tags))
        lines.append("Languages: " + ", ".join(detail.supported_languages))
        lines.append(f"Created: {detail.created} by {detail.created_by}")
        if detail.model_release:
            lines.append(f"Model release: {detail.model_release}")
        lines.extend(f"Note: {note}" for note in detail.editor_notes)
        return lines
