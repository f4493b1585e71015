"""
Map full image records to the detail view.

The detail view shows one image's titles, alt-texts, captions,
copyright and tags. Tags are turned into triggers whose payload is
the literal tag, so selecting one can run a new search for it.
"""

from collections.abc import Sequence
from typing import Any

from core.models.image import (
    Author,
    EditorNote,
    ImageMetaInformation,
    License,
)
from core.models.view import (
    DetailViewModel,
    LicenseDisplay,
    LinkDisplay,
    TagTrigger,
)
from core.utils.constants import AUTHOR_SEPARATOR, format_file_size
from core.utils.validators import parse_payload


def parse_image_meta(payload: Any) -> ImageMetaInformation:
    """Validate a raw record body.

    Raises:
        MappingError: If a required field (e.g. `imageUrl`,
            `copyright.license`) is missing
    """
    return parse_payload(ImageMetaInformation, payload)


def language_line(text: str, language: str) -> str:
    """Render a text with its language, e.g. `Sunset (en)`."""
    return f"{text} ({language})"


def join_authors(authors: Sequence[Author]) -> str:
    """Join author names in the given order.

    For n authors exactly n-1 separators appear; no trailing separator.
    """
    return AUTHOR_SEPARATOR.join(author.name for author in authors)


def license_display(license: License) -> LicenseDisplay:
    return LicenseDisplay(text=license.description, url=license.url or None)


def editor_note_line(note: EditorNote) -> str:
    return f"{note.timestamp} {note.updated_by}: {note.note}"


def tag_triggers(tags: Sequence[str]) -> list[TagTrigger]:
    return [TagTrigger(label=tag, query=tag) for tag in tags]


def map_image_meta(record: ImageMetaInformation | Any) -> DetailViewModel:
    """
    Turn a full record into the detail view model.

    Accepts either a validated `ImageMetaInformation` or the raw
    response body. Optional fields (editor notes, model release)
    become empty display values.

    Raises:
        MappingError: If a raw body lacks a required field
    """
    if not isinstance(record, ImageMetaInformation):
        record = parse_image_meta(record)

    copyright = record.copyright

    return DetailViewModel(
        image_id=record.id,
        title_lines=[language_line(record.title.title, record.title.language)],
        alt_text_lines=[language_line(record.alttext.alttext, record.alttext.language)],
        caption_lines=[language_line(record.caption.caption, record.caption.language)],
        image_url=record.image_url,
        size=record.size,
        size_display=format_file_size(record.size),
        content_type=record.content_type,
        license=license_display(copyright.license),
        origin=LinkDisplay(text=copyright.origin, href=copyright.origin),
        creators=join_authors(copyright.creators),
        processors=join_authors(copyright.processors),
        rightsholders=join_authors(copyright.rightsholders),
        tags=tag_triggers(record.tags.tags),
        supported_languages=list(record.supported_languages),
        created=record.created,
        created_by=record.created_by,
        model_release=record.model_release or "",
        editor_notes=[editor_note_line(note) for note in record.editor_notes or []],
    )
