"""Image metadata records returned by the catalog."""

from pydantic import Field, StrictInt, StrictStr

from core.models.base import CatalogModel


class Author(CatalogModel):
    """A person or organisation credited on an image."""

    type: StrictStr = Field(..., description="Role of the author, e.g. Photographer")
    name: StrictStr = Field(..., description="Display name of the author")


class License(CatalogModel):
    """License attached to an image's copyright."""

    license: StrictStr = Field(..., description="License code, e.g. CC-BY-4.0")
    description: StrictStr = Field(..., description="Human readable license description")
    url: StrictStr | None = Field(None, description="Optional reference URL for the license")


class Copyright(CatalogModel):
    """Copyright information for an image.

    The author lists are in display order and are never re-sorted.
    """

    license: License
    origin: StrictStr = Field(..., description="Source URL of the image")
    creators: list[Author] = Field(default_factory=list)
    processors: list[Author] = Field(default_factory=list)
    rightsholders: list[Author] = Field(default_factory=list)
    agreement_id: StrictInt | None = None
    valid_from: StrictStr | None = None
    valid_to: StrictStr | None = None


class Image(CatalogModel):
    """One stored rendition of an image (e.g. the full-size file)."""

    url: StrictStr = Field(..., description="URL of the image file")
    size: StrictInt = Field(..., ge=0, description="Image size in bytes")
    content_type: StrictStr = Field(..., description="Media type of the image (e.g. image/jpeg)")


class ImageTitle(CatalogModel):
    title: StrictStr
    language: StrictStr


class ImageAltText(CatalogModel):
    alttext: StrictStr
    language: StrictStr


class ImageCaption(CatalogModel):
    caption: StrictStr
    language: StrictStr


class ImageTag(CatalogModel):
    tags: list[StrictStr] = Field(default_factory=list)
    language: StrictStr


class EditorNote(CatalogModel):
    """Append-only audit entry on a record."""

    timestamp: StrictStr
    updated_by: StrictStr
    note: StrictStr


class ImageMetaSummary(CatalogModel):
    """Lightweight preview of an image returned by search."""

    id: StrictStr = Field(..., description="Unique image identifier")
    title: ImageTitle
    contributors: list[StrictStr] = Field(default_factory=list)
    alt_text: ImageAltText
    preview_url: StrictStr = Field(..., description="URL of the preview image")
    meta_url: StrictStr = Field(..., description="Address of the full metadata record")
    license: StrictStr = Field(..., description="License label")
    supported_languages: list[StrictStr] = Field(default_factory=list)
    model_release: StrictStr | None = None
    editor_notes: list[StrictStr] | None = None


class ImageMetaInformation(CatalogModel):
    """Full metadata record for one image."""

    id: StrictStr = Field(..., description="Unique image identifier")
    meta_url: StrictStr = Field(..., description="Address of this record")
    title: ImageTitle
    alttext: ImageAltText
    image_url: StrictStr = Field(..., description="URL of the full-size image")
    size: StrictInt = Field(..., ge=0, description="Image size in bytes")
    content_type: StrictStr = Field(..., description="Media type of the image (e.g. image/jpeg)")
    copyright: Copyright
    tags: ImageTag
    caption: ImageCaption
    supported_languages: list[StrictStr] = Field(default_factory=list)
    created: StrictStr = Field(..., description="ISO-8601 creation timestamp")
    created_by: StrictStr
    model_release: StrictStr | None = None
    editor_notes: list[EditorNote] | None = None
