"""Write-side contracts of the catalog API.

These shapes document the write API. Nothing in this client sends or
receives them.
"""

from pydantic import StrictStr

from core.models.base import CatalogModel
from core.models.image import Copyright


class NewImageMetaInformation(CatalogModel):
    title: StrictStr
    alttext: StrictStr
    copyright: Copyright
    tags: list[StrictStr]
    caption: StrictStr
    language: StrictStr
    model_released: StrictStr | None = None


class UpdateImageMetaInformation(CatalogModel):
    language: StrictStr
    title: StrictStr | None = None
    alttext: StrictStr | None = None
    copyright: Copyright | None = None
    tags: list[StrictStr] | None = None
    caption: StrictStr | None = None
    model_released: StrictStr | None = None


class ValidationMessage(CatalogModel):
    field: StrictStr
    message: StrictStr


class ValidationError(CatalogModel):
    """Error body returned by the write API when a payload is rejected."""

    code: StrictStr
    description: StrictStr
    messages: list[ValidationMessage]
    occurred_at: StrictStr
