"""Base model for catalog wire contracts."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Immutable shape exchanged with the catalog endpoint.

    Attributes are snake_case in Python and camelCase on the wire.
    Unknown wire fields are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
        protected_namespaces=(),
    )
