"""Client configuration loaded from environment variables."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator

from core.filters.parameter_names import PARAMETER_SPELLINGS
from core.utils.constants import (
    DEFAULT_BASE_URL,
    DEFAULT_PARAMETER_SPELLING,
    DEFAULT_REQUEST_TIMEOUT,
    DEFAULT_SEARCH_PATH,
    ENV_CATALOG_BASE_URL,
    ENV_CATALOG_PARAMETER_SPELLING,
    ENV_CATALOG_REQUEST_TIMEOUT,
    ENV_CATALOG_SEARCH_PATH,
)


class CatalogSettings(BaseModel):
    """Where the catalog lives and how to talk to it."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    base_url: str = Field(default=DEFAULT_BASE_URL, min_length=1)
    search_path: str = Field(default=DEFAULT_SEARCH_PATH, min_length=1)
    parameter_spelling: str = Field(default=DEFAULT_PARAMETER_SPELLING)
    request_timeout: float = Field(default=DEFAULT_REQUEST_TIMEOUT, gt=0)

    @field_validator("parameter_spelling")
    @classmethod
    def validate_parameter_spelling(cls, value: str) -> str:
        if value not in PARAMETER_SPELLINGS:
            allowed = ", ".join(sorted(PARAMETER_SPELLINGS))
            raise ValueError(
                f"Invalid parameter spelling '{value}'. Expected one of: {allowed}"
            )
        return value

    @classmethod
    def from_env(cls) -> "CatalogSettings":
        """Build settings from `CATALOG_*` environment variables.

        Unset variables fall back to the defaults in `core.utils.constants`.
        """
        values = {
            "base_url": os.getenv(ENV_CATALOG_BASE_URL),
            "search_path": os.getenv(ENV_CATALOG_SEARCH_PATH),
            "parameter_spelling": os.getenv(ENV_CATALOG_PARAMETER_SPELLING),
            "request_timeout": os.getenv(ENV_CATALOG_REQUEST_TIMEOUT),
        }
        return cls(**{key: value for key, value in values.items() if value is not None})
