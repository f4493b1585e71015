"""
E2E fixtures against a running image catalog.

Set CATALOG_E2E_BASE_URL to the catalog root to enable these tests.
"""

import os

import pytest

from core.infrastructure.http.transport import RequestsTransport
from core.utils.settings import CatalogSettings

ENV_E2E_BASE_URL = "CATALOG_E2E_BASE_URL"


@pytest.fixture(scope="session")
def e2e_settings() -> CatalogSettings:
    base_url = os.getenv(ENV_E2E_BASE_URL)
    if not base_url:
        pytest.skip(f"{ENV_E2E_BASE_URL} is not set")

    return CatalogSettings.from_env().model_copy(update={"base_url": base_url})


@pytest.fixture
def e2e_transport(e2e_settings) -> RequestsTransport:
    return RequestsTransport(e2e_settings)
