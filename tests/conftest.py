"""
Pytest configuration and fixtures for catalog client tests.
Provides sample catalog payloads, a scripted transport and a recording renderer.
"""

import asyncio
from collections.abc import Callable
from typing import Any

import pytest

from core.infrastructure.http.transport import TransportResponse
from core.utils.constants import (
    ENV_CATALOG_BASE_URL,
    ENV_CATALOG_PARAMETER_SPELLING,
    ENV_CATALOG_REQUEST_TIMEOUT,
    ENV_CATALOG_SEARCH_PATH,
)


class ScriptedTransport:
    """Transport double that answers from a routing table.

    Routes are keyed by URL and, optionally, by the exact parameter pairs.
    A route can be gated on an `asyncio.Event` to control the order in
    which concurrent requests resolve.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, list[tuple[str, str]]]] = []
        self._routes: dict[tuple[str, tuple[tuple[str, str], ...] | None], Any] = {}

    def add(
        self,
        url: str,
        response: TransportResponse,
        *,
        params: list[tuple[str, str]] | None = None,
        gate: asyncio.Event | None = None,
    ) -> None:
        key = (url, tuple(params) if params is not None else None)
        self._routes[key] = (response, gate)

    async def get(self, url: str, params: Any = ()) -> TransportResponse:
        pairs = list(params)
        self.calls.append((url, pairs))

        route = self._routes.get((url, tuple(pairs))) or self._routes.get((url, None))
        if route is None:
            return TransportResponse(ok=False, status=404, error_info="no route")

        response, gate = route
        if gate is not None:
            await gate.wait()
        return response


class RecordingRenderer:
    """Renderer double that keeps every render call."""

    def __init__(self) -> None:
        self.calls: list[tuple[Any, Any]] = []

    def render(self, view_model: Any, state: Any) -> None:
        self.calls.append((view_model, state))

    @property
    def last(self) -> tuple[Any, Any]:
        return self.calls[-1]


@pytest.fixture(autouse=True)
def clean_catalog_env(monkeypatch) -> None:
    """Keep CATALOG_* variables from the shell out of the tests."""
    for name in (
        ENV_CATALOG_BASE_URL,
        ENV_CATALOG_SEARCH_PATH,
        ENV_CATALOG_PARAMETER_SPELLING,
        ENV_CATALOG_REQUEST_TIMEOUT,
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def transport() -> ScriptedTransport:
    """
    Scripted transport with no routes.

    Usage:
        transport.add("/images", ok_response(body), params=[("query", "cat")])
    """
    return ScriptedTransport()


@pytest.fixture
def renderer() -> RecordingRenderer:
    return RecordingRenderer()


@pytest.fixture
def ok_response() -> Callable[[Any], TransportResponse]:
    """
    Helper to build a successful transport response.

    Usage:
        response = ok_response({"totalCount": 0, "results": []})
    """

    def _ok(body: Any) -> TransportResponse:
        return TransportResponse(ok=True, status=200, body=body)

    return _ok


@pytest.fixture
def make_summary() -> Callable[..., dict[str, Any]]:
    """
    Helper to build an ImageMetaSummary payload.

    Usage:
        summary = make_summary("1", title="Sunset")
    """

    def _make(image_id: str, title: str = "Sunset") -> dict[str, Any]:
        return {
            "id": image_id,
            "title": {"title": title, "language": "en"},
            "contributors": ["Ola Nordmann", "Kari Nordmann"],
            "altText": {"alttext": f"Alt for {title}", "language": "en"},
            "previewUrl": f"https://catalog.test/raw/{image_id}.jpg",
            "metaUrl": f"https://catalog.test/images/{image_id}",
            "license": "CC-BY-4.0",
            "supportedLanguages": ["en", "nb"],
        }

    return _make


@pytest.fixture
def make_search_result(make_summary) -> Callable[..., dict[str, Any]]:
    """
    Helper to build a SearchResult payload from image ids.

    Usage:
        body = make_search_result("1", "2", "3")
    """

    def _make(*image_ids: str) -> dict[str, Any]:
        return {
            "totalCount": len(image_ids),
            "page": 1,
            "pageSize": 10,
            "language": "en",
            "results": [make_summary(image_id, title=f"Image {image_id}") for image_id in image_ids],
        }

    return _make


@pytest.fixture
def sample_image_meta() -> dict[str, Any]:
    """Full ImageMetaInformation payload for testing."""
    return {
        "id": "1",
        "metaUrl": "https://catalog.test/images/1",
        "title": {"title": "Sunset", "language": "en"},
        "alttext": {"alttext": "Sun setting over the sea", "language": "en"},
        "imageUrl": "https://catalog.test/raw/1.jpg",
        "size": 2048,
        "contentType": "image/jpeg",
        "copyright": {
            "license": {
                "license": "CC-BY-4.0",
                "description": "Creative Commons Attribution 4.0 International",
                "url": "https://creativecommons.org/licenses/by/4.0/",
            },
            "origin": "https://example.org/sunset",
            "creators": [
                {"type": "Photographer", "name": "Ola Nordmann"},
                {"type": "Photographer", "name": "Kari Nordmann"},
                {"type": "Artist", "name": "Per Hansen"},
            ],
            "processors": [{"type": "Editor", "name": "Anne Berg"}],
            "rightsholders": [],
        },
        "tags": {"tags": ["sunset", "sea", "evening"], "language": "en"},
        "caption": {"caption": "An evening by the sea", "language": "en"},
        "supportedLanguages": ["en", "nb"],
        "created": "2017-04-01T12:15:32Z",
        "createdBy": "editor-1",
        "modelRelease": "not-applicable",
        "editorNotes": [
            {
                "timestamp": "2017-04-01T12:15:32Z",
                "updatedBy": "editor-1",
                "note": "Image created.",
            }
        ],
    }
