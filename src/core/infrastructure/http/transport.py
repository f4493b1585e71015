"""HTTP transport for talking to the catalog endpoint."""

import asyncio
from collections.abc import Sequence
from typing import Any, Protocol
from urllib.parse import urlsplit

from aws_lambda_powertools import Logger
from pydantic import BaseModel, ConfigDict
import requests

from core.models.errors import TransportFailure
from core.utils.constants import (
    DEFAULT_ACCEPT_HEADER,
    ERROR_CODE_INVALID_JSON,
    ERROR_CODE_TRANSPORT_FAILED,
    ERROR_CODE_UNEXPECTED_STATUS,
    MAX_ERROR_INFO_LENGTH,
)
from core.utils.settings import CatalogSettings

logger = Logger(utc=True)

QueryParams = Sequence[tuple[str, str]]


class TransportResponse(BaseModel):
    """Outcome of a single GET: either a decoded body or error information."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    status: int | None = None
    body: Any = None
    error_info: str | None = None


class Transport(Protocol):
    """Transport capability consumed by the services (controller-facing)."""

    async def get(self, url: str, params: QueryParams = ()) -> TransportResponse: ...


class RequestsTransport:
    """GET requests against the catalog using a `requests` session.

    This transport:
    - Resolves relative URLs against the configured base URL
    - Runs the blocking call in a worker thread
    - Makes exactly one attempt, no retries
    - Never raises; failures come back as `ok=False` responses
    """

    def __init__(
        self,
        settings: CatalogSettings | None = None,
        *,
        session: requests.Session | None = None,
    ) -> None:
        self.settings = settings or CatalogSettings.from_env()
        self.session = session or requests.Session()
        self.session.headers["Accept"] = DEFAULT_ACCEPT_HEADER

    def resolve_url(self, url: str) -> str:
        """Append a path to the base URL. Absolute URLs are returned unchanged.

        Any path prefix in the base URL is kept, e.g. `/image-api/v2` + `/images`.
        """
        if urlsplit(url).scheme:
            return url
        return self.settings.base_url.rstrip("/") + "/" + url.lstrip("/")

    async def get(self, url: str, params: QueryParams = ()) -> TransportResponse:
        return await asyncio.to_thread(self._get, url, list(params))

    def _get(self, url: str, params: list[tuple[str, str]]) -> TransportResponse:
        full_url = self.resolve_url(url)

        logger.debug(
            "Sending catalog request",
            extra={"url": full_url, "params": params},
        )

        try:
            response = self.session.get(
                full_url,
                params=params,
                timeout=self.settings.request_timeout,
            )
        except requests.RequestException as exc:
            logger.warning(
                "Catalog request failed",
                extra={"url": full_url, "error": str(exc)},
            )
            return TransportResponse(ok=False, error_info=str(exc))

        if not 200 <= response.status_code < 300:
            logger.warning(
                "Catalog returned non-success status",
                extra={"url": full_url, "status": response.status_code},
            )
            return TransportResponse(
                ok=False,
                status=response.status_code,
                error_info=(response.text or response.reason or "")[:MAX_ERROR_INFO_LENGTH],
            )

        try:
            body = response.json()
        except ValueError:
            logger.warning(
                "Catalog response is not valid JSON",
                extra={"url": full_url, "status": response.status_code},
            )
            return TransportResponse(
                ok=False,
                status=response.status_code,
                error_info="Response body is not valid JSON",
            )

        return TransportResponse(ok=True, status=response.status_code, body=body)


def raise_for_transport(response: TransportResponse, *, url: str) -> None:
    """Translate an unsuccessful transport response into `TransportFailure`."""
    if response.ok:
        return

    if response.status is None:
        error_code = ERROR_CODE_TRANSPORT_FAILED
        message = "Unable to reach the image catalog"
    elif response.status < 300:
        error_code = ERROR_CODE_INVALID_JSON
        message = "The image catalog returned an unreadable response"
    else:
        error_code = ERROR_CODE_UNEXPECTED_STATUS
        message = f"The image catalog responded with status {response.status}"

    raise TransportFailure(
        message=message,
        error_code=error_code,
        status=response.status,
        details={"url": url, "error_info": response.error_info},
    )
