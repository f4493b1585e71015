"""
View-state controller for the catalog client.

Owns the two-pane state (Listing / Detailing) and sequences every user
action: build query, issue request, map response, update state, render.
"""

from collections.abc import Awaitable
from typing import TypeVar

from aws_lambda_powertools import Logger

from core.infrastructure.http.transport import Transport
from core.models.errors import (
    CatalogClientError,
    MappingError,
    StaleResponseError,
    TransportFailure,
)
from core.models.view import Notice, ViewState
from core.utils.settings import CatalogSettings
from handlers.get_image_meta.service import GetImageMetaService
from handlers.search_images.models import SearchInputs
from handlers.search_images.service import SearchService

from .models import ControllerState
from .render import Renderer

logger = Logger(utc=True)

ResultT = TypeVar("ResultT")


class ViewStateController:
    """Drive the catalog view through search, result selection and tag selection.

    Every outbound request is tagged with a sequence number. A response is
    applied only if its number is still the latest issued; anything older is
    discarded without touching the state.
    """

    def __init__(
        self,
        *,
        search_service: SearchService,
        meta_service: GetImageMetaService,
        renderer: Renderer,
        state: ControllerState | None = None,
    ) -> None:
        self.search_service = search_service
        self.meta_service = meta_service
        self.renderer = renderer
        self._state = state or ControllerState()
        self._sequence = 0

    @classmethod
    def from_transport(
        cls,
        transport: Transport,
        renderer: Renderer,
        settings: CatalogSettings | None = None,
    ) -> "ViewStateController":
        return cls(
            search_service=SearchService(transport, settings),
            meta_service=GetImageMetaService(transport),
            renderer=renderer,
        )

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def sequence(self) -> int:
        """Number of the most recently issued request."""
        return self._sequence

    async def search(self, inputs: SearchInputs) -> ControllerState:
        """Run a search and show its results in the listing pane.

        The detail pane is hidden as soon as the search starts.
        """
        sequence = self._next_sequence()

        self._update(
            view=ViewState.LISTING,
            detail=None,
            notice=None,
            inputs=inputs,
        )

        try:
            listing = await self._await_current(
                sequence, self.search_service.search(inputs)
            )
        except StaleResponseError as exc:
            logger.debug("Discarding stale search response", extra=exc.details)
            return self._state
        except (TransportFailure, MappingError) as exc:
            return self._surface(exc)

        return self._update(listing=listing)

    async def select_result(self, detail_ref: str) -> ControllerState:
        """Open the full record behind a search result.

        On failure the current state is kept and a notice is shown;
        no partial detail is ever displayed.
        """
        sequence = self._next_sequence()

        try:
            detail = await self._await_current(
                sequence, self.meta_service.fetch(detail_ref)
            )
        except StaleResponseError as exc:
            logger.debug("Discarding stale record response", extra=exc.details)
            return self._state
        except (TransportFailure, MappingError) as exc:
            return self._surface(exc)

        return self._update(view=ViewState.DETAILING, detail=detail, notice=None)

    async def select_tag(self, tag: str) -> ControllerState:
        """Search again with `tag` as the query, keeping the other filters."""
        return await self.search(self._state.inputs.with_query(tag))

    def _next_sequence(self) -> int:
        self._sequence += 1
        return self._sequence

    def _ensure_current(self, sequence: int) -> None:
        if sequence != self._sequence:
            raise StaleResponseError(
                message="Response superseded by a newer request",
                details={"sequence": sequence, "latest": self._sequence},
            )

    async def _await_current(
        self,
        sequence: int,
        pending: Awaitable[ResultT],
    ) -> ResultT:
        """Await a request, then check it is still the latest one.

        Raises:
            StaleResponseError: If a newer request was issued meanwhile,
                whether this one succeeded or failed
        """
        try:
            result = await pending
        except CatalogClientError:
            self._ensure_current(sequence)
            raise

        self._ensure_current(sequence)
        return result

    def _surface(self, exc: TransportFailure | MappingError) -> ControllerState:
        kind = "mapping_error" if isinstance(exc, MappingError) else "transport_failure"

        logger.warning(
            "Request failed, keeping previous view",
            extra={
                "error_code": exc.error_code,
                "error": exc.message,
                "details": exc.details,
            },
        )

        return self._update(
            notice=Notice(kind=kind, message=exc.message, error_code=exc.error_code)
        )

    def _update(self, **changes: object) -> ControllerState:
        self._state = self._state.model_copy(update=changes)
        self.renderer.render(self._state.current_view_model, self._state)
        return self._state
