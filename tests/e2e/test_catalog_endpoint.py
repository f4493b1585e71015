import pytest

from core.models.view import ViewState
from handlers.search_images.models import SearchInputs
from handlers.view_state.controller import ViewStateController


class _NullRenderer:
    def render(self, view_model, state) -> None:
        pass


@pytest.mark.asyncio
async def test_search_returns_listing(e2e_transport, e2e_settings) -> None:
    controller = ViewStateController.from_transport(e2e_transport, _NullRenderer(), e2e_settings)

    state = await controller.search(SearchInputs())

    assert state.notice is None
    assert state.listing.total_count >= len(state.listing.entries)


@pytest.mark.asyncio
async def test_open_first_result(e2e_transport, e2e_settings) -> None:
    controller = ViewStateController.from_transport(e2e_transport, _NullRenderer(), e2e_settings)

    state = await controller.search(SearchInputs())
    if state.listing.is_empty:
        pytest.skip("Catalog has no images")

    state = await controller.select_result(state.listing.entries[0].detail_ref)

    assert state.notice is None
    assert state.view is ViewState.DETAILING
    assert state.detail is not None
    assert state.detail.image_url
