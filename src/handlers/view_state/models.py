"""
State model for the two-pane catalog view.
"""

from pydantic import BaseModel, ConfigDict, Field

from core.models.view import (
    DetailViewModel,
    ListingViewModel,
    Notice,
    ViewState,
)
from handlers.search_images.models import SearchInputs


class ControllerState(BaseModel):
    """
    Snapshot of what the view shows.

    - view: which pane is visible
    - listing: the current result set (kept while the detail pane is open)
    - detail: the open record, only set while detailing
    - notice: the last surfaced failure, if any
    - inputs: the inputs of the last search started
    """

    model_config = ConfigDict(frozen=True)

    view: ViewState = ViewState.LISTING
    listing: ListingViewModel = Field(default_factory=ListingViewModel)
    detail: DetailViewModel | None = None
    notice: Notice | None = None
    inputs: SearchInputs = Field(default_factory=SearchInputs)

    @property
    def detail_visible(self) -> bool:
        return self.view is ViewState.DETAILING and self.detail is not None

    @property
    def current_view_model(self) -> ListingViewModel | DetailViewModel:
        if self.detail_visible and self.detail is not None:
            return self.detail
        return self.listing
