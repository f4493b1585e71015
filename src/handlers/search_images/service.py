"""
Business logic for image search.
"""

from aws_lambda_powertools import Logger

from core.filters.search_query import QueryBuilder
from core.infrastructure.http.transport import Transport, raise_for_transport
from core.mappers.summary_mapper import map_search_result
from core.models.errors import MappingError
from core.models.view import ListingViewModel
from core.utils.settings import CatalogSettings

from .models import SearchInputs

logger = Logger(utc=True)


class SearchService:
    """Application service responsible for searching the catalog.

    This service coordinates:
    - Building the query parameters from user inputs
    - Issuing the search request
    - Mapping the response to the listing view model
    """

    def __init__(
        self,
        transport: Transport,
        settings: CatalogSettings | None = None,
    ) -> None:
        self.transport = transport
        self.settings = settings or CatalogSettings.from_env()
        self.query_builder = QueryBuilder(self.settings.parameter_spelling)

    def build_params(self, inputs: SearchInputs) -> list[tuple[str, str]]:
        return self.query_builder.build(
            query=inputs.query,
            minimum_size=inputs.minimum_size,
            license=inputs.license,
            language=inputs.language,
            page=inputs.page,
            page_size=inputs.page_size,
        )

    async def search(self, inputs: SearchInputs) -> ListingViewModel:
        """Search the catalog and return the listing to display.

        Raises:
            TransportFailure: If the request failed or was rejected
            MappingError: If the response lacks a required field
        """
        params = self.build_params(inputs)
        url = self.settings.search_path

        response = await self.transport.get(url, params)
        raise_for_transport(response, url=url)

        try:
            listing = map_search_result(response.body)
        except MappingError:
            logger.error(
                "Search response could not be mapped",
                extra={"url": url, "params": params},
            )
            raise

        logger.info(
            "Search completed",
            extra={
                "params": params,
                "total_count": listing.total_count,
                "count": len(listing.entries),
            },
        )

        return listing
