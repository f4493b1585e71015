"""
Business logic for fetching one image's full metadata record.
"""

from aws_lambda_powertools import Logger

from core.infrastructure.http.transport import Transport, raise_for_transport
from core.mappers.detail_mapper import map_image_meta
from core.models.errors import MappingError
from core.models.view import DetailViewModel

logger = Logger(utc=True)


class GetImageMetaService:
    """Application service responsible for retrieving image records.

    This service orchestrates:
    - Fetching the record at a summary's detail reference
    - Validating required record fields
    - Mapping the record to the detail view model
    """

    def __init__(self, transport: Transport) -> None:
        self.transport = transport

    async def fetch(self, detail_ref: str) -> DetailViewModel:
        """Fetch and map the record at `detail_ref`.

        Raises:
            TransportFailure: If the request failed or was rejected
            MappingError: If the record lacks a field the view requires
        """
        logger.debug("Fetching image record", extra={"detail_ref": detail_ref})

        response = await self.transport.get(detail_ref)
        raise_for_transport(response, url=detail_ref)

        try:
            detail = map_image_meta(response.body)
        except MappingError as exc:
            logger.error(
                "Image record is incomplete",
                extra={"detail_ref": detail_ref, "errors": exc.details.get("errors")},
            )
            raise

        logger.info(
            "Image record fetched",
            extra={"detail_ref": detail_ref, "image_id": detail.image_id},
        )

        return detail
