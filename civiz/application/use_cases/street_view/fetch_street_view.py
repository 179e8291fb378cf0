# Standard library imports
import logging
from typing import TYPE_CHECKING

# Local application imports
from ...dto.street_view_dto import StreetViewRequest, StreetViewResponse

if TYPE_CHECKING:
    from ....infrastructure.external.street_view_client import StreetViewClient

logger = logging.getLogger(__name__)


class FetchStreetViewUseCase:
    """Use case for fetching the street-level photo of an address"""
    
    def __init__(self, street_view_client: "StreetViewClient") -> None:
        self.street_view_client = street_view_client
    
    async def execute(self, request: StreetViewRequest) -> StreetViewResponse:
        """
        Raises:
            StreetViewError: If the provider could not return an image
            ConfigurationError: If no Google Maps API key is configured
        """
        image_data = await self.street_view_client.fetch(request.address)
        logger.info(f"Fetched street view for '{request.address}'")
        return StreetViewResponse(image_data=image_data, address=request.address)
