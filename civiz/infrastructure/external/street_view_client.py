# Standard library imports
import base64
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from .base_provider_client import BaseProviderClient
from ...core.config import get_settings
from ...domain.constants.media_constants import STREET_VIEW_MIME
from ...domain.exceptions import ConfigurationError, StreetViewError
from ...domain.models.generation import FailureReason

logger = logging.getLogger(__name__)


def classify_street_view_error(error_text: str) -> FailureReason:
    text = (error_text or "").lower()
    if "billing" in text:
        return FailureReason.QUOTA_EXHAUSTED
    if "invalid" in text or "expired" in text:
        return FailureReason.INVALID_CREDENTIALS
    return FailureReason.UNKNOWN


class StreetViewClient(BaseProviderClient):
    """
    HTTP client for the Google Street View static image API.
    
    Returns the street-level photo of an address as a data URL that clients
    can display directly.
    """
    
    FIELD_OF_VIEW = 90
    PITCH = 0
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        size: Optional[str] = None,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        super().__init__(
            base_url=base_url or settings.street_view_url,
            timeout=timeout,
            http_client=http_client,
        )
        self.api_key = settings.google_maps_api_key if api_key is None else api_key
        self.size = size or settings.street_view_size
    
    async def fetch(self, address: str) -> str:
        """
        Fetch the Street View image for an address.
        
        Args:
            address: Free-text location
            
        Returns:
            data:image/jpeg;base64 URL of the image
            
        Raises:
            ConfigurationError: If no API key is configured
            StreetViewError: If the provider request fails
        """
        if not self.api_key:
            raise ConfigurationError(
                "Google Maps API key not configured",
                user_message="Google Maps API key not configured",
            )
        
        params = {
            "size": self.size,
            "location": address,
            "key": self.api_key,
            "fov": self.FIELD_OF_VIEW,
            "pitch": self.PITCH,
        }
        
        try:
            response = await self.client.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout while fetching street view for '{address}'")
            raise StreetViewError(f"Street View request timed out: {e}", FailureReason.TIMEOUT) from e
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Street View API error: {e.response.status_code} - {e.response.text}"
            )
            raise StreetViewError(
                f"Street View API returned {e.response.status_code}",
                classify_street_view_error(e.response.text),
            ) from e
        except httpx.HTTPError as e:
            logger.error(f"Transport error fetching street view: {e}", exc_info=True)
            raise StreetViewError(str(e), FailureReason.UNKNOWN) from e
        
        encoded = base64.b64encode(response.content).decode("utf-8")
        return f"data:{STREET_VIEW_MIME};base64,{encoded}"
