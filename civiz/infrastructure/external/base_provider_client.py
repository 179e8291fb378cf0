# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)


class BaseProviderClient:
    """
    Base class for external provider clients.
    
    Provides common initialization for base_url, timeout and the HTTP client.
    """
    
    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        """
        Initialize base provider client.
        
        Args:
            base_url: Base URL of the provider API.
            timeout: Request timeout in seconds.
            http_client: Client to use; the shared pooled client when None.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._http_client = http_client
    
    @property
    def client(self) -> httpx.AsyncClient:
        return self._http_client or get_shared_http_client()
