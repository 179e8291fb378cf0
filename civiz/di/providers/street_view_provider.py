from typing import TYPE_CHECKING

from ...application.use_cases.street_view.fetch_street_view import FetchStreetViewUseCase
from ...infrastructure.external.street_view_client import StreetViewClient

if TYPE_CHECKING:
    from ..container import DIContainer


class StreetViewProvider:
    """Street View provider - registers the client and its use case"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        settings = container.settings
        
        # Register StreetViewClient as singleton (shared across use cases)
        if not container.is_registered(StreetViewClient):
            container.register_singleton(
                StreetViewClient,
                StreetViewClient(
                    api_key=settings.google_maps_api_key,
                    base_url=settings.street_view_url,
                    size=settings.street_view_size,
                )
            )
        
        container.register_factory(
            FetchStreetViewUseCase,
            lambda: FetchStreetViewUseCase(street_view_client=container.get(StreetViewClient))
        )
