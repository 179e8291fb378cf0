from .fetch_street_view import FetchStreetViewUseCase

__all__ = ["FetchStreetViewUseCase"]
