from .gateway_provider import GatewayProvider
from .store_provider import StoreProvider
from .vision_provider import VisionProvider
from .session_provider import SessionProvider
from .funding_provider import FundingProvider
from .street_view_provider import StreetViewProvider


__all__ = [
    "GatewayProvider",
    "StoreProvider",
    "VisionProvider",
    "SessionProvider",
    "FundingProvider",
    "StreetViewProvider",
]
