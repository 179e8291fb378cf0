"""External service clients for image generation and street imagery"""

from .openai_image_gateway import OpenAIImageGateway
from .mock_image_gateway import MockImageGateway
from .street_view_client import StreetViewClient

__all__ = [
    "OpenAIImageGateway",
    "MockImageGateway",
    "StreetViewClient",
]
