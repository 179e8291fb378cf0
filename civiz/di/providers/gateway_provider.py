import logging
from typing import TYPE_CHECKING

from ...domain.exceptions import ConfigurationError
from ...domain.gateways.vision_generation_gateway import VisionGenerationGateway
from ...infrastructure.external.mock_image_gateway import MockImageGateway
from ...infrastructure.external.openai_image_gateway import OpenAIImageGateway

if TYPE_CHECKING:
    from ..container import DIContainer

logger = logging.getLogger(__name__)


class GatewayProvider:
    """Generation gateway provider - wires the gateway contract to the configured backend"""
    
    BACKENDS = {
        "mock": lambda settings: MockImageGateway(
            delay_seconds=settings.mock_generation_delay_seconds
        ),
        "openai": lambda settings: OpenAIImageGateway(
            api_key=settings.openai_api_key,
            base_url=settings.openai_base_url,
            model=settings.image_model,
            size=settings.image_size,
            quality=settings.image_quality,
            timeout=settings.generation_timeout_seconds,
        ),
    }
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        """
        Register the VisionGenerationGateway implementation selected by
        GENERATION_BACKEND.
        
        Raises:
            ConfigurationError: If the backend name is unknown
        """
        if container.is_registered(VisionGenerationGateway):
            return
        
        backend = container.settings.generation_backend
        build_gateway = GatewayProvider.BACKENDS.get(backend)
        if build_gateway is None:
            raise ConfigurationError(
                f"Unknown GENERATION_BACKEND '{backend}'. "
                f"Expected one of: {', '.join(sorted(GatewayProvider.BACKENDS))}"
            )
        
        container.register_singleton(VisionGenerationGateway, build_gateway(container.settings))
        logger.info(f"Using '{backend}' image generation backend")
