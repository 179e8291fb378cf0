# Standard library imports
import asyncio
import logging
import time
from typing import Optional

# Local application imports
from ...core.config import get_settings
from ...domain.gateways.vision_generation_gateway import VisionGenerationGateway
from ...domain.models.generation import GenerationResult

logger = logging.getLogger(__name__)


class MockImageGateway(VisionGenerationGateway):
    """
    Demo gateway that always succeeds after a short delay.
    
    Returns a random stock photo URL instead of calling an image model, so the
    full submission flow can run without provider credentials.
    """
    
    IMAGE_URL_TEMPLATE = "https://picsum.photos/1024/1024?random={seed}"
    
    def __init__(self, delay_seconds: Optional[float] = None):
        settings = get_settings()
        self.delay_seconds = settings.mock_generation_delay_seconds if delay_seconds is None else delay_seconds
    
    async def generate(self, address: str, prompt: str) -> GenerationResult:
        logger.debug(f"Mock generation for '{address}' ({len(prompt)} chars)")
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)
        return GenerationResult.success(self.IMAGE_URL_TEMPLATE.format(seed=time.time_ns() // 1_000_000))
