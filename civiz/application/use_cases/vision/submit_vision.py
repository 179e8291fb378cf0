# Standard library imports
import logging

# Local application imports
from ...services.vision_store import VisionStore
from ...dto.vision_dto import VisionSubmitRequest, VisionResponse
from .vision_mapper import to_vision_response

logger = logging.getLogger(__name__)


class SubmitVisionUseCase:
    """Use case for submitting a vision and generating its image"""
    
    def __init__(self, vision_store: VisionStore) -> None:
        self.vision_store = vision_store
    
    async def execute(self, request: VisionSubmitRequest) -> VisionResponse:
        """
        Submit a vision and wait for its image
        
        Args:
            request: Validated vision submission request
            
        Returns:
            VisionResponse with the reconciled vision
            
        Raises:
            VisionGenerationError: If image generation failed (vision is kept as failed)
            ValueError: If the store was closed before the vision was reconciled
        """
        vision = await self.vision_store.submit(request.text, request.address)
        if vision is None:
            raise ValueError("Vision is no longer available")
        
        logger.info(f"Vision {vision.id} submitted by {vision.owner_id}")
        return to_vision_response(vision, self.vision_store.current_user_id)
