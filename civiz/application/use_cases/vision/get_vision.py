# Local application imports
from ...services.vision_store import VisionStore
from ...dto.vision_dto import VisionResponse
from .vision_mapper import to_vision_response


class GetVisionUseCase:
    """Use case for getting a vision by ID"""
    
    def __init__(self, vision_store: VisionStore) -> None:
        self.vision_store = vision_store
    
    def execute(self, vision_id: str) -> VisionResponse:
        """
        Raises:
            ValueError: If vision not found
        """
        vision = self.vision_store.get(vision_id)
        if vision is None:
            raise ValueError("Vision not found")
        return to_vision_response(vision, self.vision_store.current_user_id)
