# Local application imports
from ...services.vision_store import VisionStore
from ...dto.vision_dto import LikeResponse
from .vision_mapper import to_vision_response


class LikeVisionUseCase:
    """Use case for liking a vision as the current user"""
    
    def __init__(self, vision_store: VisionStore) -> None:
        self.vision_store = vision_store
    
    def execute(self, vision_id: str) -> LikeResponse:
        """
        Like a vision. Unknown IDs and repeat likes are no-ops.
        
        Args:
            vision_id: ID of the vision
            
        Returns:
            LikeResponse with whether the like was applied and the ledger total
        """
        applied = self.vision_store.like(vision_id)
        vision = self.vision_store.get(vision_id)
        
        return LikeResponse(
            vision_id=vision_id,
            applied=applied,
            points=self.vision_store.points,
            vision=to_vision_response(vision, self.vision_store.current_user_id) if vision else None,
        )
