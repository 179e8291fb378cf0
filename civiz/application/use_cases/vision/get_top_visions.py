# Standard library imports
from typing import Optional

# Local application imports
from ....domain.models.vision import ViewMode
from ...services.vision_store import VisionStore
from ...dto.vision_dto import TopVisionsResponse
from .vision_mapper import to_vision_response


class GetTopVisionsByCategoryUseCase:
    """Use case for the top vision of each funding category"""
    
    def __init__(self, vision_store: VisionStore) -> None:
        self.vision_store = vision_store
    
    def execute(self, view_mode: Optional[ViewMode] = None) -> TopVisionsResponse:
        """
        Args:
            view_mode: Ranking mode; the store's current view mode when omitted
            
        Returns:
            TopVisionsResponse keyed by category name (empty categories omitted)
        """
        mode = ViewMode(view_mode) if view_mode is not None else self.vision_store.view_mode
        top = self.vision_store.top_by_category(mode)
        user_id = self.vision_store.current_user_id
        
        return TopVisionsResponse(
            view_mode=mode.value,
            categories={
                category.value: to_vision_response(vision, user_id)
                for category, vision in top.items()
            },
        )
