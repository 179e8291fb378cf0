# Standard library imports
from typing import List

# Local application imports
from ....domain.models.vision import ViewMode
from ...services.vision_store import VisionStore
from ...dto.vision_dto import VisionResponse
from .vision_mapper import to_vision_response


class ListVisionsUseCase:
    """Use case for listing ranked visions"""
    
    def __init__(self, vision_store: VisionStore) -> None:
        self.vision_store = vision_store
    
    def execute(self, view_mode: ViewMode) -> List[VisionResponse]:
        """
        List visions ranked by points
        
        Args:
            view_mode: MINE for the current user's visions, CITY for all
            
        Returns:
            List of VisionResponse objects, highest points first
        """
        if ViewMode(view_mode) is ViewMode.MINE:
            visions = self.vision_store.list_mine()
        else:
            visions = self.vision_store.list_city()
        
        user_id = self.vision_store.current_user_id
        return [to_vision_response(vision, user_id) for vision in visions]
