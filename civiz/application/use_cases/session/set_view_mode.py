# Local application imports
from ....domain.models.vision import ViewMode
from ...services.vision_store import VisionStore
from ...dto.session_dto import SessionResponse
from .get_session import build_session_response


class SetViewModeUseCase:
    """Use case for switching between the user's and the city's visions"""
    
    def __init__(self, vision_store: VisionStore) -> None:
        self.vision_store = vision_store
    
    def execute(self, view_mode: ViewMode) -> SessionResponse:
        self.vision_store.view_mode = view_mode
        return build_session_response(self.vision_store)
    
    def toggle(self) -> SessionResponse:
        self.vision_store.toggle_view_mode()
        return build_session_response(self.vision_store)
