# Local application imports
from ....domain.constants.point_values import PointValues
from ...services.vision_store import VisionStore
from ...dto.session_dto import SessionResponse


def build_session_response(vision_store: VisionStore) -> SessionResponse:
    return SessionResponse(
        user_id=vision_store.current_user_id,
        points=vision_store.points,
        view_mode=vision_store.view_mode.value,
        awards=PointValues.as_dict(),
    )


class GetSessionUseCase:
    """Use case for reading the current user's ledger and view mode"""
    
    def __init__(self, vision_store: VisionStore) -> None:
        self.vision_store = vision_store
    
    def execute(self) -> SessionResponse:
        return build_session_response(self.vision_store)
