# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.session_dto import SessionResponse, ViewModeRequest
from ...application.use_cases.session.get_session import GetSessionUseCase
from ...application.use_cases.session.set_view_mode import SetViewModeUseCase
from ...di.container import get_container


router = APIRouter(tags=["session"])


@router.get("", response_model=SessionResponse)
async def get_session() -> SessionResponse:
    """Current user's point total, view mode and award table"""
    container = get_container()
    return container.get(GetSessionUseCase).execute()


@router.put("/view-mode", response_model=SessionResponse)
async def set_view_mode(request: ViewModeRequest) -> SessionResponse:
    container = get_container()
    return container.get(SetViewModeUseCase).execute(request.view_mode)


@router.post("/view-mode/toggle", response_model=SessionResponse)
async def toggle_view_mode() -> SessionResponse:
    container = get_container()
    return container.get(SetViewModeUseCase).toggle()
