from typing import Dict

from pydantic import BaseModel

from ...domain.models.vision import ViewMode


class ViewModeRequest(BaseModel):
    """DTO for changing the view mode"""
    view_mode: ViewMode


class SessionResponse(BaseModel):
    """DTO for the current user's session state"""
    user_id: str
    points: int
    view_mode: str
    awards: Dict[str, int]
