from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..validation import validate_address, validate_vision_text


class VisionSubmitRequest(BaseModel):
    """DTO for vision submission request. Values are trimmed."""
    text: str
    address: str

    @field_validator("text")
    @classmethod
    def _check_text(cls, value: str) -> str:
        result = validate_vision_text(value)
        if not result.is_valid:
            raise ValueError(result.message)
        return value.strip()

    @field_validator("address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        result = validate_address(value)
        if not result.is_valid:
            raise ValueError(result.message)
        return value.strip()


class VisionResponse(BaseModel):
    """DTO for vision response"""
    id: str
    text: str
    address: str
    category: str
    image_url: str
    generated_image_url: Optional[str] = None
    owner_id: str
    points: int
    like_count: int = 0
    liked_by: List[str] = Field(default_factory=list)
    liked_by_current_user: bool = False
    is_mine: bool = False
    created_at: datetime
    generation_state: str
    failure_reason: Optional[str] = None


class LikeResponse(BaseModel):
    """DTO for like result"""
    vision_id: str
    applied: bool
    points: int
    vision: Optional[VisionResponse] = None


class TopVisionsResponse(BaseModel):
    """DTO for top vision per category"""
    view_mode: str
    categories: Dict[str, VisionResponse] = Field(default_factory=dict)
