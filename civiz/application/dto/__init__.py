from .vision_dto import (
    VisionSubmitRequest,
    VisionResponse,
    LikeResponse,
    TopVisionsResponse,
)
from .session_dto import ViewModeRequest, SessionResponse
from .funding_dto import FundingCategoryResponse
from .street_view_dto import StreetViewRequest, StreetViewResponse

__all__ = [
    "VisionSubmitRequest",
    "VisionResponse",
    "LikeResponse",
    "TopVisionsResponse",
    "ViewModeRequest",
    "SessionResponse",
    "FundingCategoryResponse",
    "StreetViewRequest",
    "StreetViewResponse",
]
