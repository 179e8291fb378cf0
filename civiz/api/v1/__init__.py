from .vision_controller import router as vision_router
from .session_controller import router as session_router
from .funding_controller import router as funding_router
from .street_view_controller import router as street_view_router


__all__ = ["vision_router", "session_router", "funding_router", "street_view_router"]
