from .get_session import GetSessionUseCase
from .set_view_mode import SetViewModeUseCase

__all__ = [
    "GetSessionUseCase",
    "SetViewModeUseCase",
]
