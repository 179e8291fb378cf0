from typing import TYPE_CHECKING

from ...application.services.vision_store import VisionStore
from ...application.use_cases.session.get_session import GetSessionUseCase
from ...application.use_cases.session.set_view_mode import SetViewModeUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class SessionProvider:
    """Session use case provider - ledger total and view mode"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetSessionUseCase,
            lambda: GetSessionUseCase(vision_store=container.get(VisionStore))
        )
        
        container.register_factory(
            SetViewModeUseCase,
            lambda: SetViewModeUseCase(vision_store=container.get(VisionStore))
        )
