from typing import TYPE_CHECKING

from ...application.services.sample_visions import build_sample_visions
from ...application.services.vision_store import VisionStore
from ...domain.gateways.vision_generation_gateway import VisionGenerationGateway

if TYPE_CHECKING:
    from ..container import DIContainer


class StoreProvider:
    """Vision store provider - registers the single application-wide store"""
    
    @staticmethod
    def register(container: "DIContainer") -> None:
        settings = container.settings
        initial_visions = build_sample_visions() if settings.seed_sample_visions else ()
        
        container.register_singleton(
            VisionStore,
            VisionStore(
                gateway=container.get(VisionGenerationGateway),
                current_user_id=settings.current_user_id,
                starting_points=settings.starting_points,
                initial_visions=initial_visions,
            )
        )
