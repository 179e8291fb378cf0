from typing import TYPE_CHECKING

from ...application.services.vision_store import VisionStore
from ...application.use_cases.vision.submit_vision import SubmitVisionUseCase
from ...application.use_cases.vision.like_vision import LikeVisionUseCase
from ...application.use_cases.vision.list_visions import ListVisionsUseCase
from ...application.use_cases.vision.get_vision import GetVisionUseCase
from ...application.use_cases.vision.get_top_visions import GetTopVisionsByCategoryUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class VisionProvider:
    """Vision use case provider - registers all vision-related use cases"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all vision use cases.
        Use cases are created on-demand via factories.
        """
        container.register_factory(
            SubmitVisionUseCase,
            lambda: SubmitVisionUseCase(vision_store=container.get(VisionStore))
        )
        
        container.register_factory(
            LikeVisionUseCase,
            lambda: LikeVisionUseCase(vision_store=container.get(VisionStore))
        )
        
        container.register_factory(
            ListVisionsUseCase,
            lambda: ListVisionsUseCase(vision_store=container.get(VisionStore))
        )
        
        container.register_factory(
            GetVisionUseCase,
            lambda: GetVisionUseCase(vision_store=container.get(VisionStore))
        )
        
        container.register_factory(
            GetTopVisionsByCategoryUseCase,
            lambda: GetTopVisionsByCategoryUseCase(vision_store=container.get(VisionStore))
        )
