from typing import TYPE_CHECKING

from ...application.services.vision_store import VisionStore
from ...application.use_cases.funding.list_funding_categories import ListFundingCategoriesUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class FundingProvider:
    """Funding use case provider"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            ListFundingCategoriesUseCase,
            lambda: ListFundingCategoriesUseCase(vision_store=container.get(VisionStore))
        )
