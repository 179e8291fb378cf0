# Standard library imports
from typing import List, Optional, Sequence

# Local application imports
from ....domain.constants.funding_catalogue import FUNDING_CATEGORIES
from ....domain.models.funding_category import FundingCategory
from ....domain.models.vision import ViewMode
from ...services.vision_store import VisionStore
from ...dto.funding_dto import FundingCategoryResponse
from ..vision.vision_mapper import to_vision_response


class ListFundingCategoriesUseCase:
    """Use case for listing funding categories with their top vision"""
    
    def __init__(
        self,
        vision_store: VisionStore,
        funding_categories: Sequence[FundingCategory] = FUNDING_CATEGORIES,
    ) -> None:
        self.vision_store = vision_store
        self.funding_categories = funding_categories
    
    def execute(self, view_mode: Optional[ViewMode] = None) -> List[FundingCategoryResponse]:
        """
        List funding categories in catalogue order
        
        Args:
            view_mode: Ranking mode for the top vision; store's view mode when omitted
            
        Returns:
            List of FundingCategoryResponse; top_vision is None for empty categories
        """
        top = self.vision_store.top_by_category(view_mode)
        user_id = self.vision_store.current_user_id
        
        result = []
        for funding in self.funding_categories:
            top_vision = top.get(funding.category)
            result.append(
                FundingCategoryResponse(
                    category=funding.category.value,
                    total_budget=funding.total_budget,
                    direct_funding=funding.direct_funding,
                    nonprofit_funding=funding.nonprofit_funding,
                    budget_deficit=funding.budget_deficit,
                    remaining_approved_funding=funding.remaining_approved_funding,
                    funded_percentage=funding.funded_percentage,
                    impact_metrics=list(funding.impact_metrics),
                    top_vision=to_vision_response(top_vision, user_id) if top_vision else None,
                )
            )
        
        return result
