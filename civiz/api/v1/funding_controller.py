# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.funding_dto import FundingCategoryResponse
from ...application.use_cases.funding.list_funding_categories import ListFundingCategoriesUseCase
from ...domain.models.vision import ViewMode
from ...di.container import get_container


router = APIRouter(tags=["funding"])


@router.get("/categories", response_model=List[FundingCategoryResponse])
async def list_funding_categories(mode: Optional[ViewMode] = None) -> List[FundingCategoryResponse]:
    """
    List city funding categories with the top vision of each
    
    Args:
        mode: "mine" or "city"; the session's view mode when omitted
    """
    container = get_container()
    list_funding_use_case = container.get(ListFundingCategoriesUseCase)
    return list_funding_use_case.execute(mode)
