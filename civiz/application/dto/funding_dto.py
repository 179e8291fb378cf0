from typing import List, Optional

from pydantic import BaseModel, Field

from .vision_dto import VisionResponse


class FundingCategoryResponse(BaseModel):
    """DTO for a funding category with its top vision"""
    category: str
    total_budget: int
    direct_funding: int
    nonprofit_funding: int
    budget_deficit: int
    remaining_approved_funding: int
    funded_percentage: int
    impact_metrics: List[str] = Field(default_factory=list)
    top_vision: Optional[VisionResponse] = None
