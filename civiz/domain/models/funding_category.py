# Standard library imports
from dataclasses import dataclass
from typing import Tuple

# Local application imports
from ..constants.categories import Category


@dataclass(frozen=True)
class FundingCategory:
    """
    City budget figures for one funding category.
    
    Amounts are whole US dollars.
    """
    category: Category
    total_budget: int
    direct_funding: int
    nonprofit_funding: int
    budget_deficit: int
    remaining_approved_funding: int
    impact_metrics: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Business validations"""
        if self.total_budget <= 0:
            raise ValueError("Total budget must be positive")
        if self.budget_deficit < 0 or self.budget_deficit > self.total_budget:
            raise ValueError("Budget deficit must be between 0 and the total budget")

    @property
    def funded_percentage(self) -> int:
        """Share of the total budget that is covered, rounded to a whole percent."""
        return round((self.total_budget - self.budget_deficit) / self.total_budget * 100)
