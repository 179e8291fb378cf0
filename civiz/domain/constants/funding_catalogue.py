"""
City funding catalogue (San Francisco sample figures).

Kept out of the constants package exports because it depends on the
FundingCategory model.
"""
from typing import Tuple

from .categories import Category
from ..models.funding_category import FundingCategory


FUNDING_CATEGORIES: Tuple[FundingCategory, ...] = (
    FundingCategory(
        category=Category.PARKS_AND_RECREATION,
        total_budget=450_000_000,
        direct_funding=320_000_000,
        nonprofit_funding=80_000_000,
        budget_deficit=50_000_000,
        remaining_approved_funding=15_000_000,
        impact_metrics=("500+ parks maintained", "12 new playgrounds", "200k annual visitors"),
    ),
    FundingCategory(
        category=Category.COMMUNITY_YOUTH_CENTERS,
        total_budget=280_000_000,
        direct_funding=200_000_000,
        nonprofit_funding=60_000_000,
        budget_deficit=20_000_000,
        remaining_approved_funding=8_000_000,
        impact_metrics=("50 youth centers", "10k daily participants", "95% satisfaction rate"),
    ),
    FundingCategory(
        category=Category.AFFORDABLE_HOUSING,
        total_budget=850_000_000,
        direct_funding=600_000_000,
        nonprofit_funding=150_000_000,
        budget_deficit=100_000_000,
        remaining_approved_funding=25_000_000,
        impact_metrics=("2,500 units planned", "1,200 units completed", "5k families housed"),
    ),
    FundingCategory(
        category=Category.PUBLIC_TRANSIT,
        total_budget=1_200_000_000,
        direct_funding=900_000_000,
        nonprofit_funding=200_000_000,
        budget_deficit=100_000_000,
        remaining_approved_funding=30_000_000,
        impact_metrics=("800k daily riders", "15 new bus routes", "98% on-time performance"),
    ),
    FundingCategory(
        category=Category.SMALL_BUSINESS_SUPPORT,
        total_budget=180_000_000,
        direct_funding=120_000_000,
        nonprofit_funding=50_000_000,
        budget_deficit=10_000_000,
        remaining_approved_funding=5_000_000,
        impact_metrics=("2k businesses supported", "8k jobs created", "85% survival rate"),
    ),
    FundingCategory(
        category=Category.MENTAL_HEALTH_SERVICES,
        total_budget=320_000_000,
        direct_funding=240_000_000,
        nonprofit_funding=70_000_000,
        budget_deficit=10_000_000,
        remaining_approved_funding=12_000_000,
        impact_metrics=("100k residents served", "24/7 crisis hotline", "30 wellness centers"),
    ),
)
