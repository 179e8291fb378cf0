"""
Funding categories and the keywords used to classify visions into them.

Declaration order of Category is the classification priority order: the
first category whose keywords match wins.
"""
from enum import Enum
from typing import Dict, Tuple


class Category(str, Enum):
    """Fixed set of city funding categories"""
    PARKS_AND_RECREATION = "Parks & Recreation"
    COMMUNITY_YOUTH_CENTERS = "Community Youth Centers"
    AFFORDABLE_HOUSING = "Affordable Housing"
    PUBLIC_TRANSIT = "Public Transit"
    SMALL_BUSINESS_SUPPORT = "Small Business Support"
    MENTAL_HEALTH_SERVICES = "Mental Health Services"

    def __str__(self) -> str:
        return self.value


DEFAULT_CATEGORY: Category = Category.PARKS_AND_RECREATION

CATEGORY_KEYWORDS: Dict[Category, Tuple[str, ...]] = {
    Category.PARKS_AND_RECREATION: (
        "park", "garden", "playground", "recreation", "outdoor", "green space", "trail", "beach",
    ),
    Category.COMMUNITY_YOUTH_CENTERS: (
        "youth", "teen", "after school", "mentorship", "education", "children", "kids",
    ),
    Category.AFFORDABLE_HOUSING: (
        "housing", "affordable", "homeless", "shelter", "apartment", "rent", "home",
    ),
    Category.PUBLIC_TRANSIT: (
        "bus", "train", "transit", "transportation", "bart", "muni", "bike", "pedestrian",
    ),
    Category.SMALL_BUSINESS_SUPPORT: (
        "business", "entrepreneur", "shop", "restaurant", "startup", "commerce", "market",
    ),
    Category.MENTAL_HEALTH_SERVICES: (
        "mental health", "wellness", "therapy", "counseling", "crisis", "support", "healthcare",
    ),
}
