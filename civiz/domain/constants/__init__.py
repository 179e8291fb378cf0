"""Constants for the civic vision domain"""

from .categories import Category, CATEGORY_KEYWORDS, DEFAULT_CATEGORY
from .point_values import PointValues
from .media_constants import PLACEHOLDER_IMAGE_URLS

__all__ = [
    "Category",
    "CATEGORY_KEYWORDS",
    "DEFAULT_CATEGORY",
    "PointValues",
    "PLACEHOLDER_IMAGE_URLS",
]
