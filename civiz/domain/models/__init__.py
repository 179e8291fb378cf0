from .vision import Vision, GenerationState, ViewMode
from .generation import FailureReason, GenerationResult
from .funding_category import FundingCategory

__all__ = [
    "Vision",
    "GenerationState",
    "ViewMode",
    "FailureReason",
    "GenerationResult",
    "FundingCategory",
]
