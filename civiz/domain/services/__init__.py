from .category_classifier import classify
from .point_ledger import PointLedger, apply_submission, apply_like_given

__all__ = [
    "classify",
    "PointLedger",
    "apply_submission",
    "apply_like_given",
]
