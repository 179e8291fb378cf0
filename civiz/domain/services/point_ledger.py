"""
Point accounting rules.

The ledger is an immutable running total; awards return a new ledger.
The vision store commits the new ledger together with the vision change
that earned it.
"""
# Standard library imports
from dataclasses import dataclass

# Local application imports
from ..constants.point_values import PointValues


@dataclass(frozen=True)
class PointLedger:
    """Running point total of the current user. Never decremented."""
    total: int = 0

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError("Ledger total cannot be negative")

    def apply_submission(self) -> "PointLedger":
        return PointLedger(self.total + PointValues.VISION_SUBMISSION)

    def apply_like_given(self) -> "PointLedger":
        return PointLedger(self.total + PointValues.IMAGE_LIKE_GIVEN)


def apply_submission(ledger: PointLedger) -> PointLedger:
    """Award for submitting a vision."""
    return ledger.apply_submission()


def apply_like_given(ledger: PointLedger) -> PointLedger:
    """Award for liking someone's vision."""
    return ledger.apply_like_given()
