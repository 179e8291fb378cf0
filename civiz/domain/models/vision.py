# Standard library imports
from dataclasses import dataclass, field, replace
from datetime import datetime
from enum import Enum
from typing import FrozenSet, Optional

# Local application imports
from ..constants.categories import Category
from ..exceptions import InvalidStateTransitionError
from .generation import FailureReason
from ...utils.datetime_utils import ensure_utc, utc_now


class GenerationState(str, Enum):
    """Lifecycle of a vision's image generation"""
    PENDING = "pending"
    READY = "ready"
    FAILED = "failed"


class ViewMode(str, Enum):
    """Which visions the caller is browsing"""
    MINE = "mine"
    CITY = "city"


@dataclass(frozen=True)
class Vision:
    """
    Pure domain model for a user-submitted civic vision.
    
    Records are immutable: every change (like, generation outcome) produces a
    new record with the same id, so a reader holding a record never sees it
    half-updated.
    """
    id: str
    text: str
    address: str
    category: Category
    image_url: str
    owner_id: str
    points: int
    liked_by: FrozenSet[str] = frozenset()
    created_at: datetime = field(default_factory=utc_now)
    generation_state: GenerationState = GenerationState.PENDING
    generated_image_url: Optional[str] = None
    failure_reason: Optional[FailureReason] = None

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.id:
            raise ValueError("Vision ID is required")
        if not self.owner_id:
            raise ValueError("Owner ID is required")
        if not self.image_url:
            raise ValueError("Image URL is required")
        if self.points < 0:
            raise ValueError("Points cannot be negative")
        # Frozen: normalize plain values through object.__setattr__
        object.__setattr__(self, "category", Category(self.category))
        object.__setattr__(self, "generation_state", GenerationState(self.generation_state))
        object.__setattr__(self, "liked_by", frozenset(self.liked_by))
        object.__setattr__(self, "created_at", ensure_utc(self.created_at))

    @property
    def like_count(self) -> int:
        return len(self.liked_by)

    @property
    def has_generated_image(self) -> bool:
        return self.generated_image_url is not None

    def is_liked_by(self, user_id: str) -> bool:
        return user_id in self.liked_by

    def with_like(self, user_id: str, award: int) -> "Vision":
        """Return a copy liked by user_id with the received award added."""
        if user_id in self.liked_by:
            raise ValueError(f"User {user_id} already liked vision {self.id}")
        return replace(
            self,
            liked_by=self.liked_by | {user_id},
            points=self.points + award,
        )

    def mark_ready(self, image_ref: str) -> "Vision":
        """Transition pending -> ready, replacing the placeholder with the generated image."""
        self._require_pending(GenerationState.READY)
        return replace(
            self,
            image_url=image_ref,
            generated_image_url=image_ref,
            generation_state=GenerationState.READY,
        )

    def mark_failed(self, reason: FailureReason) -> "Vision":
        """Transition pending -> failed, keeping the placeholder image."""
        self._require_pending(GenerationState.FAILED)
        return replace(
            self,
            generation_state=GenerationState.FAILED,
            failure_reason=reason,
        )

    def _require_pending(self, target: GenerationState) -> None:
        if self.generation_state is not GenerationState.PENDING:
            raise InvalidStateTransitionError(
                f"Vision {self.id} cannot move from {self.generation_state.value} to {target.value}",
                details={"vision_id": self.id},
            )
