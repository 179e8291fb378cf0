# Standard library imports
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class FailureReason(str, Enum):
    """Why an external provider could not produce an image"""
    INVALID_CREDENTIALS = "invalid_credentials"
    QUOTA_EXHAUSTED = "quota_exhausted"
    RATE_LIMITED = "rate_limited"
    CONTENT_POLICY = "content_policy"
    TIMEOUT = "timeout"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class GenerationResult:
    """
    Outcome of one image generation call.
    
    Either ok with an image_ref usable directly as an image source, or
    not ok with a failure reason and a diagnostic message.
    """
    ok: bool
    image_ref: Optional[str] = None
    reason: Optional[FailureReason] = None
    message: str = ""

    def __post_init__(self) -> None:
        """Business validations"""
        if self.ok and not self.image_ref:
            raise ValueError("Successful generation requires an image reference")
        if not self.ok and self.reason is None:
            raise ValueError("Failed generation requires a reason")

    @classmethod
    def success(cls, image_ref: str) -> "GenerationResult":
        return cls(ok=True, image_ref=image_ref)

    @classmethod
    def failure(cls, reason: FailureReason, message: str = "") -> "GenerationResult":
        return cls(ok=False, reason=reason, message=message)
