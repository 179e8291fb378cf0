"""
Custom exception hierarchy for the civiz backend.

All domain exceptions inherit from CivizError and can carry a user-facing
message. Mapping a failure reason to an HTTP response is done by the API
layer, not here.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .models.generation import FailureReason


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class CivizError(Exception):
    """Base exception for all civiz errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or "An error occurred. Please try again."
        self.details = details or {}


class ConfigurationError(CivizError):
    """Raised when a required setting (API key, backend name) is missing or invalid."""
    pass


# -----------------------------------------------------------------------------
# Vision lifecycle
# -----------------------------------------------------------------------------


class InvalidStateTransitionError(CivizError):
    """Raised when a vision's generation state would move backward or skip pending."""
    pass


class VisionGenerationError(CivizError):
    """
    Raised to the caller of submit when image generation fails.

    The vision itself stays in the store in the failed state; this only
    re-signals the outcome.
    """

    def __init__(self, vision_id: str, reason: "FailureReason", message: str = ""):
        super().__init__(
            message or f"Image generation failed for vision {vision_id}: {reason.value}",
            user_message="Failed to generate your vision image. Please try again.",
            details={"vision_id": vision_id, "reason": reason.value},
        )
        self.vision_id = vision_id
        self.reason = reason


# -----------------------------------------------------------------------------
# External services
# -----------------------------------------------------------------------------


class ExternalServiceError(CivizError):
    """Base exception for external provider errors."""

    def __init__(
        self,
        message: str,
        reason: "FailureReason",
        service_name: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.reason = reason
        self.service_name = service_name


class StreetViewError(ExternalServiceError):
    """Raised when the street imagery provider cannot return an image."""

    def __init__(self, message: str, reason: "FailureReason", **kwargs):
        super().__init__(
            message,
            reason=reason,
            service_name="StreetView",
            user_message="Failed to fetch Street View image",
            **kwargs,
        )


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API/use-case boundaries so internal details are never exposed.
    """
    if isinstance(exc, CivizError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Something went wrong. Please try again."
