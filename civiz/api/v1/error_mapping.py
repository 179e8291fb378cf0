"""Translation of provider failure reasons into HTTP responses."""
# Standard library imports
from typing import Dict, Tuple

# External package imports
from fastapi import HTTPException, status

# Local application imports
from ...domain.exceptions import ExternalServiceError, VisionGenerationError, get_user_message
from ...domain.models.generation import FailureReason


FAILURE_RESPONSES: Dict[FailureReason, Tuple[int, str]] = {
    FailureReason.INVALID_CREDENTIALS: (
        status.HTTP_401_UNAUTHORIZED,
        "Invalid or missing API key for the image provider",
    ),
    FailureReason.QUOTA_EXHAUSTED: (
        status.HTTP_402_PAYMENT_REQUIRED,
        "Image provider billing not configured or insufficient credits",
    ),
    FailureReason.CONTENT_POLICY: (
        status.HTTP_400_BAD_REQUEST,
        "Content violates the image provider's policy. Please try a different vision.",
    ),
    FailureReason.TIMEOUT: (
        status.HTTP_408_REQUEST_TIMEOUT,
        "Request timed out. Please try again.",
    ),
    FailureReason.RATE_LIMITED: (
        status.HTTP_429_TOO_MANY_REQUESTS,
        "Rate limit exceeded. Please try again in a few minutes.",
    ),
    FailureReason.UNKNOWN: (
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "Failed to generate transformed image. Please try again.",
    ),
}


def generation_error_to_http(exception: VisionGenerationError) -> HTTPException:
    status_code, message = FAILURE_RESPONSES[exception.reason]
    return HTTPException(
        status_code=status_code,
        detail={
            "message": message,
            "reason": exception.reason.value,
            "vision_id": exception.vision_id,
        },
    )


def service_error_to_http(exception: ExternalServiceError) -> HTTPException:
    status_code, _ = FAILURE_RESPONSES[exception.reason]
    return HTTPException(
        status_code=status_code,
        detail={
            "message": get_user_message(exception),
            "reason": exception.reason.value,
            "service": exception.service_name,
        },
    )
