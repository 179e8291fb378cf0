"""
Caller-side validation of vision submissions.

The vision store assumes its inputs already passed these checks.
"""
from dataclasses import dataclass
from typing import Optional

VISION_TEXT_MIN_LENGTH = 10
VISION_TEXT_MAX_LENGTH = 300
ADDRESS_MIN_LENGTH = 3
ADDRESS_MAX_LENGTH = 200


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: Optional[str] = None


def validate_vision_text(text: str) -> ValidationResult:
    trimmed = (text or "").strip()

    if not trimmed:
        return ValidationResult(False, "Vision prompt cannot be empty")
    if len(trimmed) < VISION_TEXT_MIN_LENGTH:
        return ValidationResult(
            False,
            f"Please provide a more detailed vision (at least {VISION_TEXT_MIN_LENGTH} characters)",
        )
    if len(trimmed) > VISION_TEXT_MAX_LENGTH:
        return ValidationResult(False, f"Vision prompt too long (max {VISION_TEXT_MAX_LENGTH} characters)")
    return ValidationResult(True)


def validate_address(address: str) -> ValidationResult:
    trimmed = (address or "").strip()

    if not trimmed:
        return ValidationResult(False, "Address cannot be empty")
    if len(trimmed) < ADDRESS_MIN_LENGTH:
        return ValidationResult(False, "Address too short")
    if len(trimmed) > ADDRESS_MAX_LENGTH:
        return ValidationResult(False, "Address too long")
    return ValidationResult(True)
