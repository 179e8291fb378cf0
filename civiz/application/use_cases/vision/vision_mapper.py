# Local application imports
from ....domain.models.vision import Vision
from ...dto.vision_dto import VisionResponse


def to_vision_response(vision: Vision, current_user_id: str) -> VisionResponse:
    """Convert a domain vision to its response DTO, as seen by current_user_id."""
    return VisionResponse(
        id=vision.id,
        text=vision.text,
        address=vision.address,
        category=vision.category.value,
        image_url=vision.image_url,
        generated_image_url=vision.generated_image_url,
        owner_id=vision.owner_id,
        points=vision.points,
        like_count=vision.like_count,
        liked_by=sorted(vision.liked_by),
        liked_by_current_user=vision.is_liked_by(current_user_id),
        is_mine=vision.owner_id == current_user_id,
        created_at=vision.created_at,
        generation_state=vision.generation_state.value,
        failure_reason=vision.failure_reason.value if vision.failure_reason else None,
    )
