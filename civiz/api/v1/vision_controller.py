# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.vision_dto import (
    LikeResponse,
    TopVisionsResponse,
    VisionResponse,
    VisionSubmitRequest,
)
from ...application.use_cases.vision.submit_vision import SubmitVisionUseCase
from ...application.use_cases.vision.like_vision import LikeVisionUseCase
from ...application.use_cases.vision.list_visions import ListVisionsUseCase
from ...application.use_cases.vision.get_vision import GetVisionUseCase
from ...application.use_cases.vision.get_top_visions import GetTopVisionsByCategoryUseCase
from ...domain.exceptions import VisionGenerationError
from ...domain.models.vision import ViewMode
from ...di.container import get_container
from .error_mapping import generation_error_to_http


router = APIRouter(tags=["visions"])


@router.post("", response_model=VisionResponse, status_code=status.HTTP_201_CREATED)
async def submit_vision(request: VisionSubmitRequest) -> VisionResponse:
    """
    Submit a vision and generate its image
    
    The vision is recorded (and the submission award granted) even when
    image generation fails; the error response carries its vision_id.
    
    Args:
        request: Vision text and address
        
    Returns:
        VisionResponse with the generated image
    """
    container = get_container()
    submit_vision_use_case = container.get(SubmitVisionUseCase)
    
    try:
        return await submit_vision_use_case.execute(request)
    except VisionGenerationError as exception:
        raise generation_error_to_http(exception)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(exception)
        )


@router.get("/mine", response_model=List[VisionResponse])
async def list_my_visions() -> List[VisionResponse]:
    """List the current user's visions, highest points first"""
    container = get_container()
    list_visions_use_case = container.get(ListVisionsUseCase)
    return list_visions_use_case.execute(ViewMode.MINE)


@router.get("/city", response_model=List[VisionResponse])
async def list_city_visions() -> List[VisionResponse]:
    """List all visions, highest points first"""
    container = get_container()
    list_visions_use_case = container.get(ListVisionsUseCase)
    return list_visions_use_case.execute(ViewMode.CITY)


@router.get("/top-by-category", response_model=TopVisionsResponse)
async def top_visions_by_category(mode: Optional[ViewMode] = None) -> TopVisionsResponse:
    """
    Top vision of each funding category
    
    Args:
        mode: "mine" or "city"; the session's view mode when omitted
    """
    container = get_container()
    top_visions_use_case = container.get(GetTopVisionsByCategoryUseCase)
    return top_visions_use_case.execute(mode)


@router.get("/{vision_id}", response_model=VisionResponse)
async def get_vision(vision_id: str) -> VisionResponse:
    """Get a vision by ID (used to poll generation state)"""
    container = get_container()
    get_vision_use_case = container.get(GetVisionUseCase)
    
    try:
        return get_vision_use_case.execute(vision_id)
    except ValueError as exception:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(exception)
        )


@router.post("/{vision_id}/like", response_model=LikeResponse)
async def like_vision(vision_id: str) -> LikeResponse:
    """
    Like a vision as the current user
    
    Unknown IDs and repeat likes succeed with applied=false.
    """
    container = get_container()
    like_vision_use_case = container.get(LikeVisionUseCase)
    return like_vision_use_case.execute(vision_id)
