# External package imports
from fastapi import APIRouter, HTTPException, status

# Local application imports
from ...application.dto.street_view_dto import StreetViewRequest, StreetViewResponse
from ...application.use_cases.street_view.fetch_street_view import FetchStreetViewUseCase
from ...domain.exceptions import ConfigurationError, StreetViewError, get_user_message
from ...di.container import get_container
from .error_mapping import service_error_to_http


router = APIRouter(tags=["streetview"])


@router.post("", response_model=StreetViewResponse)
async def fetch_street_view(request: StreetViewRequest) -> StreetViewResponse:
    """
    Fetch the street-level photo of an address
    
    Returns:
        StreetViewResponse with a base64 data URL
    """
    container = get_container()
    fetch_street_view_use_case = container.get(FetchStreetViewUseCase)
    
    try:
        return await fetch_street_view_use_case.execute(request)
    except ConfigurationError as exception:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=get_user_message(exception)
        )
    except StreetViewError as exception:
        raise service_error_to_http(exception)
