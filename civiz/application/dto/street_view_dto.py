from pydantic import BaseModel, field_validator

from ..validation import validate_address


class StreetViewRequest(BaseModel):
    """DTO for street view lookup request"""
    address: str

    @field_validator("address")
    @classmethod
    def _check_address(cls, value: str) -> str:
        result = validate_address(value)
        if not result.is_valid:
            raise ValueError(result.message)
        return value.strip()


class StreetViewResponse(BaseModel):
    """DTO for street view image (data URL)"""
    image_data: str
    address: str
