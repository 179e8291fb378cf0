"""
Unit tests for submission validation and request DTOs
"""
import pytest
from pydantic import ValidationError

from civiz.application.dto.street_view_dto import StreetViewRequest
from civiz.application.dto.vision_dto import VisionSubmitRequest
from civiz.application.validation import validate_address, validate_vision_text


class TestValidateVisionText:
    """Tests for validate_vision_text"""

    def test_valid(self):
        assert validate_vision_text("A rooftop garden for everyone").is_valid

    def test_empty(self):
        result = validate_vision_text("   ")
        assert not result.is_valid
        assert result.message == "Vision prompt cannot be empty"

    def test_too_short_after_trim(self):
        result = validate_vision_text("   short    ")
        assert not result.is_valid
        assert "at least 10 characters" in result.message

    def test_bounds(self):
        assert validate_vision_text("x" * 10).is_valid
        assert validate_vision_text("x" * 300).is_valid
        assert not validate_vision_text("x" * 301).is_valid


class TestValidateAddress:
    """Tests for validate_address"""

    def test_bounds(self):
        assert not validate_address("").is_valid
        assert not validate_address(" ab ").is_valid
        assert validate_address("abc").is_valid
        assert validate_address("a" * 200).is_valid
        assert validate_address("a" * 201).message == "Address too long"


class TestVisionSubmitRequest:
    """Tests for VisionSubmitRequest"""

    def test_values_trimmed(self):
        request = VisionSubmitRequest(text="  A rooftop garden for all  ", address="  Market St ")
        assert request.text == "A rooftop garden for all"
        assert request.address == "Market St"

    def test_short_text_rejected(self):
        with pytest.raises(ValidationError, match="more detailed vision"):
            VisionSubmitRequest(text="short", address="Market St")

    def test_long_address_rejected(self):
        with pytest.raises(ValidationError, match="Address too long"):
            VisionSubmitRequest(text="A rooftop garden for all", address="a" * 201)

    def test_street_view_request_validates_address(self):
        with pytest.raises(ValidationError):
            StreetViewRequest(address="  ")
