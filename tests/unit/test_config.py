"""
Unit tests for civiz.core.config.Settings
"""
import os
from unittest.mock import patch

from civiz.core.config import Settings


class TestSettings:
    """Tests for Settings loaded from the environment"""

    def test_defaults(self):
        with patch.dict(os.environ, {}, clear=True):
            settings = Settings()
        assert settings.generation_backend == "mock"
        assert settings.openai_api_key == ""
        assert settings.image_model == "dall-e-3"
        assert settings.current_user_id == "user-1"
        assert settings.starting_points == 10
        assert settings.seed_sample_visions is True
        assert settings.street_view_size == "640x640"
        assert settings.http_max_connections == 100
        assert settings.http_max_keepalive_connections == 20
        assert settings.http_keepalive_expiry_seconds == 30.0

    def test_overrides(self, mock_env):
        with patch.dict(os.environ, {"GENERATION_BACKEND": " OpenAI ", "CORS_ORIGINS": "https://a.test, ,https://b.test"}):
            settings = Settings()
        assert settings.generation_backend == "openai"
        assert settings.mock_generation_delay_seconds == 0.0
        assert settings.seed_sample_visions is False
        assert settings.cors_origins == ["https://a.test", "https://b.test"]
