# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


class Settings:
    """
    Application settings loaded from environment variables.
    
    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """
    
    def __init__(self) -> None:
        # Image generation configuration
        self.generation_backend: Final[str] = os.getenv("GENERATION_BACKEND", "mock").strip().lower()
        self.openai_api_key: Final[str] = os.getenv("OPENAI_API_KEY", "")
        self.openai_base_url: Final[str] = os.getenv("OPENAI_BASE_URL", "https://api.openai.com/v1")
        self.image_model: Final[str] = os.getenv("IMAGE_MODEL", "dall-e-3")
        self.image_size: Final[str] = os.getenv("IMAGE_SIZE", "1024x1024")
        self.image_quality: Final[str] = os.getenv("IMAGE_QUALITY", "standard")
        self.generation_timeout_seconds: Final[float] = float(
            os.getenv("GENERATION_TIMEOUT_SECONDS", "120")
        )
        self.mock_generation_delay_seconds: Final[float] = float(
            os.getenv("MOCK_GENERATION_DELAY_SECONDS", "2.0")
        )
        
        # Street View configuration
        self.google_maps_api_key: Final[str] = os.getenv("GOOGLE_MAPS_API_KEY", "")
        self.street_view_url: Final[str] = os.getenv(
            "STREET_VIEW_URL",
            "https://maps.googleapis.com/maps/api/streetview"
        )
        self.street_view_size: Final[str] = os.getenv("STREET_VIEW_SIZE", "640x640")
        
        # Shared HTTP client pool
        self.http_max_connections: Final[int] = int(os.getenv("HTTP_MAX_CONNECTIONS", "100"))
        self.http_max_keepalive_connections: Final[int] = int(
            os.getenv("HTTP_MAX_KEEPALIVE_CONNECTIONS", "20")
        )
        self.http_keepalive_expiry_seconds: Final[float] = float(
            os.getenv("HTTP_KEEPALIVE_EXPIRY_SECONDS", "30")
        )
        
        # Session configuration (single fixed user, no authentication)
        self.current_user_id: Final[str] = os.getenv("CURRENT_USER_ID", "user-1")
        self.starting_points: Final[int] = int(os.getenv("STARTING_POINTS", "10"))
        self.seed_sample_visions: Final[bool] = _env_bool("SEED_SAMPLE_VISIONS", "true")
        
        # CORS
        self.cors_origins: Final[List[str]] = [
            origin.strip()
            for origin in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://localhost:5173"
            ).split(",")
            if origin.strip()
        ]


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)
    
    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
