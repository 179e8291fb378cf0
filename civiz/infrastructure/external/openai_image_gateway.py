"""OpenAI Images API gateway for generating vision images."""
# Standard library imports
import logging
from typing import Optional

# External package imports
import httpx

# Local application imports
from .base_provider_client import BaseProviderClient
from ...core.config import get_settings
from ...domain.gateways.vision_generation_gateway import VisionGenerationGateway
from ...domain.models.generation import FailureReason, GenerationResult

logger = logging.getLogger(__name__)


TRANSFORMATION_PROMPT_TEMPLATE = """Looking at this street view photograph of {address}, create a photorealistic transformation where {vision}.

CRITICAL REQUIREMENTS:
- PRESERVE the EXACT same building structure, architecture, and proportions
- KEEP all architectural elements in their precise locations (windows, doors, rooflines, facades)
- MAINTAIN the exact perspective, viewing angle, and composition of the original photo
- PRESERVE the surrounding context and neighboring buildings
- The building must be instantly recognizable as the same location

TRANSFORMATIONS TO APPLY:
- Add new materials, textures, or surface treatments to existing structures
- Enhance or modify lighting, atmosphere, and environmental effects
- Add decorative elements, overlays, or augmentations that don't alter the core structure
- Transform the style while keeping the underlying architecture intact
- Think of it as applying a new skin or filter to the existing building, not rebuilding it

The result should look like the same exact building has been enhanced or restyled, not replaced or reconstructed."""


def build_transformation_prompt(address: str, vision: str) -> str:
    """Build the image prompt asking for a restyled, structurally identical street scene."""
    return TRANSFORMATION_PROMPT_TEMPLATE.format(address=address, vision=vision)


def classify_openai_error(status_code: Optional[int], error_text: str) -> FailureReason:
    """
    Map an OpenAI error response to a failure reason.
    
    Error text (code, type and message of the error body) is checked first;
    the HTTP status is the fallback.
    """
    text = (error_text or "").lower()
    
    if "rate_limit_exceeded" in text or "rate limit" in text:
        return FailureReason.RATE_LIMITED
    if "billing" in text or "insufficient_quota" in text:
        return FailureReason.QUOTA_EXHAUSTED
    if "invalid_api_key" in text or "authentication" in text:
        return FailureReason.INVALID_CREDENTIALS
    if "content_policy_violation" in text:
        return FailureReason.CONTENT_POLICY
    if "timeout" in text:
        return FailureReason.TIMEOUT
    
    if status_code == 401:
        return FailureReason.INVALID_CREDENTIALS
    if status_code == 402:
        return FailureReason.QUOTA_EXHAUSTED
    if status_code in (408, 504):
        return FailureReason.TIMEOUT
    if status_code == 429:
        return FailureReason.RATE_LIMITED
    return FailureReason.UNKNOWN


class OpenAIImageGateway(BaseProviderClient, VisionGenerationGateway):
    """
    Vision generation gateway backed by the OpenAI Images API.
    
    This gateway handles:
    - Building the structure-preserving transformation prompt
    - Calling the images/generations endpoint
    - Classifying provider errors into failure reasons
    
    Provider failures are returned as GenerationResult.failure, never raised.
    """
    
    IMAGES_PATH = "/images/generations"
    
    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        size: Optional[str] = None,
        quality: Optional[str] = None,
        timeout: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ):
        settings = get_settings()
        super().__init__(
            base_url=base_url or settings.openai_base_url,
            timeout=timeout or settings.generation_timeout_seconds,
            http_client=http_client,
        )
        self.api_key = settings.openai_api_key if api_key is None else api_key
        self.model = model or settings.image_model
        self.size = size or settings.image_size
        self.quality = quality or settings.image_quality
        
        if not self.api_key:
            logger.warning("OPENAI_API_KEY not found in environment variables")
    
    async def generate(self, address: str, prompt: str) -> GenerationResult:
        """
        Generate a transformed street image for the vision.
        
        Args:
            address: Location of the vision
            prompt: Vision text
            
        Returns:
            GenerationResult with the image URL, or a classified failure
        """
        if not self.api_key:
            return GenerationResult.failure(
                FailureReason.INVALID_CREDENTIALS,
                "OpenAI API key not configured",
            )
        
        payload = {
            "model": self.model,
            "prompt": build_transformation_prompt(address, prompt),
            "size": self.size,
            "quality": self.quality,
            "n": 1,
        }
        
        try:
            response = await self.client.post(
                f"{self.base_url}{self.IMAGES_PATH}",
                json=payload,
                headers={"Authorization": f"Bearer {self.api_key}"},
                timeout=self.timeout,
            )
            response.raise_for_status()
            body = response.json()
        except httpx.TimeoutException as e:
            logger.error(f"Timeout while generating image for '{address}': {e}")
            return GenerationResult.failure(FailureReason.TIMEOUT, "Request timed out")
        except httpx.HTTPStatusError as e:
            reason = classify_openai_error(e.response.status_code, e.response.text)
            logger.error(
                f"OpenAI image generation error: {e.response.status_code} - {e.response.text}"
            )
            return GenerationResult.failure(reason, f"HTTP {e.response.status_code}")
        except httpx.HTTPError as e:
            logger.error(f"Transport error calling OpenAI image generation: {e}", exc_info=True)
            return GenerationResult.failure(FailureReason.UNKNOWN, str(e))
        except ValueError as e:
            logger.error(f"OpenAI returned a non-JSON response: {e}")
            return GenerationResult.failure(FailureReason.UNKNOWN, "Invalid response from OpenAI")
        
        data = body.get("data") or []
        first = data[0] if data else {}
        if first.get("url"):
            return GenerationResult.success(first["url"])
        if first.get("b64_json"):
            return GenerationResult.success(f"data:image/png;base64,{first['b64_json']}")
        
        logger.error(f"OpenAI response missing image URL: {body}")
        return GenerationResult.failure(FailureReason.UNKNOWN, "No image URL returned from OpenAI")
