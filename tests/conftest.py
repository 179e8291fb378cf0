"""
Shared pytest fixtures for civiz tests.
"""
import asyncio
import os
import random
from typing import List, Tuple
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from civiz.application.services.vision_store import VisionStore
from civiz.domain.gateways.vision_generation_gateway import VisionGenerationGateway
from civiz.domain.models.generation import GenerationResult


PLACEHOLDER = "https://placeholder.test/vision.png"


class ControlledGateway(VisionGenerationGateway):
    """Gateway whose calls stay pending until the test resolves them, in any order."""

    def __init__(self) -> None:
        self.calls: List[Tuple[str, str, "asyncio.Future[GenerationResult]"]] = []

    async def generate(self, address: str, prompt: str) -> GenerationResult:
        future = asyncio.get_running_loop().create_future()
        self.calls.append((address, prompt, future))
        return await future

    def succeed(self, index: int, image_ref: str) -> None:
        self.calls[index][2].set_result(GenerationResult.success(image_ref))

    def reply(self, index: int, result: GenerationResult) -> None:
        self.calls[index][2].set_result(result)

    def raise_error(self, index: int, error: BaseException) -> None:
        self.calls[index][2].set_exception(error)


async def _settle(rounds: int = 3) -> None:
    """Let scheduled tasks run up to their next suspension point."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "GENERATION_BACKEND": "mock",
        "MOCK_GENERATION_DELAY_SECONDS": "0",
        "OPENAI_API_KEY": "test_openai_key_placeholder",
        "GOOGLE_MAPS_API_KEY": "test_maps_key_placeholder",
        "CURRENT_USER_ID": "user-1",
        "STARTING_POINTS": "10",
        "SEED_SAMPLE_VISIONS": "false",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.generation_backend = "mock"
    mock.openai_api_key = "test_openai_key"
    mock.openai_base_url = "https://openai.test/v1"
    mock.image_model = "dall-e-3"
    mock.image_size = "1024x1024"
    mock.image_quality = "standard"
    mock.generation_timeout_seconds = 5.0
    mock.mock_generation_delay_seconds = 0.0
    mock.google_maps_api_key = "test_maps_key"
    mock.street_view_url = "https://maps.test/streetview"
    mock.street_view_size = "640x640"
    mock.http_max_connections = 10
    mock.http_max_keepalive_connections = 5
    mock.http_keepalive_expiry_seconds = 15.0
    mock.current_user_id = "user-1"
    mock.starting_points = 10
    mock.seed_sample_visions = False
    mock.cors_origins = ["http://localhost:3000"]

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("civiz.core.config.get_settings", return_value=mock), patch(
        "civiz.infrastructure.external.openai_image_gateway.get_settings", return_value=mock
    ), patch(
        "civiz.infrastructure.external.mock_image_gateway.get_settings", return_value=mock
    ), patch(
        "civiz.infrastructure.external.street_view_client.get_settings", return_value=mock
    ), patch(
        "civiz.infrastructure.http_client_factory.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def controlled_gateway() -> ControlledGateway:
    return ControlledGateway()


@pytest.fixture
def succeeding_gateway():
    gateway = AsyncMock(spec=VisionGenerationGateway)
    gateway.generate.return_value = GenerationResult.success("https://images.test/generated.png")
    return gateway


@pytest.fixture
def make_store():
    """Factory for stores with a deterministic placeholder and no seed data."""

    def _make(gateway: VisionGenerationGateway, starting_points: int = 10, **kwargs) -> VisionStore:
        kwargs.setdefault("placeholder_images", (PLACEHOLDER,))
        kwargs.setdefault("rng", random.Random(0))
        return VisionStore(
            gateway=gateway,
            current_user_id=kwargs.pop("current_user_id", "user-1"),
            starting_points=starting_points,
            **kwargs,
        )

    return _make


@pytest.fixture
def store(make_store, controlled_gateway) -> VisionStore:
    return make_store(controlled_gateway)


@pytest.fixture
def ready_store(make_store, succeeding_gateway) -> VisionStore:
    return make_store(succeeding_gateway)


@pytest.fixture
def settle():
    """Awaitable helper: `await settle()` lets pending submit tasks reach the gateway."""
    return _settle


@pytest.fixture
def placeholder() -> str:
    """Placeholder image every store built by make_store assigns to new visions."""
    return PLACEHOLDER
