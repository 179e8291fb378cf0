"""
Unit tests for the OpenAI image gateway and its error classification.
"""
import json

import httpx
import pytest
from civiz.domain.models.generation import FailureReason
from civiz.infrastructure.external.openai_image_gateway import (
    OpenAIImageGateway,
    build_transformation_prompt,
    classify_openai_error,
)


def _gateway(handler, api_key="sk-test") -> OpenAIImageGateway:
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return OpenAIImageGateway(
        api_key=api_key,
        base_url="https://openai.test/v1",
        model="dall-e-3",
        size="1024x1024",
        quality="standard",
        timeout=5.0,
        http_client=client,
    )


def _error(status_code: int, code: str, message: str = "error"):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code, json={"error": {"code": code, "message": message}})

    return handler


class TestClassifyOpenAIError:
    """Tests for classify_openai_error"""

    @pytest.mark.parametrize(
        "status_code, text, expected",
        [
            (429, '{"code": "rate_limit_exceeded"}', FailureReason.RATE_LIMITED),
            (429, '{"code": "insufficient_quota"}', FailureReason.QUOTA_EXHAUSTED),
            (400, "billing hard limit reached", FailureReason.QUOTA_EXHAUSTED),
            (401, '{"code": "invalid_api_key"}', FailureReason.INVALID_CREDENTIALS),
            (400, '{"code": "content_policy_violation"}', FailureReason.CONTENT_POLICY),
            (500, "upstream timeout", FailureReason.TIMEOUT),
        ],
    )
    def test_text_markers(self, status_code, text, expected):
        assert classify_openai_error(status_code, text) is expected

    @pytest.mark.parametrize(
        "status_code, expected",
        [
            (401, FailureReason.INVALID_CREDENTIALS),
            (402, FailureReason.QUOTA_EXHAUSTED),
            (408, FailureReason.TIMEOUT),
            (504, FailureReason.TIMEOUT),
            (429, FailureReason.RATE_LIMITED),
            (500, FailureReason.UNKNOWN),
            (None, FailureReason.UNKNOWN),
        ],
    )
    def test_status_fallback(self, status_code, expected):
        assert classify_openai_error(status_code, "") is expected


class TestOpenAIImageGateway:
    """Tests for OpenAIImageGateway.generate"""

    @pytest.mark.asyncio
    async def test_success_returns_url(self, mock_settings):
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers["Authorization"]
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json={"data": [{"url": "https://images.test/out.png"}]})

        result = await _gateway(handler).generate("Dolores Park", "a new playground")

        assert result.ok
        assert result.image_ref == "https://images.test/out.png"
        assert captured["url"] == "https://openai.test/v1/images/generations"
        assert captured["auth"] == "Bearer sk-test"
        assert captured["body"]["model"] == "dall-e-3"
        assert captured["body"]["n"] == 1
        assert captured["body"]["prompt"] == build_transformation_prompt("Dolores Park", "a new playground")

    @pytest.mark.asyncio
    async def test_b64_payload_becomes_data_url(self, mock_settings):
        def handler(request):
            return httpx.Response(200, json={"data": [{"b64_json": "aGVsbG8="}]})

        result = await _gateway(handler).generate("Dolores Park", "a new playground")
        assert result.image_ref == "data:image/png;base64,aGVsbG8="

    @pytest.mark.asyncio
    async def test_missing_url(self, mock_settings):
        def handler(request):
            return httpx.Response(200, json={"data": []})

        result = await _gateway(handler).generate("Dolores Park", "a new playground")
        assert not result.ok
        assert result.reason is FailureReason.UNKNOWN

    @pytest.mark.asyncio
    async def test_non_json_body(self, mock_settings):
        def handler(request):
            return httpx.Response(200, text="<html>oops</html>")

        result = await _gateway(handler).generate("Dolores Park", "a new playground")
        assert not result.ok
        assert result.reason is FailureReason.UNKNOWN

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "status_code, code, expected",
        [
            (429, "rate_limit_exceeded", FailureReason.RATE_LIMITED),
            (429, "insufficient_quota", FailureReason.QUOTA_EXHAUSTED),
            (401, "invalid_api_key", FailureReason.INVALID_CREDENTIALS),
            (400, "content_policy_violation", FailureReason.CONTENT_POLICY),
            (500, "server_error", FailureReason.UNKNOWN),
        ],
    )
    async def test_http_errors_classified(self, mock_settings, status_code, code, expected):
        result = await _gateway(_error(status_code, code)).generate("Dolores Park", "a new playground")
        assert not result.ok
        assert result.reason is expected
        assert result.message == f"HTTP {status_code}"

    @pytest.mark.asyncio
    async def test_timeout(self, mock_settings):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        result = await _gateway(handler).generate("Dolores Park", "a new playground")
        assert result.reason is FailureReason.TIMEOUT

    @pytest.mark.asyncio
    async def test_transport_error(self, mock_settings):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        result = await _gateway(handler).generate("Dolores Park", "a new playground")
        assert result.reason is FailureReason.UNKNOWN

    @pytest.mark.asyncio
    async def test_missing_key_skips_request(self, mock_settings):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={})

        result = await _gateway(handler, api_key="").generate("Dolores Park", "a new playground")
        assert result.reason is FailureReason.INVALID_CREDENTIALS
        assert calls == []

    def test_defaults_from_settings(self, mock_settings):
        gateway = OpenAIImageGateway()
        assert gateway.api_key == "test_openai_key"
        assert gateway.base_url == "https://openai.test/v1"
        assert gateway.timeout == 5.0


class TestTransformationPrompt:
    """Tests for build_transformation_prompt"""

    def test_contains_address_and_vision(self):
        prompt = build_transformation_prompt("24th and Mission", "a mural covered plaza")
        assert "street view photograph of 24th and Mission" in prompt
        assert "where a mural covered plaza." in prompt
        assert "PRESERVE the EXACT same building structure" in prompt
