"""Shared pooled httpx client for the image generation and Street View adapters."""
import logging
from typing import Optional

import httpx

from ..core.config import get_settings

logger = logging.getLogger(__name__)

_shared_client: Optional[httpx.AsyncClient] = None


def build_http_client() -> httpx.AsyncClient:
    """
    Build an AsyncClient from settings.

    The client-level timeout is the generation timeout, the longest call any
    adapter makes; adapters pass their own per-request timeout on top.
    """
    settings = get_settings()
    return httpx.AsyncClient(
        timeout=settings.generation_timeout_seconds,
        limits=httpx.Limits(
            max_connections=settings.http_max_connections,
            max_keepalive_connections=settings.http_max_keepalive_connections,
            keepalive_expiry=settings.http_keepalive_expiry_seconds,
        ),
        http2=True,
    )


def get_shared_http_client() -> httpx.AsyncClient:
    """
    Return the process-wide client, creating it on first use.

    Returns:
        Shared AsyncClient instance
    """
    global _shared_client

    if _shared_client is None or _shared_client.is_closed:
        _shared_client = build_http_client()
        logger.info(
            f"Created shared HTTP client (timeout {_shared_client.timeout.read}s)"
        )

    return _shared_client


async def close_shared_http_client() -> None:
    """Close the shared client on application shutdown; a later call builds a new one."""
    global _shared_client

    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
        logger.info("Closed shared HTTP client")
