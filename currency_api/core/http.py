"""Shared outbound HTTP client."""

from typing import Optional

import httpx

from currency_api.core.config import settings

# Global client (created lazily, closed on shutdown)
_http_client: Optional[httpx.AsyncClient] = None


async def get_http_client() -> httpx.AsyncClient:
    """Return the process-wide ``httpx.AsyncClient``, creating it on first use."""
    global _http_client

    if _http_client is None or _http_client.is_closed:
        _http_client = httpx.AsyncClient(
            timeout=settings.NBP_TIMEOUT_SEC,
            headers={"Accept": "application/json"},
        )
    return _http_client


async def close_http_client() -> None:
    global _http_client

    if _http_client is not None:
        await _http_client.aclose()
        _http_client = None
