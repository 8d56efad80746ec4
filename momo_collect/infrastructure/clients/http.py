"""Shared HTTP client construction."""

import httpx

from momo_collect import __version__
from momo_collect.core.config import Settings


def create_http_client(
    settings: Settings,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """
    Build the single HTTP client used for every gateway call.

    The token header, content type and per-call timeout are set here
    once instead of on each request.
    """
    return httpx.AsyncClient(
        base_url=settings.base_url,
        timeout=settings.request_timeout,
        headers={
            "Authorization": f"Token {settings.api_key}",
            "Content-Type": "application/json",
            "User-Agent": f"momo-collect/{__version__}",
        },
        transport=transport,
    )
