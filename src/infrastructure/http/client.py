"""Shared HTTP transport."""

import logging

import httpx

from src.config.settings import Settings

logger = logging.getLogger(__name__)

_shared_client: httpx.AsyncClient | None = None


def build_http_client(settings: Settings) -> httpx.AsyncClient:
    """Create an AsyncClient sized for the route testing worker pool."""
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.route_timeout, connect=settings.connect_timeout),
        limits=httpx.Limits(max_connections=settings.max_concurrent),
        follow_redirects=settings.follow_redirects,
    )


def get_shared_client(settings: Settings) -> httpx.AsyncClient:
    """
    Get or create the process-wide AsyncClient.

    The client holds the connection pool used by every route probe. It
    carries no per-request state, so workers share it without locking.

    Returns:
        Shared httpx.AsyncClient instance
    """
    global _shared_client
    if _shared_client is None or _shared_client.is_closed:
        _shared_client = build_http_client(settings)
        logger.debug("Shared HTTP client created")
    return _shared_client


async def close_shared_client() -> None:
    """
    Close the shared client instance.

    Should be called during application shutdown to release pooled connections.
    """
    global _shared_client
    if _shared_client is not None:
        await _shared_client.aclose()
        _shared_client = None
