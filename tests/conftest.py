"""Pytest configuration and fixtures."""

from collections.abc import Callable

import httpx
import pytest

from src.config.settings import Settings


@pytest.fixture
def settings():
    """Provide settings fixture."""
    return Settings(
        _env_file=None,
        route_timeout_ms=1000,
        max_concurrent=2,
        contrast_api_url="https://contrast.example.com/Contrast/api",
        contrast_api_key="api-key",
        contrast_username="user@example.com",
        contrast_service_key="service-key",
        contrast_organization_id="org-1",
        openshift_api_url="https://openshift.example.com:6443",
        openshift_token="token",
        openshift_namespace="qa",
    )


@pytest.fixture
def mock_client() -> Callable[[Callable[[httpx.Request], httpx.Response]], httpx.AsyncClient]:
    """Build an AsyncClient backed by a request handler instead of the network."""

    def factory(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return factory
