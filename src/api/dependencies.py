"""FastAPI dependencies."""

from collections.abc import AsyncIterator
from functools import lru_cache

from fastapi import Depends

from src.config.settings import Settings, get_settings
from src.infrastructure.contrast.client import ContrastSecurityClient
from src.infrastructure.http.client import get_shared_client
from src.infrastructure.openshift.client import OpenShiftClient
from src.orchestrator.pipeline import VerificationOrchestrator
from src.services.routes import ConcurrentRunner, RouteProbe


@lru_cache
def get_settings_dependency() -> Settings:
    """Get settings as a FastAPI dependency."""
    return get_settings()


async def get_route_source(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> AsyncIterator[ContrastSecurityClient]:
    """Contrast Security client scoped to one request."""
    async with ContrastSecurityClient(settings) as client:
        yield client


async def get_base_url_resolver(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
) -> AsyncIterator[OpenShiftClient]:
    """OpenShift client scoped to one request."""
    async with OpenShiftClient(settings) as client:
        yield client


def get_orchestrator(
    settings: Settings = Depends(get_settings_dependency),  # noqa: B008
    route_source: ContrastSecurityClient = Depends(get_route_source),  # noqa: B008
) -> VerificationOrchestrator:
    """Orchestrator wired to the shared HTTP transport."""
    runner = ConcurrentRunner(RouteProbe(get_shared_client(settings)))
    return VerificationOrchestrator(settings, route_source, runner)
