"""Route verification endpoints."""

import logging

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from src.api.dependencies import get_base_url_resolver, get_orchestrator, get_route_source
from src.api.models import (
    ConnectionResponse,
    HealthResponse,
    RouteUrlResponse,
    VerificationReport,
    VerificationRequest,
)
from src.infrastructure.contrast.client import ContrastSecurityClient
from src.infrastructure.openshift.client import OpenShiftClient
from src.orchestrator.errors import UpstreamUnavailable
from src.orchestrator.pipeline import VerificationOrchestrator

logger = logging.getLogger(__name__)

router = APIRouter()


def _empty_report(request: VerificationRequest, status_code: int) -> JSONResponse:
    report = VerificationReport(
        service_name=request.service_name,
        build_number=request.build_number,
    )
    return JSONResponse(
        status_code=status_code,
        content=report.model_dump(mode="json", by_alias=True),
    )


@router.post("/test", response_model=VerificationReport)
async def test_routes(
    request: VerificationRequest,
    orchestrator: VerificationOrchestrator = Depends(get_orchestrator),  # noqa: B008
) -> VerificationReport | JSONResponse:
    """
    Verify every GET route of a deployed service build.

    1. Connect to the route source
    2. Retrieve the routes for the build
    3. Test each route against the base URL
    """
    logger.info(
        "Received test request for service: %s, build: %s",
        request.service_name,
        request.build_number,
    )
    try:
        return await orchestrator.execute(request)
    except UpstreamUnavailable as e:
        logger.error("Route source unavailable: %s", e)
        return _empty_report(request, status_code=502)
    except Exception as e:
        logger.error(f"Error executing route tests: {e}", exc_info=True)
        return _empty_report(request, status_code=500)


@router.get("/contrast/test-connection", response_model=ConnectionResponse)
async def test_contrast_connection(
    route_source: ContrastSecurityClient = Depends(get_route_source),  # noqa: B008
) -> ConnectionResponse:
    """Check connectivity to Contrast Security."""
    connected = await route_source.test_connection()
    message = (
        "Successfully connected to Contrast Security"
        if connected
        else "Failed to connect to Contrast Security"
    )
    return ConnectionResponse(connected=connected, message=message)


@router.get(
    "/openshift/route",
    response_model=RouteUrlResponse,
    response_model_exclude_none=True,
)
async def get_openshift_route(
    service_name: str = Query(..., alias="serviceName", min_length=1),
    resolver: OpenShiftClient = Depends(get_base_url_resolver),  # noqa: B008
) -> RouteUrlResponse:
    """Resolve the base URL of a service from OpenShift."""
    route_url = await resolver.get_route_url(service_name)
    if route_url is None:
        return RouteUrlResponse(
            success=False,
            message=f"Route not found for service: {service_name}",
        )
    return RouteUrlResponse(success=True, route_url=route_url, service_name=service_name)


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Health check endpoint."""
    return HealthResponse(status="UP", service="Route Verifier")
