"""Request/Response models for API endpoints."""

from pydantic import BaseModel, Field

from src.services.routes.models import VerificationReport, VerificationRequest

__all__ = [
    "ConnectionResponse",
    "HealthResponse",
    "RouteUrlResponse",
    "VerificationReport",
    "VerificationRequest",
]


class HealthResponse(BaseModel):
    """Response model for health endpoint."""

    status: str = Field(..., description="Service status")
    service: str = Field(..., description="Service name")


class ConnectionResponse(BaseModel):
    """Response model for route source connectivity checks."""

    connected: bool
    message: str


class RouteUrlResponse(BaseModel):
    """Base URL lookup result."""

    success: bool
    route_url: str | None = Field(None, serialization_alias="routeUrl")
    service_name: str | None = Field(None, serialization_alias="serviceName")
    message: str | None = None
