"""Route verification models."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# JSON fields are camelCase on the wire; Python code uses snake_case names.
_CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


@dataclass(frozen=True)
class RouteDescriptor:
    """A GET endpoint template reported by the route source."""

    path: str
    method: str = "GET"
    signature: str = ""


class RouteOutcome(BaseModel):
    """Result of probing one route exactly once."""

    model_config = ConfigDict(**_CAMEL_CASE, frozen=True)

    route: str
    url: str
    status_code: int
    status_message: str
    response_time_ms: int
    success: bool
    error_message: str | None = None


class VerificationRequest(BaseModel):
    """Request to verify the routes of a deployed service build."""

    model_config = _CAMEL_CASE

    service_name: str = Field(..., description="Service name as known to the route source")
    build_number: str = Field(..., description="Build number of the deployment")
    base_route_url: str = Field(..., description="Absolute base URL the routes are served from")
    environment: str = Field("qa", description="Target environment")

    @field_validator("service_name", "build_number", "base_route_url")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("must not be blank")
        return v


class VerificationReport(BaseModel):
    """Summary of a verification run."""

    model_config = _CAMEL_CASE

    service_name: str
    build_number: str
    total_routes: int = 0
    passed_routes: int = 0
    failed_routes: int = 0
    results: list[RouteOutcome] = Field(default_factory=list)
    total_duration_ms: int = 0
