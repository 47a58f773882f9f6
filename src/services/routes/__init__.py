"""Route verification engine."""

from src.services.routes.models import (
    RouteDescriptor,
    RouteOutcome,
    VerificationReport,
    VerificationRequest,
)
from src.services.routes.probe import RouteProbe, get_status_message
from src.services.routes.report import aggregate_report
from src.services.routes.runner import ConcurrentRunner
from src.services.routes.substitution import substitute_parameters

__all__ = [
    "ConcurrentRunner",
    "RouteDescriptor",
    "RouteOutcome",
    "RouteProbe",
    "VerificationReport",
    "VerificationRequest",
    "aggregate_report",
    "get_status_message",
    "substitute_parameters",
]
