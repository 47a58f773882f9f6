"""Report aggregation."""

from collections.abc import Sequence

from src.services.routes.models import RouteOutcome, VerificationReport


def aggregate_report(
    service_name: str,
    build_number: str,
    outcomes: Sequence[RouteOutcome],
    elapsed_ms: int,
) -> VerificationReport:
    """Reduce route outcomes into pass/fail counts."""
    passed = sum(1 for outcome in outcomes if outcome.success)
    return VerificationReport(
        service_name=service_name,
        build_number=build_number,
        total_routes=len(outcomes),
        passed_routes=passed,
        failed_routes=len(outcomes) - passed,
        results=list(outcomes),
        total_duration_ms=elapsed_ms,
    )
