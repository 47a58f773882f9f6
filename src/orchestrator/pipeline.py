"""Route verification orchestrator."""

import logging
import time
from typing import Protocol

from src.config.constants import VerificationStep
from src.config.settings import Settings
from src.infrastructure.logging.logger import StructuredLogger
from src.orchestrator.errors import UpstreamUnavailable
from src.orchestrator.step_timer import timed_step
from src.services.routes import (
    ConcurrentRunner,
    RouteDescriptor,
    VerificationReport,
    VerificationRequest,
    aggregate_report,
)

logger = logging.getLogger(__name__)


class RouteSource(Protocol):
    """Supplier of route descriptors for a service build."""

    async def test_connection(self) -> bool: ...

    async def retrieve_routes(self, service_name: str, build_number: str) -> list[RouteDescriptor]: ...


class VerificationOrchestrator:
    """
    Runs a verification in three sequential steps.

    1. Connecting: check the route source is reachable (fatal on failure)
    2. Retrieving: fetch the GET routes for the service build
    3. Testing: probe every route through the bounded worker pool

    The report is then aggregated with the elapsed time of all three steps.
    """

    def __init__(self, settings: Settings, route_source: RouteSource, runner: ConcurrentRunner):
        """Initialize orchestrator with its collaborators."""
        self.settings = settings
        self.route_source = route_source
        self.runner = runner
        self.step_logger = StructuredLogger(__name__)

    async def execute(self, request: VerificationRequest) -> VerificationReport:
        """
        Verify every route of the requested service build.

        Raises:
            UpstreamUnavailable: If the route source connectivity check fails
        """
        start_time = time.time()
        logger.info(
            "Starting route testing for service: %s, build: %s",
            request.service_name,
            request.build_number,
        )

        async with timed_step(VerificationStep.CONNECTING, self.step_logger) as step:
            connected = await self.route_source.test_connection()
            step.set_state(connected=connected)
            if not connected:
                raise UpstreamUnavailable("Failed to connect to the route source")

        async with timed_step(VerificationStep.RETRIEVING, self.step_logger) as step:
            routes = await self.route_source.retrieve_routes(
                request.service_name, request.build_number
            )
            step.set_state(route_count=len(routes))
            if not routes:
                logger.warning(
                    "No routes found for service: %s, build: %s",
                    request.service_name,
                    request.build_number,
                )

        async with timed_step(VerificationStep.TESTING, self.step_logger) as step:
            logger.debug(
                "retry_attempts=%s is configured but routes are probed once",
                self.settings.retry_attempts,
            )
            outcomes = await self.runner.run(
                routes,
                request.base_route_url,
                max_concurrent=self.settings.max_concurrent,
                timeout=self.settings.route_timeout,
            )
            step.set_state(base_url=request.base_route_url, outcome_count=len(outcomes))

        # Run time covers Connecting through Testing; aggregation is not counted.
        elapsed_ms = int((time.time() - start_time) * 1000)

        async with timed_step(VerificationStep.DONE, self.step_logger) as step:
            report = aggregate_report(
                request.service_name, request.build_number, outcomes, elapsed_ms
            )
            step.set_state(
                passed=report.passed_routes,
                failed=report.failed_routes,
                total_duration_ms=report.total_duration_ms,
            )

        return report
