"""Single route probe."""

import asyncio
import logging
import time

import httpx

from src.config.constants import (
    ACCEPT_HEADER,
    ERROR_STATUS_CODE,
    ERROR_STATUS_MESSAGE,
    STATUS_MESSAGES,
    USER_AGENT,
)
from src.services.routes.models import RouteDescriptor, RouteOutcome
from src.services.routes.substitution import substitute_parameters

logger = logging.getLogger(__name__)


def get_status_message(status_code: int) -> str:
    """Human-readable label for an HTTP status code."""
    return STATUS_MESSAGES.get(status_code, f"HTTP {status_code}")


def _elapsed_ms(start: float) -> int:
    return int((time.time() - start) * 1000)


class RouteProbe:
    """Issues one GET per route over a shared AsyncClient."""

    def __init__(self, client: httpx.AsyncClient):
        self.client = client

    async def probe(
        self,
        descriptor: RouteDescriptor,
        base_url: str,
        timeout: float,
    ) -> RouteOutcome:
        """
        Probe a single route and capture its outcome.

        Args:
            descriptor: Route to test
            base_url: Base URL the route path is appended to
            timeout: Per-request timeout in seconds

        Returns:
            RouteOutcome for the route. Transport failures are recorded in the
            outcome, never raised.
        """
        full_url = base_url + descriptor.path
        logger.debug("Testing route: GET %s", full_url)
        start = time.time()

        try:
            request_url = substitute_parameters(full_url)
            # httpx.Timeout bounds each phase separately; wait_for caps the whole exchange.
            response = await asyncio.wait_for(
                self.client.get(
                    request_url,
                    headers={"Accept": ACCEPT_HEADER, "User-Agent": USER_AGENT},
                    timeout=httpx.Timeout(timeout),
                ),
                timeout=timeout,
            )
        except asyncio.TimeoutError:
            return self._error_outcome(
                descriptor, full_url, start, f"Request timed out after {timeout:g}s"
            )
        except Exception as e:
            return self._error_outcome(descriptor, full_url, start, str(e) or type(e).__name__)

        response_time = _elapsed_ms(start)
        status_code = response.status_code
        success = 200 <= status_code < 300

        if success:
            logger.debug(
                "Route test passed: %s - %s (%s ms)", descriptor.path, status_code, response_time
            )
        else:
            logger.warning(
                "Route test failed: %s - %s (%s ms)", descriptor.path, status_code, response_time
            )

        return RouteOutcome(
            route=descriptor.path,
            url=full_url,
            status_code=status_code,
            status_message=get_status_message(status_code),
            response_time_ms=response_time,
            success=success,
        )

    @staticmethod
    def _error_outcome(
        descriptor: RouteDescriptor,
        full_url: str,
        start: float,
        error_message: str,
    ) -> RouteOutcome:
        response_time = _elapsed_ms(start)
        logger.error("Error testing route: %s - %s", descriptor.path, error_message)
        return RouteOutcome(
            route=descriptor.path,
            url=full_url,
            status_code=ERROR_STATUS_CODE,
            status_message=ERROR_STATUS_MESSAGE,
            response_time_ms=response_time,
            success=False,
            error_message=error_message,
        )
