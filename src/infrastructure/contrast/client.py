"""Contrast Security route source client."""

import logging
from typing import Any

import httpx

from src.config.constants import ROUTE_METHOD
from src.config.settings import Settings
from src.services.routes.models import RouteDescriptor

logger = logging.getLogger(__name__)


class ContrastSecurityClient:
    """
    Reads the observed routes of an application from Contrast Security.

    Errors are logged and absorbed: test_connection() returns False and
    retrieve_routes() returns an empty list.

    Usage:
        async with ContrastSecurityClient(settings) as contrast:
            if await contrast.test_connection():
                routes = await contrast.retrieve_routes("orders", "142")
    """

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None):
        """Initialize the client.

        Args:
            settings: Application settings containing Contrast configuration
            client: Optional AsyncClient to use instead of an owned one
        """
        self.settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(timeout=settings.contrast_timeout)

    async def __aenter__(self) -> "ContrastSecurityClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()

    @property
    def _org_url(self) -> str:
        return f"{self.settings.contrast_api_url}/ng/{self.settings.contrast_organization_id}"

    def _auth(self) -> httpx.BasicAuth:
        return httpx.BasicAuth(self.settings.contrast_username, self.settings.contrast_service_key)

    def _headers(self) -> dict[str, str]:
        return {
            "API-Key": self.settings.contrast_api_key,
            "Accept": "application/json",
        }

    async def _get(self, url: str) -> httpx.Response:
        return await self._client.get(
            url,
            auth=self._auth(),
            headers=self._headers(),
            timeout=self.settings.contrast_timeout,
        )

    async def test_connection(self) -> bool:
        """Check connectivity and authentication against the applications endpoint."""
        logger.info("Connecting to Contrast Security at: %s", self.settings.contrast_api_url)
        try:
            response = await self._get(f"{self._org_url}/applications")
        except httpx.HTTPError as e:
            logger.error("Error connecting to Contrast Security: %s", e, exc_info=True)
            return False

        if response.status_code == 200:
            logger.info("Successfully connected to Contrast Security")
            return True
        logger.error("Failed to connect to Contrast Security. Status: %s", response.status_code)
        return False

    async def retrieve_routes(self, service_name: str, build_number: str) -> list[RouteDescriptor]:
        """
        Fetch the GET routes observed for a service.

        Args:
            service_name: Application name, matched case-insensitively
            build_number: Build being verified (informational)

        Returns:
            GET route descriptors, empty on any error
        """
        logger.info("Retrieving routes for service: %s, build: %s", service_name, build_number)
        try:
            application_id = await self._get_application_id(service_name)
            if application_id is None:
                logger.error("Application not found for service: %s", service_name)
                return []
            logger.info("Found application ID: %s for service: %s", application_id, service_name)

            response = await self._get(f"{self._org_url}/traces/{application_id}/routes")
            if response.status_code != 200:
                logger.error(
                    "Failed to retrieve routes. Status: %s, Body: %s",
                    response.status_code,
                    response.text,
                )
                return []

            routes = parse_routes(response.json())
            logger.info("Retrieved %s GET routes from Contrast Security", len(routes))
            return routes
        except (httpx.HTTPError, ValueError, AttributeError, TypeError) as e:
            logger.error("Error retrieving routes from Contrast Security: %s", e, exc_info=True)
            return []

    async def _get_application_id(self, service_name: str) -> str | None:
        response = await self._get(f"{self._org_url}/applications")
        if response.status_code != 200:
            logger.error("Failed to list applications. Status: %s", response.status_code)
            return None

        payload = response.json()
        if not isinstance(payload, dict):
            logger.error("Unexpected applications payload: %s", type(payload).__name__)
            return None
        applications = payload.get("applications")
        if not isinstance(applications, list):
            return None
        for app in applications:
            if not isinstance(app, dict):
                continue
            if str(app.get("name", "")).lower() == service_name.lower() and app.get("app_id"):
                return str(app["app_id"])
        return None


def parse_routes(payload: Any) -> list[RouteDescriptor]:
    """Extract GET route descriptors from a routes payload."""
    if not isinstance(payload, dict):
        logger.error("Unexpected routes payload: %s", type(payload).__name__)
        return []
    nodes = payload.get("routes")
    if not isinstance(nodes, list):
        return []

    routes = []
    for node in nodes:
        if not isinstance(node, dict):
            logger.warning("Skipping malformed route entry: %s", node)
            continue
        method = node.get("verb") or ROUTE_METHOD
        if not isinstance(method, str) or method.upper() != ROUTE_METHOD:
            continue
        path = node.get("route")
        if not path or not isinstance(path, str):
            logger.warning("Skipping route without path: %s", node)
            continue
        signature = node.get("signature")
        routes.append(
            RouteDescriptor(
                path=path,
                method=method.upper(),
                signature=signature if isinstance(signature, str) else "",
            )
        )
    return routes
