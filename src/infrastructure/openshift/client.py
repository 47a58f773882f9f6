"""OpenShift base URL resolver."""

import logging
from typing import Any

import httpx

from src.config.settings import Settings

logger = logging.getLogger(__name__)


class OpenShiftClient:
    """Resolves the public URL of a service from its OpenShift route."""

    def __init__(self, settings: Settings, client: httpx.AsyncClient | None = None):
        self.settings = settings
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            verify=settings.openshift_verify_ssl,
            timeout=settings.connect_timeout,
        )

    async def __aenter__(self) -> "OpenShiftClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.close()

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.settings.openshift_token}",
            "Accept": "application/json",
        }

    async def get_route_url(self, service_name: str) -> str | None:
        """
        Look up the route named after the service.

        Returns:
            "https://<host>" when the route has TLS, "http://<host>" otherwise,
            None when no route is found or the API cannot be reached
        """
        logger.info("Retrieving route URL for service: %s from OpenShift", service_name)
        namespace = self.settings.openshift_namespace
        url = (
            f"{self.settings.openshift_api_url}/apis/route.openshift.io/v1"
            f"/namespaces/{namespace}/routes/{service_name}"
        )
        try:
            response = await self._client.get(url, headers=self._headers())
            if response.status_code != 200:
                logger.warning(
                    "No route found for service: %s (status %s)", service_name, response.status_code
                )
                return None
            spec = response.json().get("spec") or {}
        except (httpx.HTTPError, ValueError) as e:
            logger.error("Error retrieving route from OpenShift: %s", e, exc_info=True)
            return None

        host = spec.get("host")
        if not host:
            logger.warning("Route for service %s has no host", service_name)
            return None

        protocol = "https" if spec.get("tls") else "http"
        route_url = f"{protocol}://{host}"
        logger.info("Found route URL: %s for service: %s", route_url, service_name)
        return route_url

    async def test_connection(self) -> bool:
        """Check that the namespaces endpoint is reachable with the configured token."""
        logger.info("Testing connection to OpenShift at: %s", self.settings.openshift_api_url)
        try:
            response = await self._client.get(
                f"{self.settings.openshift_api_url}/api/v1/namespaces",
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.error("Failed to connect to OpenShift: %s", e, exc_info=True)
            return False
        if response.status_code == 200:
            logger.info("Successfully connected to OpenShift")
            return True
        logger.error("Failed to connect to OpenShift. Status: %s", response.status_code)
        return False
