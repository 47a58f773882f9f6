"""Tests for the verification API endpoints."""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_base_url_resolver, get_orchestrator, get_route_source
from src.app import app
from src.orchestrator.errors import UpstreamUnavailable
from src.services.routes import RouteOutcome, aggregate_report

PAYLOAD = {
    "serviceName": "orders",
    "buildNumber": "142",
    "baseRouteUrl": "http://host",
}


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _override(dependency, value):
    app.dependency_overrides[dependency] = lambda: value


# ==========================================
#  POST /api/test
# ==========================================


def test_test_routes_success(client):
    outcome = RouteOutcome(
        route="/a",
        url="http://host/a",
        status_code=200,
        status_message="OK",
        response_time_ms=12,
        success=True,
    )
    orchestrator = AsyncMock()
    orchestrator.execute.return_value = aggregate_report("orders", "142", [outcome], 40)
    _override(get_orchestrator, orchestrator)

    response = client.post("/api/test", json=PAYLOAD)

    assert response.status_code == 200
    data = response.json()
    assert data["totalRoutes"] == 1
    assert data["passedRoutes"] == 1
    assert data["results"][0]["statusMessage"] == "OK"
    request = orchestrator.execute.call_args[0][0]
    assert request.environment == "qa"


def test_test_routes_camel_case_contract(client):
    """Request and report use camelCase JSON field names."""
    outcome = RouteOutcome(
        route="/b/{id}",
        url="http://host/b/{id}",
        status_code=0,
        status_message="Error",
        response_time_ms=3,
        success=False,
        error_message="Connection refused",
    )
    orchestrator = AsyncMock()
    orchestrator.execute.return_value = aggregate_report("orders", "142", [outcome], 7)
    _override(get_orchestrator, orchestrator)

    response = client.post(
        "/api/test",
        json={"serviceName": "orders", "buildNumber": "1", "baseRouteUrl": "http://h"},
    )

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {
        "serviceName",
        "buildNumber",
        "totalRoutes",
        "passedRoutes",
        "failedRoutes",
        "results",
        "totalDurationMs",
    }
    assert data["results"][0] == {
        "route": "/b/{id}",
        "url": "http://host/b/{id}",
        "statusCode": 0,
        "statusMessage": "Error",
        "responseTimeMs": 3,
        "success": False,
        "errorMessage": "Connection refused",
    }
    request = orchestrator.execute.call_args[0][0]
    assert request.base_route_url == "http://h"


def test_test_routes_accepts_snake_case_fields(client):
    orchestrator = AsyncMock()
    orchestrator.execute.return_value = aggregate_report("orders", "142", [], 0)
    _override(get_orchestrator, orchestrator)

    response = client.post(
        "/api/test",
        json={"service_name": "orders", "build_number": "142", "base_route_url": "http://host"},
    )

    assert response.status_code == 200
    assert response.json()["serviceName"] == "orders"


def test_test_routes_upstream_unavailable(client):
    orchestrator = AsyncMock()
    orchestrator.execute.side_effect = UpstreamUnavailable("down")
    _override(get_orchestrator, orchestrator)

    response = client.post("/api/test", json=PAYLOAD)

    assert response.status_code == 502
    data = response.json()
    assert data["serviceName"] == "orders"
    assert data["totalRoutes"] == 0
    assert data["results"] == []


def test_test_routes_unexpected_error(client):
    orchestrator = AsyncMock()
    orchestrator.execute.side_effect = Exception("boom")
    _override(get_orchestrator, orchestrator)

    response = client.post("/api/test", json=PAYLOAD)

    assert response.status_code == 500
    assert response.json()["failedRoutes"] == 0


def test_test_routes_blank_field_rejected(client):
    orchestrator = AsyncMock()
    _override(get_orchestrator, orchestrator)

    response = client.post("/api/test", json={**PAYLOAD, "serviceName": "  "})

    assert response.status_code == 422
    orchestrator.execute.assert_not_called()


# ==========================================
#  COLLABORATOR CHECKS
# ==========================================


def test_contrast_connection(client):
    source = AsyncMock()
    source.test_connection.return_value = True
    _override(get_route_source, source)

    response = client.get("/api/contrast/test-connection")

    assert response.status_code == 200
    assert response.json() == {
        "connected": True,
        "message": "Successfully connected to Contrast Security",
    }


def test_openshift_route_found(client):
    resolver = AsyncMock()
    resolver.get_route_url.return_value = "https://orders.apps.example.com"
    _override(get_base_url_resolver, resolver)

    response = client.get("/api/openshift/route", params={"serviceName": "orders"})

    assert response.status_code == 200
    assert response.json() == {
        "success": True,
        "routeUrl": "https://orders.apps.example.com",
        "serviceName": "orders",
    }


def test_openshift_route_missing(client):
    resolver = AsyncMock()
    resolver.get_route_url.return_value = None
    _override(get_base_url_resolver, resolver)

    response = client.get("/api/openshift/route", params={"serviceName": "orders"})

    assert response.json() == {
        "success": False,
        "message": "Route not found for service: orders",
    }


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    assert response.json() == {"status": "UP", "service": "Route Verifier"}
