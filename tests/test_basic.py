"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds with a successful envelope.
"""

import httpx
from fastapi.testclient import TestClient

from app.main import app
from app.wsgi import application

client = TestClient(app)


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self) -> None:
        """Health endpoint must return HTTP 200."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_response_body(self) -> None:
        """Health endpoint must wrap status and version in the envelope."""
        body = client.get("/api/v1/health").json()
        assert body["statusCode"] == 200
        assert body["success"] is True
        assert body["message"] == "Service is healthy"
        assert body["data"]["status"] == "ok"
        assert "version" in body["data"]


class TestWsgiApplication:
    """Tests for the WSGI wrapper."""

    def test_health_served_through_wsgi(self) -> None:
        """A request through the WSGI callable gets the same envelope."""
        transport = httpx.WSGITransport(app=application)
        with httpx.Client(transport=transport, base_url="http://testserver") as wsgi_client:
            response = wsgi_client.get("/api/v1/health")

        assert response.status_code == 200
        body = response.json()
        assert body["statusCode"] == 200
        assert body["success"] is True
        assert body["data"]["status"] == "ok"
