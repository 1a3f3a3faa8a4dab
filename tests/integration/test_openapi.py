"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

from src.api.main import app


@pytest.fixture
def client() -> TestClient:
    """Create test client for the application (lifespan not started)."""
    return TestClient(app)


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    """Tests for OpenAPI schema generation."""

    def test_openapi_schema_structure(self, schema: dict) -> None:
        """OpenAPI schema has the standard top-level sections."""
        assert "openapi" in schema
        assert "info" in schema
        assert "paths" in schema

    def test_openapi_title_and_version(self, schema: dict) -> None:
        assert schema["info"]["title"] == "accounts-auth"
        assert schema["info"]["version"] == "0.1.0"

    def test_signup_endpoint_in_schema(self, schema: dict) -> None:
        """POST /api/signup is documented with its request body."""
        signup = schema["paths"]["/api/signup"]["post"]
        assert signup["summary"] == "Create an account"
        body_schema = signup["requestBody"]["content"]["application/json"]["schema"]
        assert set(body_schema["required"]) == {"name", "email", "password", "passwordConfirmation"}

    def test_login_endpoint_in_schema(self, schema: dict) -> None:
        login = schema["paths"]["/api/login"]["post"]
        assert login["summary"] == "Log in"
        assert "401" in login["responses"]

    def test_protected_endpoints_in_schema(self, schema: dict) -> None:
        assert "get" in schema["paths"]["/api/me"]
        assert "get" in schema["paths"]["/api/admin/ping"]

    def test_endpoints_tagged_with_v1(self, schema: dict) -> None:
        tag_names = [t["name"] for t in schema.get("tags", [])]
        assert "v1" in tag_names
        assert "v1" in schema["paths"]["/api/signup"]["post"]["tags"]
        assert "v1" in schema["paths"]["/api/login"]["post"]["tags"]


class TestSwaggerUI:
    """Tests for Swagger UI availability."""

    def test_docs_endpoint_accessible(self, client: TestClient) -> None:
        """Swagger UI is accessible at /docs."""
        response = client.get("/docs")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "swagger" in response.text.lower()
