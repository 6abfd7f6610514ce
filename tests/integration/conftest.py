"""
Integration Test Fixtures.

Fixtures for integration tests - uses a real database and the full app.
These fixtures build on the root conftest.py database fixtures.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from notepad.core.database import Database

API = "/api"


# =============================================================================
# API Client Fixtures
# =============================================================================


@pytest.fixture
async def client(database: Database) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client bound to the test database.

    Each request runs in its own committed transaction, exactly as in
    production.

    Usage:
        async def test_health_endpoint(client: AsyncClient):
            response = await client.get("/health")
            assert response.status_code == 200
    """
    from notepad.main import create_app

    app = create_app(database=database)

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client


# =============================================================================
# API Response Assertion Helpers
# =============================================================================


class ApiAssertions:
    """Helper class for API response assertions."""

    @staticmethod
    def assert_ok(response: Any, expected_status: int = 200) -> Any:
        """
        Assert the response has the expected success status.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        return response.json()

    @staticmethod
    def assert_error(
        response: Any,
        expected_status: int,
        expected_message: str | None = None,
    ) -> dict[str, Any]:
        """
        Assert the response is an error with a `{"message": ...}` body.

        Returns:
            Response JSON data
        """
        assert response.status_code == expected_status, (
            f"Expected status {expected_status}, got {response.status_code}: "
            f"{response.text}"
        )
        data = response.json()
        assert set(data) == {"message"}, f"Unexpected error body: {data}"

        if expected_message is not None:
            assert data["message"] == expected_message

        return data

    @staticmethod
    def assert_validation_error(response: Any, field: str | None = None) -> dict[str, Any]:
        """Assert the response is a 400 validation error naming `field`."""
        data = ApiAssertions.assert_error(response, 400)
        assert data["message"].startswith("Please provide valid values for:")
        if field:
            assert field in data["message"], data["message"]
        return data


@pytest.fixture
def api() -> ApiAssertions:
    """Provide API assertion helpers."""
    return ApiAssertions()


# =============================================================================
# Authentication Fixtures
# =============================================================================


@pytest.fixture
def login_as(client: AsyncClient) -> Callable[..., Awaitable[dict[str, str]]]:
    """
    Register a user through the API, log in and return auth headers.

    Usage:
        async def test_protected(client, login_as):
            headers = await login_as("alice")
            response = await client.get("/api/notes", headers=headers)
    """

    async def _login_as(username: str, password: str = "s3cret-pass") -> dict[str, str]:
        response = await client.post(
            f"{API}/auth/register",
            json={"username": username, "password": password},
        )
        assert response.status_code == 201, response.text

        response = await client.post(
            f"{API}/auth/login",
            json={"username": username, "password": password},
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login_as


@pytest.fixture
async def auth_headers(login_as) -> dict[str, str]:
    """Auth headers for a freshly registered user 'alice'."""
    return await login_as("alice")
