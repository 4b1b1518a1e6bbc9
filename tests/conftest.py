"""Test configuration and common utilities.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import respx
from gotrue_sdk import AuthClient

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator, Generator

PROJECT_REFERENCE = "abcdefghijklmnop"
AUTH_URL = f"https://{PROJECT_REFERENCE}.supabase.co/auth/v1"


@pytest.fixture
def project_reference() -> str:
    """Return the project reference the test client is built from."""
    return PROJECT_REFERENCE


@pytest.fixture
def auth_url() -> str:
    """Return the Auth URL derived from the project reference."""
    return AUTH_URL


@pytest.fixture
def api_key() -> str:
    """Return test API key.

    Returns:
        str: The API key for testing.

    """
    return "test-anon-key-12345"


@pytest.fixture
def service_token() -> str:
    """Return a service role token for admin endpoints."""
    return "test-service-role-token"


@pytest.fixture
async def client(api_key: str) -> AsyncGenerator[AuthClient, None]:
    """Create test client.

    Yields:
        AuthClient: Client without a bearer token.

    """
    async with AuthClient(PROJECT_REFERENCE, api_key, timeout=5.0) as client:
        yield client


@pytest.fixture
def admin_client(client: AuthClient, service_token: str) -> AuthClient:
    """Client derived from ``client`` with the service role token."""
    return client.with_token(service_token)


@pytest.fixture
def mock_api() -> Generator[respx.MockRouter, None, None]:
    """Mock HTTP responses.

    Yields:
        The mock router for HTTP requests.

    """
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def sample_user() -> dict[str, Any]:
    """Sample user payload.

    Returns:
        dict[str, Any]: User as returned by the server.

    """
    return {
        "id": "5e3f5f4e-1b9a-4c1e-9a53-2b3c4d5e6f70",
        "aud": "authenticated",
        "role": "authenticated",
        "email": "test@example.com",
        "email_confirmed_at": "2024-01-01T00:00:00Z",
        "phone": "",
        "app_metadata": {"provider": "email", "providers": ["email"]},
        "user_metadata": {"name": "Test User"},
        "identities": [],
        "factors": None,
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00.123456Z",
        "is_anonymous": False,
    }


@pytest.fixture
def sample_session(sample_user: dict[str, Any]) -> dict[str, Any]:
    """Sample session payload.

    Returns:
        dict[str, Any]: Session as returned by the token endpoint.

    """
    return {
        "access_token": "test-access-token",
        "token_type": "bearer",
        "expires_in": 3600,
        "expires_at": 1704070800,
        "refresh_token": "test-refresh-token",
        "user": sample_user,
    }
