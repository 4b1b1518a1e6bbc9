"""Fixtures for integration tests against a local GoTrue server.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

import os
import uuid
from typing import TYPE_CHECKING

import pytest
from gotrue_sdk import AuthClient, TransportError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

DEFAULT_TEST_URL = "http://localhost:9999"


@pytest.fixture
def gotrue_url() -> str:
    """URL of the GoTrue server under test."""
    return os.environ.get("GOTRUE_TEST_URL", DEFAULT_TEST_URL)


@pytest.fixture
async def integration_client(gotrue_url: str) -> AsyncGenerator[AuthClient, None]:
    """Create a client for integration tests.

    Skips the test when no server answers at ``gotrue_url``.

    Yields:
        AuthClient: Client pointed at the local server.

    """
    api_key = os.environ.get("GOTRUE_TEST_API_KEY", "")
    async with AuthClient("local", api_key, timeout=10.0) as root:
        client = root.with_custom_auth_url(gotrue_url)
        try:
            await client.health.check()
        except TransportError as e:
            pytest.skip(f"No GoTrue server running on {gotrue_url}: {e}")
        yield client


@pytest.fixture
def random_email() -> str:
    """Unique address so repeated runs do not hit per-user rate limits."""
    return f"{uuid.uuid4().hex[:12]}@example.com"
