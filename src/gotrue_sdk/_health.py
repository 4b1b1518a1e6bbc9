"""Health and settings service for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient
from .models import HealthCheckResponse, SettingsResponse


class HealthService:
    """Service for server health and public settings."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize health service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def check(self) -> HealthCheckResponse:
        """Check the health of the Auth server.

        Returns:
            Server name, version and description.

        """
        return await self._client.make_request("GET", "/health", HealthCheckResponse)

    async def settings(self) -> SettingsResponse:
        """Get the publicly available settings of this Auth instance.

        Returns:
            Enabled providers and sign-up settings.

        """
        return await self._client.make_request("GET", "/settings", SettingsResponse)
