"""User service for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig, json_body
from .models import UpdateUserRequest, User


class UserService:
    """Service for the signed-in user. Requires a user bearer token."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize user service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def get(self) -> User:
        """Get the signed-in user.

        Returns:
            User data.

        """
        return await self._client.make_request("GET", "/user", User)

    async def update(self, request: UpdateUserRequest) -> User:
        """Update the signed-in user.

        Changing the email sends a confirmation link to the new address.

        Args:
            request: Fields to change

        Returns:
            Updated user data.

        """
        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request("PUT", "/user", User, config=config)
