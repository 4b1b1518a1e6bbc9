"""GoTrue client using service composition.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

from typing import Self

import httpx

from ._admin import AdminService
from ._auth import AuthService
from ._base import BaseClient
from ._health import HealthService
from ._mfa import MFAService
from ._oauth import OAuthService
from ._user import UserService
from .config import DEFAULT_TIMEOUT, ClientConfig


class AuthClient:
    """Client for the GoTrue / Supabase Auth API.

    Option methods (:meth:`with_token`, :meth:`with_custom_auth_url`,
    :meth:`with_http_client`) return a new client and leave this one
    untouched, so a user-scoped client can be derived from a service client
    without the token leaking back::

        async with AuthClient("abcdefghijklmnop", anon_key) as client:
            session = await client.auth.sign_in_with_email_password(email, pw)
            user = await client.with_token(session.access_token).user.get()

    Derived clients share the HTTP transport of the client they came from.
    """

    def __init__(
        self,
        project_reference: str,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize GoTrue client.

        Args:
            project_reference: Project reference ID, used to derive the
                Auth URL. Not validated.
            api_key: API key sent with every request, usually the anon key
            timeout: Request timeout in seconds
            http_client: HTTP client to send requests with; one is created
                and owned by this client if omitted

        """
        config = ClientConfig.from_project_reference(
            project_reference, api_key, timeout=timeout
        )
        self._bind(config, http_client)

    @classmethod
    def from_config(
        cls, config: ClientConfig, *, owns_http_client: bool | None = None
    ) -> Self:
        """Create a client from an existing configuration.

        Args:
            config: Connection settings
            owns_http_client: Whether :meth:`aclose` closes the transport.
                Defaults to True when ``config`` has no transport and one is
                created here.

        Returns:
            A client bound to ``config``.

        """
        client = cls.__new__(cls)
        client._bind(config, config.http_client, owns_http_client)
        return client

    @classmethod
    def from_env(cls) -> Self:
        """Create a client from ``GOTRUE_*`` environment variables."""
        return cls.from_config(ClientConfig.from_env())

    def _bind(
        self,
        config: ClientConfig,
        http_client: httpx.AsyncClient | None,
        owns_http_client: bool | None = None,
    ) -> None:
        if http_client is None:
            http_client = httpx.AsyncClient(timeout=config.timeout)
            if owns_http_client is None:
                owns_http_client = True
        self._owns_http_client = bool(owns_http_client)
        self._client = BaseClient(config.with_http_client(http_client))

        # Initialize service clients
        self.health = HealthService(self._client)
        self.auth = AuthService(self._client)
        self.user = UserService(self._client)
        self.mfa = MFAService(self._client)
        self.oauth = OAuthService(self._client)
        self.admin = AdminService(self._client)

    @property
    def config(self) -> ClientConfig:
        """Configuration this client sends requests with."""
        return self._client.config

    def _derive(self, config: ClientConfig) -> Self:
        return type(self).from_config(config, owns_http_client=False)

    def with_custom_auth_url(self, url: str) -> Self:
        """Return a copy that talks to a self-hosted Auth server at ``url``.

        The URL is not validated; an invalid one fails when a request is made.
        """
        return self._derive(self.config.with_custom_auth_url(url))

    def with_token(self, token: str) -> Self:
        """Return a copy that sends ``token`` as bearer token.

        Use a user's access token to act as that user, or the service role key
        for admin endpoints. Keep the service role key secret.
        """
        return self._derive(self.config.with_token(token))

    def with_http_client(self, http_client: httpx.AsyncClient) -> Self:
        """Return a copy that sends requests through ``http_client``.

        The caller stays responsible for closing ``http_client``.
        """
        return self._derive(self.config.with_http_client(http_client))

    async def __aenter__(self) -> Self:
        """Async context manager entry.

        Returns:
            The client instance.

        """
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: object,
    ) -> None:
        """Async context manager exit.

        Args:
            exc_type: Exception type if an exception occurred
            exc_val: Exception value if an exception occurred
            exc_tb: Exception traceback if an exception occurred

        """
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP transport if this client created it."""
        if self._owns_http_client and self.config.http_client is not None:
            await self.config.http_client.aclose()

    def __repr__(self) -> str:
        return f"AuthClient(base_url={self.config.base_url!r})"
