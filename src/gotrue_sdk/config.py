"""Client configuration for the GoTrue SDK.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import NamedTuple

import httpx

from .exceptions import ConfigurationError

DEFAULT_TIMEOUT = 30.0
AUTH_URL_TEMPLATE = "https://{project_reference}.supabase.co/auth/v1"

ENV_PROJECT_REFERENCE = "GOTRUE_PROJECT_REFERENCE"
ENV_API_KEY = "GOTRUE_API_KEY"
ENV_URL = "GOTRUE_URL"
ENV_TOKEN = "GOTRUE_TOKEN"
ENV_TIMEOUT = "GOTRUE_TIMEOUT"


class ClientConfig(NamedTuple):
    """Immutable connection settings shared by every request.

    Modifiers never change a config in place; they return a copy with a
    single field replaced.
    """

    base_url: str
    api_key: str
    token: str | None = None
    http_client: httpx.AsyncClient | None = None
    timeout: float = DEFAULT_TIMEOUT

    @classmethod
    def from_project_reference(
        cls,
        project_reference: str,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> ClientConfig:
        """Build a config pointing at a hosted project's Auth server.

        The project reference is not validated. A wrong reference produces a
        URL that fails when a request is sent.

        Args:
            project_reference: Project reference ID
            api_key: API key sent with every request
            timeout: Default request timeout in seconds

        Returns:
            A new configuration.

        """
        return cls(
            base_url=AUTH_URL_TEMPLATE.format(project_reference=project_reference),
            api_key=api_key,
            timeout=timeout,
        )

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build a config from ``GOTRUE_*`` environment variables.

        ``GOTRUE_URL`` takes precedence over ``GOTRUE_PROJECT_REFERENCE``.

        Raises:
            ConfigurationError: If the API key or the server location is missing,
                or the timeout is not a number.

        """
        env = os.environ if environ is None else environ

        api_key = env.get(ENV_API_KEY)
        if not api_key:
            raise ConfigurationError(f"{ENV_API_KEY} is not set")

        timeout = DEFAULT_TIMEOUT
        if env.get(ENV_TIMEOUT):
            try:
                timeout = float(env[ENV_TIMEOUT])
            except ValueError as e:
                msg = f"{ENV_TIMEOUT} must be a number, got {env[ENV_TIMEOUT]!r}"
                raise ConfigurationError(msg) from e

        url = env.get(ENV_URL)
        reference = env.get(ENV_PROJECT_REFERENCE)
        if url:
            config = cls(base_url=url.rstrip("/"), api_key=api_key, timeout=timeout)
        elif reference:
            config = cls.from_project_reference(reference, api_key, timeout=timeout)
        else:
            msg = f"either {ENV_URL} or {ENV_PROJECT_REFERENCE} must be set"
            raise ConfigurationError(msg)

        token = env.get(ENV_TOKEN)
        return config.with_token(token) if token else config

    def with_custom_auth_url(self, url: str) -> ClientConfig:
        """Return a copy that sends requests to ``url``. Not validated."""
        return self._replace(base_url=url.rstrip("/"))

    def with_token(self, token: str) -> ClientConfig:
        """Return a copy that authenticates with ``token`` as bearer token."""
        return self._replace(token=token)

    def with_http_client(self, http_client: httpx.AsyncClient) -> ClientConfig:
        """Return a copy that sends requests through ``http_client``."""
        return self._replace(http_client=http_client)

    def __repr__(self) -> str:
        token = "***" if self.token else None
        return (
            f"ClientConfig(base_url={self.base_url!r}, api_key='***', "
            f"token={token!r}, timeout={self.timeout!r})"
        )
