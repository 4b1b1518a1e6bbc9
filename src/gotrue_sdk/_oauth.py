"""OAuth and SSO service for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

import base64
import hashlib
import secrets
from typing import Any

import httpx

from ._base import BaseClient, RequestConfig, decode_model, json_body, require
from .exceptions import DecodeError, ValidationError
from .models import (
    FLOW_IMPLICIT,
    FLOW_PKCE,
    AuthorizeRequest,
    AuthorizeResponse,
    SSORequest,
    SSOResponse,
)

CODE_CHALLENGE_METHOD = "s256"


def generate_pkce_pair() -> tuple[str, str]:
    """Generate a PKCE code verifier and its S256 challenge.

    Returns:
        ``(verifier, challenge)``, both base64url encoded without padding.

    """
    verifier = secrets.token_urlsafe(64)
    digest = hashlib.sha256(verifier.encode("ascii")).digest()
    challenge = base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
    return verifier, challenge


def _redirect_location(response: httpx.Response) -> str:
    location = response.headers.get("location")
    if not location:
        msg = "expected a redirect location in the response"
        raise DecodeError(msg, response.status_code)
    return location


class OAuthService:
    """Service for external OAuth providers and SAML SSO."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize OAuth service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def authorize(self, request: AuthorizeRequest) -> AuthorizeResponse:
        """Get the URL that starts sign-in with an external OAuth provider.

        The redirect returned by the server is not followed.

        Args:
            request: Provider, flow type and extra scopes

        Returns:
            The provider URL, and the PKCE verifier for the ``pkce`` flow.

        """
        require(request.provider, "provider")
        if request.flow_type not in (FLOW_IMPLICIT, FLOW_PKCE):
            msg = f"unsupported flow_type {request.flow_type!r}"
            raise ValidationError(msg, "flow_type")

        params: dict[str, Any] = {"provider": request.provider}
        if request.scopes:
            params["scopes"] = request.scopes
        if request.redirect_to:
            params["redirect_to"] = request.redirect_to

        verifier = None
        if request.flow_type == FLOW_PKCE:
            verifier, challenge = generate_pkce_pair()
            params["code_challenge"] = challenge
            params["code_challenge_method"] = CODE_CHALLENGE_METHOD

        config = RequestConfig(params=params, expect_redirect=True)
        location = await self._client.make_parsed_request(
            "GET", "/authorize", parser=_redirect_location, config=config
        )
        return AuthorizeResponse(authorization_url=location, verifier=verifier)

    async def sso(self, request: SSORequest) -> SSOResponse:
        """Start an SSO sign-in by provider ID or email domain.

        With ``skip_http_redirect`` the server answers with JSON; otherwise it
        redirects, and the redirect target is returned without following it.

        Args:
            request: Provider or domain, and redirect options

        Returns:
            The identity provider URL.

        """
        if bool(request.provider_id) == bool(request.domain):
            msg = "exactly one of provider_id or domain is required"
            raise ValidationError(msg, "provider_id")

        def parse(response: httpx.Response) -> SSOResponse:
            if response.is_redirect:
                return SSOResponse(url=_redirect_location(response))
            return decode_model(response, SSOResponse)

        config = RequestConfig(json_data=json_body(request), expect_redirect=True)
        return await self._client.make_parsed_request(
            "POST", "/sso", parser=parse, config=config
        )

    async def saml_metadata(self) -> bytes:
        """Get the SAML metadata document of this service provider.

        Returns:
            The XML document, undecoded.

        """
        return await self._client.make_bytes_request("GET", "/sso/saml/metadata")
