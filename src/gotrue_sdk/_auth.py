"""Authentication service for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

from typing import Any

import httpx

from ._base import BaseClient, RequestConfig, json_body, require
from .exceptions import DecodeError, ValidationError
from .models import (
    GRANT_PASSWORD,
    GRANT_PKCE,
    GRANT_REFRESH_TOKEN,
    MagiclinkRequest,
    OTPRequest,
    RecoverRequest,
    ResendRequest,
    SignupRequest,
    SignupResponse,
    TokenRequest,
    TokenResponse,
    VerifyForUserRequest,
    VerifyForUserResponse,
    VerifyRequest,
    VerifyResponse,
)

VERIFY_FRAGMENT_FIELDS = (
    "access_token",
    "token_type",
    "expires_in",
    "expires_at",
    "refresh_token",
    "type",
    "error",
    "error_code",
    "error_description",
)


def _redirect_params(*redirects: str | None) -> dict[str, Any] | None:
    values = [r for r in redirects if r]
    return {"redirect_to": values} if values else None


def _require_email_or_phone(email: str | None, phone: str | None) -> None:
    if not email and not phone:
        msg = "email or phone is required"
        raise ValidationError(msg, "email")


def _parse_verify_redirect(response: httpx.Response) -> VerifyResponse:
    location = response.headers.get("location")
    if not location:
        msg = "verify response has no redirect location"
        raise DecodeError(msg, response.status_code)

    url = httpx.URL(location)
    values: dict[str, Any] = {"url": location}
    for params in (url.params, httpx.QueryParams(url.fragment)):
        for field in VERIFY_FRAGMENT_FIELDS:
            if field in params:
                values[field] = params[field]

    try:
        return VerifyResponse.model_validate(values)
    except ValueError as e:
        msg = "cannot decode VerifyResponse from redirect location"
        raise DecodeError(msg, response.status_code, str(e)) from e


class AuthService:
    """Service for sign-up, sign-in and account recovery operations."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize authentication service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def signup(self, request: SignupRequest) -> SignupResponse:
        """Register a new user with an email or phone and a password.

        Args:
            request: Sign-up details

        Returns:
            The new user, plus a session when the instance auto-confirms.

        """
        _require_email_or_phone(request.email, request.phone)

        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "POST", "/signup", SignupResponse, config=config
        )

    async def token(self, request: TokenRequest) -> TokenResponse:
        """Exchange credentials for a session.

        Supports the ``password``, ``refresh_token`` and ``pkce`` grants.

        Args:
            request: Grant type and its credentials

        Returns:
            A new session.

        Raises:
            ValidationError: If a field required by the grant is missing.

        """
        if request.grant_type == GRANT_PASSWORD:
            _require_email_or_phone(request.email, request.phone)
            require(request.password, "password")
        elif request.grant_type == GRANT_REFRESH_TOKEN:
            require(request.refresh_token, "refresh_token")
        elif request.grant_type == GRANT_PKCE:
            require(request.auth_code, "auth_code")
            require(request.code_verifier, "code_verifier")
        else:
            msg = f"unsupported grant_type {request.grant_type!r}"
            raise ValidationError(msg, "grant_type")

        config = RequestConfig(
            json_data=json_body(request),
            params={"grant_type": request.grant_type},
        )
        return await self._client.make_request(
            "POST", "/token", TokenResponse, config=config
        )

    async def sign_in_with_email_password(
        self, email: str, password: str
    ) -> TokenResponse:
        """Sign in with email and password.

        Args:
            email: User's email address
            password: User's password

        Returns:
            A new session.

        """
        return await self.token(
            TokenRequest(grant_type=GRANT_PASSWORD, email=email, password=password)
        )

    async def sign_in_with_phone_password(
        self, phone: str, password: str
    ) -> TokenResponse:
        """Sign in with phone number and password."""
        return await self.token(
            TokenRequest(grant_type=GRANT_PASSWORD, phone=phone, password=password)
        )

    async def refresh_token(self, refresh_token: str) -> TokenResponse:
        """Exchange a refresh token for a new session.

        Args:
            refresh_token: The refresh token

        Returns:
            A new session.

        """
        return await self.token(
            TokenRequest(grant_type=GRANT_REFRESH_TOKEN, refresh_token=refresh_token)
        )

    async def logout(self) -> None:
        """Log out the user of the bearer token.

        Revokes every refresh token of the user. Issued access tokens stay
        valid until they expire.
        """
        await self._client.make_empty_request("POST", "/logout")

    async def recover(self, request: RecoverRequest) -> None:
        """Send a password recovery email.

        Recovery emails can only be sent once every 60 seconds by default.

        Args:
            request: Recovery details

        Raises:
            ValidationError: If the email is empty.

        """
        require(request.email, "email")

        config = RequestConfig(
            json_data=json_body(request),
            params=_redirect_params(request.redirect_to),
        )
        await self._client.make_empty_request("POST", "/recover", config=config)

    async def resend(self, request: ResendRequest) -> None:
        """Resend a sign-up confirmation, email change or phone OTP.

        Args:
            request: Resend details

        """
        require(request.type, "type")
        _require_email_or_phone(request.email, request.phone)

        config = RequestConfig(
            json_data=json_body(request),
            params=_redirect_params(request.email_redirect_to),
        )
        await self._client.make_empty_request("POST", "/resend", config=config)

    async def otp(self, request: OTPRequest) -> None:
        """Send a magic link or SMS one-time password.

        With ``create_user`` set, unknown users are signed up.

        Args:
            request: OTP details

        """
        _require_email_or_phone(request.email, request.phone)

        config = RequestConfig(
            json_data=json_body(request),
            params=_redirect_params(request.redirect_to, request.email_redirect_to),
        )
        await self._client.make_empty_request("POST", "/otp", config=config)

    async def magiclink(self, request: MagiclinkRequest) -> None:
        """Send a magic link to the user's email.

        Deprecated by the server in favour of :meth:`otp`.
        """
        require(request.email, "email")

        config = RequestConfig(json_data=json_body(request))
        await self._client.make_empty_request("POST", "/magiclink", config=config)

    async def verify(self, request: VerifyRequest) -> VerifyResponse:
        """Verify a sign-up, recovery, magic link or invite token.

        The server answers with a redirect, which is not followed. The
        redirect URL is returned together with the session or error fields
        from its fragment.

        Args:
            request: Token type, token and optional redirect URL

        Returns:
            The redirect target; check its ``error`` fields.

        """
        require(request.type, "type")
        require(request.token, "token")

        config = RequestConfig(
            params=request.model_dump(exclude_none=True),
            expect_redirect=True,
        )
        return await self._client.make_parsed_request(
            "GET", "/verify", parser=_parse_verify_redirect, config=config
        )

    async def verify_for_user(
        self, request: VerifyForUserRequest
    ) -> VerifyForUserResponse:
        """Verify a token for a known email or phone.

        Args:
            request: Token type, token or token hash, and the user's contact

        Returns:
            A new session.

        """
        require(request.type, "type")
        if request.token_hash is None:
            require(request.token, "token")
            _require_email_or_phone(request.email, request.phone)

        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "POST", "/verify", VerifyForUserResponse, config=config
        )

    async def reauthenticate(self) -> None:
        """Send a reauthentication nonce to the signed-in user.

        The nonce goes to the user's email, or phone when there is no email.
        """
        await self._client.make_empty_request("GET", "/reauthenticate")
