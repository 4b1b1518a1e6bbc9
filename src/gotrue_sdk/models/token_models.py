"""Session and token models for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from pydantic import BaseModel, Field

from .user_models import User

GRANT_PASSWORD = "password"
GRANT_REFRESH_TOKEN = "refresh_token"
GRANT_PKCE = "pkce"


class Security(BaseModel):
    """Captcha verification sent alongside sign-in requests."""

    captcha_token: str | None = None


class Session(BaseModel):
    """Session issued on sign-in."""

    access_token: str
    token_type: str
    expires_in: int
    expires_at: int | None = None
    refresh_token: str
    user: User | None = None
    provider_token: str | None = None
    provider_refresh_token: str | None = None


class TokenRequest(BaseModel):
    """Token request model.

    ``grant_type`` is sent as a query parameter. Required fields per grant:
    ``password`` needs ``password`` plus ``email`` or ``phone``;
    ``refresh_token`` needs ``refresh_token``; ``pkce`` needs ``auth_code``
    and ``code_verifier``.
    """

    grant_type: str = Field(exclude=True)
    refresh_token: str | None = None
    email: str | None = None
    phone: str | None = None
    password: str | None = None
    auth_code: str | None = None
    code_verifier: str | None = None
    gotrue_meta_security: Security | None = None


class TokenResponse(Session):
    """Token response model."""
