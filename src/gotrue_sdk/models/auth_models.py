"""Sign-up, recovery and verification models for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from typing import Any

from pydantic import BaseModel, Field, model_validator

from .token_models import Security, Session
from .user_models import User


class SignupRequest(BaseModel):
    """Sign up with email or phone and a password."""

    email: str | None = None
    phone: str | None = None
    password: str | None = None
    data: dict[str, Any] | None = None
    channel: str | None = None
    code_challenge: str | None = None
    code_challenge_method: str | None = None
    gotrue_meta_security: Security | None = None


class SignupResponse(BaseModel):
    """Sign-up result.

    The server returns a bare user when confirmation is required, or a full
    session when the instance auto-confirms new users.
    """

    user: User | None = None
    session: Session | None = None

    @model_validator(mode="before")
    @classmethod
    def _split_user_and_session(cls, data: Any) -> Any:
        if not isinstance(data, dict) or "session" in data:
            return data
        if "access_token" in data:
            return {"user": data.get("user"), "session": data}
        return {"user": data}


class RecoverRequest(BaseModel):
    """Password recovery request model."""

    email: str | None = None
    code_challenge: str | None = None
    code_challenge_method: str | None = None
    gotrue_meta_security: Security | None = None
    redirect_to: str | None = Field(default=None, exclude=True)


class ResendRequest(BaseModel):
    """Resend a confirmation or change OTP.

    ``type`` is one of ``signup``, ``email_change``, ``sms`` or
    ``phone_change``.
    """

    type: str | None = None
    email: str | None = None
    phone: str | None = None
    gotrue_meta_security: Security | None = None
    email_redirect_to: str | None = Field(default=None, exclude=True)


class OTPRequest(BaseModel):
    """One-time password or magic link request model."""

    email: str | None = None
    phone: str | None = None
    create_user: bool | None = None
    data: dict[str, Any] | None = None
    channel: str | None = None
    code_challenge: str | None = None
    code_challenge_method: str | None = None
    gotrue_meta_security: Security | None = None
    redirect_to: str | None = Field(default=None, exclude=True)
    email_redirect_to: str | None = Field(default=None, exclude=True)


class MagiclinkRequest(BaseModel):
    """Magic link request model. Prefer :class:`OTPRequest`."""

    email: str | None = None
    data: dict[str, Any] | None = None
    gotrue_meta_security: Security | None = None


class VerifyRequest(BaseModel):
    """Verify a token through the redirect flow.

    ``type`` is one of ``signup``, ``recovery``, ``magiclink``, ``invite``
    or ``email_change``. All fields travel in the query string.
    """

    type: str | None = None
    token: str | None = None
    redirect_to: str | None = None


class VerifyResponse(BaseModel):
    """Redirect target returned by the verify endpoint.

    On success the session fields are filled from the URL fragment. On failure
    the server reports ``error``, ``error_code`` and ``error_description``
    in the fragment instead, with a successful HTTP status, so check them.
    """

    url: str
    access_token: str | None = None
    token_type: str | None = None
    expires_in: int | None = None
    expires_at: int | None = None
    refresh_token: str | None = None
    type: str | None = None
    error: str | None = None
    error_code: str | None = None
    error_description: str | None = None


class VerifyForUserRequest(BaseModel):
    """Verify a token for a known email or phone and get a session back."""

    type: str | None = None
    token: str | None = None
    token_hash: str | None = None
    email: str | None = None
    phone: str | None = None
    redirect_to: str | None = None


class VerifyForUserResponse(Session):
    """Session returned by POST /verify."""
