"""MFA (Multi-Factor Authentication) models for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from pydantic import BaseModel, Field

from .token_models import Session


class EnrollFactorRequest(BaseModel):
    """Enroll factor request model. ``factor_type`` is ``totp`` or ``phone``."""

    factor_type: str = "totp"
    friendly_name: str | None = None
    issuer: str | None = None
    phone: str | None = None


class TOTPObject(BaseModel):
    """TOTP enrollment secrets."""

    qr_code: str
    secret: str
    uri: str


class EnrollFactorResponse(BaseModel):
    """Enroll factor response model."""

    id: str
    type: str
    friendly_name: str | None = None
    totp: TOTPObject | None = None
    phone: str | None = None


class ChallengeFactorRequest(BaseModel):
    """Challenge factor request model."""

    factor_id: str = Field(exclude=True)
    channel: str | None = None


class ChallengeFactorResponse(BaseModel):
    """Challenge factor response model."""

    id: str
    type: str | None = None
    expires_at: int


class VerifyFactorRequest(BaseModel):
    """Verify factor request model."""

    factor_id: str = Field(exclude=True)
    challenge_id: str
    code: str


class VerifyFactorResponse(Session):
    """Session upgraded by a verified factor."""


class UnenrollFactorRequest(BaseModel):
    """Unenroll factor request model."""

    factor_id: str


class UnenrollFactorResponse(BaseModel):
    """Unenroll factor response model."""

    id: str
