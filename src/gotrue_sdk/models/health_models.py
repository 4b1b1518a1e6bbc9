"""Health and settings models for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from pydantic import BaseModel, Field


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    version: str | None = None
    name: str | None = None
    description: str | None = None


class SettingsResponse(BaseModel):
    """Publicly available settings of an Auth instance."""

    # provider name -> enabled
    external: dict[str, bool] = Field(default_factory=dict)
    disable_signup: bool = False
    mailer_autoconfirm: bool = False
    phone_autoconfirm: bool = False
    sms_provider: str | None = None
    saml_enabled: bool = False
