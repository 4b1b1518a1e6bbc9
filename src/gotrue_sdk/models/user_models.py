"""User models for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel


class Factor(BaseModel):
    """MFA factor enrolled by a user."""

    id: str
    created_at: datetime | None = None
    updated_at: datetime | None = None
    status: str | None = None
    friendly_name: str | None = None
    factor_type: str | None = None
    phone: str | None = None
    last_challenged_at: datetime | None = None


class Identity(BaseModel):
    """Identity linking a user to a sign-in provider."""

    id: str
    identity_id: str | None = None
    user_id: str | None = None
    identity_data: dict[str, Any] | None = None
    provider: str | None = None
    email: str | None = None
    last_sign_in_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class User(BaseModel):
    """User model."""

    id: str
    aud: str | None = None
    role: str | None = None
    email: str | None = None
    email_confirmed_at: datetime | None = None
    invited_at: datetime | None = None
    phone: str | None = None
    phone_confirmed_at: datetime | None = None
    confirmation_sent_at: datetime | None = None
    recovery_sent_at: datetime | None = None
    new_email: str | None = None
    email_change_sent_at: datetime | None = None
    new_phone: str | None = None
    phone_change_sent_at: datetime | None = None
    reauthentication_sent_at: datetime | None = None
    last_sign_in_at: datetime | None = None
    app_metadata: dict[str, Any] | None = None
    user_metadata: dict[str, Any] | None = None
    factors: list[Factor] | None = None
    identities: list[Identity] | None = None
    banned_until: datetime | None = None
    confirmed_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    deleted_at: datetime | None = None
    is_anonymous: bool = False
    is_sso_user: bool = False


class UpdateUserRequest(BaseModel):
    """Update the signed-in user.

    Changing the email sends a confirmation link to the new address.
    ``data`` is merged into the user's metadata.
    """

    email: str | None = None
    phone: str | None = None
    password: str | None = None
    nonce: str | None = None
    data: dict[str, Any] | None = None
    channel: str | None = None
