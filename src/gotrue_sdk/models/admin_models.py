"""Admin models for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, Field, model_validator

from .user_models import User


class Pagination(BaseModel):
    """Pagination information read from ``X-Total-Count`` and ``Link`` headers."""

    total_count: int = 0
    total_pages: int = 0
    next_page: int | None = None


# Audit


class AuditQuery(BaseModel):
    """Filter for audit log entries; both fields are required."""

    column: Literal["author", "action", "type"] | None = None
    value: str | None = None


class AdminAuditRequest(BaseModel):
    """Audit log request model. The server defaults to 50 entries per page."""

    query: AuditQuery | None = None
    page: int | None = None
    per_page: int | None = None


class AuditLogEntry(BaseModel):
    """Audit log entry model."""

    id: str
    payload: dict[str, Any] | None = None
    created_at: datetime | None = None
    ip_address: str | None = None


class AdminAuditResponse(Pagination):
    """Audit log page."""

    logs: list[AuditLogEntry] = Field(default_factory=list)


# Generated links

LinkType = Literal[
    "signup",
    "invite",
    "magiclink",
    "recovery",
    "email_change_current",
    "email_change_new",
]


class AdminGenerateLinkRequest(BaseModel):
    """Generate an email action link.

    ``password`` is required for ``signup`` links and ``new_email`` for the
    ``email_change_*`` links.
    """

    type: LinkType
    email: str | None = None
    new_email: str | None = None
    password: str | None = None
    data: dict[str, Any] | None = None
    redirect_to: str | None = None


class AdminGenerateLinkResponse(BaseModel):
    """Generated link and the user it belongs to."""

    action_link: str
    email_otp: str | None = None
    hashed_token: str | None = None
    redirect_to: str | None = None
    verification_type: str | None = None
    user: User | None = None

    @model_validator(mode="before")
    @classmethod
    def _nest_user(cls, data: Any) -> Any:
        # the user is returned inline, next to the link properties
        if isinstance(data, dict) and "user" not in data and "id" in data:
            return {**data, "user": data}
        return data


# SSO providers


class SAMLProvider(BaseModel):
    """SAML settings of an SSO provider."""

    entity_id: str | None = None
    metadata_url: str | None = None
    metadata_xml: str | None = None
    attribute_mapping: dict[str, Any] | None = None


class SSODomain(BaseModel):
    """Email domain routed to an SSO provider."""

    domain: str
    id: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class SSOProvider(BaseModel):
    """SSO identity provider model."""

    id: str
    saml: SAMLProvider | None = None
    domains: list[SSODomain] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class AdminListSSOProvidersResponse(BaseModel):
    """SSO providers list model."""

    items: list[SSOProvider] = Field(default_factory=list)


class AdminCreateSSOProviderRequest(BaseModel):
    """Create SSO provider request model.

    Exactly one of ``metadata_url`` and ``metadata_xml`` must be given.
    """

    type: Literal["saml"] = "saml"
    metadata_url: str | None = None
    metadata_xml: str | None = None
    domains: list[str] | None = None
    attribute_mapping: dict[str, Any] | None = None


class AdminGetSSOProviderRequest(BaseModel):
    """Get SSO provider request model."""

    provider_id: str


class AdminUpdateSSOProviderRequest(BaseModel):
    """Update SSO provider request model."""

    provider_id: str = Field(exclude=True)
    metadata_url: str | None = None
    metadata_xml: str | None = None
    domains: list[str] | None = None
    attribute_mapping: dict[str, Any] | None = None


class AdminDeleteSSOProviderRequest(BaseModel):
    """Delete SSO provider request model."""

    provider_id: str


# Users


class AdminCreateUserRequest(BaseModel):
    """Create user request model.

    ``ban_duration`` is a duration such as ``24h`` or ``none``.
    """

    aud: str | None = None
    role: str | None = None
    email: str | None = None
    phone: str | None = None
    password: str | None = None
    email_confirm: bool | None = None
    phone_confirm: bool | None = None
    user_metadata: dict[str, Any] | None = None
    app_metadata: dict[str, Any] | None = None
    ban_duration: str | None = None


class AdminListUsersRequest(BaseModel):
    """List users request model."""

    page: int | None = None
    per_page: int | None = None


class AdminListUsersResponse(Pagination):
    """Users page."""

    users: list[User] = Field(default_factory=list)
    aud: str | None = None


class AdminGetUserRequest(BaseModel):
    """Get user request model."""

    user_id: str


class AdminUpdateUserRequest(BaseModel):
    """Update user request model."""

    user_id: str = Field(exclude=True)
    role: str | None = None
    email: str | None = None
    phone: str | None = None
    password: str | None = None
    email_confirm: bool | None = None
    phone_confirm: bool | None = None
    user_metadata: dict[str, Any] | None = None
    app_metadata: dict[str, Any] | None = None
    ban_duration: str | None = None


class AdminDeleteUserRequest(BaseModel):
    """Delete user request model. Soft deletion keeps the user row."""

    user_id: str = Field(exclude=True)
    should_soft_delete: bool | None = None


# Factors


class AdminListUserFactorsRequest(BaseModel):
    """List user factors request model."""

    user_id: str


class AdminUpdateUserFactorRequest(BaseModel):
    """Update user factor request model."""

    user_id: str = Field(exclude=True)
    factor_id: str = Field(exclude=True)
    friendly_name: str | None = None


class AdminDeleteUserFactorRequest(BaseModel):
    """Delete user factor request model."""

    user_id: str
    factor_id: str


# Invites


class InviteRequest(BaseModel):
    """Invite request model."""

    email: str | None = None
    data: dict[str, Any] | None = None
    redirect_to: str | None = Field(default=None, exclude=True)
