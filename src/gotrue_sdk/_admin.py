"""Admin service for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

from typing import Any

import httpx

from ._base import (
    BaseClient,
    RequestConfig,
    decode_list,
    decode_model,
    json_body,
    require,
    segment,
)
from .exceptions import DecodeError, ValidationError
from .models import (
    AdminAuditRequest,
    AdminAuditResponse,
    AdminCreateSSOProviderRequest,
    AdminCreateUserRequest,
    AdminDeleteSSOProviderRequest,
    AdminDeleteUserFactorRequest,
    AdminDeleteUserRequest,
    AdminGenerateLinkRequest,
    AdminGenerateLinkResponse,
    AdminGetSSOProviderRequest,
    AdminGetUserRequest,
    AdminListSSOProvidersResponse,
    AdminListUserFactorsRequest,
    AdminListUsersRequest,
    AdminListUsersResponse,
    AdminUpdateSSOProviderRequest,
    AdminUpdateUserFactorRequest,
    AdminUpdateUserRequest,
    AuditLogEntry,
    Factor,
    InviteRequest,
    SSOProvider,
    User,
)

ADMIN_USERS_PATH = "/admin/users"
ADMIN_SSO_PROVIDERS_PATH = "/admin/sso/providers"


def _page_number(link: dict[str, str] | None, status_code: int) -> int | None:
    if not link or "url" not in link:
        return None
    try:
        page = httpx.URL(link["url"]).params.get("page")
    except httpx.InvalidURL as e:
        msg = f"invalid Link header URL {link['url']!r}"
        raise DecodeError(msg, status_code) from e
    return int(page) if page and page.isdigit() else None


def parse_pagination(response: httpx.Response) -> dict[str, Any]:
    """Read pagination from the ``X-Total-Count`` and ``Link`` headers.

    Returns:
        ``total_count``, ``total_pages`` and ``next_page`` suitable for a
        :class:`~gotrue_sdk.models.Pagination` model.

    Raises:
        DecodeError: If ``X-Total-Count`` is not a number or a ``Link`` URL
            is malformed.

    """
    total_count = 0
    raw_count = response.headers.get("x-total-count")
    if raw_count:
        try:
            total_count = int(raw_count)
        except ValueError as e:
            msg = f"invalid X-Total-Count header {raw_count!r}"
            raise DecodeError(msg, response.status_code) from e

    links = response.links
    next_page = _page_number(links.get("next"), response.status_code)
    total_pages = _page_number(links.get("last"), response.status_code)
    if total_pages is None:
        # no "last" link: this is the last page
        total_pages = next_page - 1 if next_page else (1 if total_count else 0)

    return {
        "total_count": total_count,
        "total_pages": total_pages,
        "next_page": next_page,
    }


def _paging_params(page: int | None, per_page: int | None) -> dict[str, Any]:
    params: dict[str, Any] = {}
    if page is not None:
        params["page"] = page
    if per_page is not None:
        params["per_page"] = per_page
    return params


class AdminService:
    """Service for administrative operations. Requires a service role token."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize admin service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def audit(self, request: AdminAuditRequest) -> AdminAuditResponse:
        """Get audit logs.

        Args:
            request: Optional ``column:value`` filter and pagination

        Returns:
            One page of log entries with pagination information.

        Raises:
            ValidationError: If a query is given without column or value.

        """
        params = _paging_params(request.page, request.per_page)
        if request.query is not None:
            require(request.query.column, "query.column")
            require(request.query.value, "query.value")
            params["query"] = f"{request.query.column}:{request.query.value}"

        def parse(response: httpx.Response) -> AdminAuditResponse:
            return AdminAuditResponse(
                logs=decode_list(response, AuditLogEntry),
                **parse_pagination(response),
            )

        config = RequestConfig(params=params or None)
        return await self._client.make_parsed_request(
            "GET", "/admin/audit", parser=parse, config=config
        )

    async def generate_link(
        self, request: AdminGenerateLinkRequest
    ) -> AdminGenerateLinkResponse:
        """Generate an email action link without sending an email.

        Args:
            request: Link type, the user's email and type-specific fields

        Returns:
            The link, its OTP and hashed token, and the user.

        """
        require(request.email, "email")
        if request.type == "signup":
            require(request.password, "password")
        if request.type in ("email_change_current", "email_change_new"):
            require(request.new_email, "new_email")

        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "POST",
            "/admin/generate_link",
            AdminGenerateLinkResponse,
            config=config,
        )

    # SSO providers

    async def list_sso_providers(self) -> AdminListSSOProvidersResponse:
        """List all SAML SSO identity providers."""
        return await self._client.make_request(
            "GET", ADMIN_SSO_PROVIDERS_PATH, AdminListSSOProvidersResponse
        )

    async def create_sso_provider(
        self, request: AdminCreateSSOProviderRequest
    ) -> SSOProvider:
        """Create a SAML SSO identity provider.

        Args:
            request: Metadata URL or XML, domains and attribute mapping

        Returns:
            The created provider.

        """
        if bool(request.metadata_url) == bool(request.metadata_xml):
            msg = "exactly one of metadata_url or metadata_xml is required"
            raise ValidationError(msg, "metadata_url")

        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "POST", ADMIN_SSO_PROVIDERS_PATH, SSOProvider, config=config
        )

    async def get_sso_provider(
        self, request: AdminGetSSOProviderRequest
    ) -> SSOProvider:
        """Get a SAML SSO identity provider by ID."""
        require(request.provider_id, "provider_id")
        return await self._client.make_request(
            "GET",
            f"{ADMIN_SSO_PROVIDERS_PATH}/{segment(request.provider_id)}",
            SSOProvider,
        )

    async def update_sso_provider(
        self, request: AdminUpdateSSOProviderRequest
    ) -> SSOProvider:
        """Update a SAML SSO identity provider by ID."""
        require(request.provider_id, "provider_id")
        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "PUT",
            f"{ADMIN_SSO_PROVIDERS_PATH}/{segment(request.provider_id)}",
            SSOProvider,
            config=config,
        )

    async def delete_sso_provider(
        self, request: AdminDeleteSSOProviderRequest
    ) -> SSOProvider:
        """Delete a SAML SSO identity provider by ID.

        Returns:
            The deleted provider.

        """
        require(request.provider_id, "provider_id")
        return await self._client.make_request(
            "DELETE",
            f"{ADMIN_SSO_PROVIDERS_PATH}/{segment(request.provider_id)}",
            SSOProvider,
        )

    # Users

    async def create_user(self, request: AdminCreateUserRequest) -> User:
        """Create a user.

        Args:
            request: User attributes

        Returns:
            Created user data.

        """
        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "POST", ADMIN_USERS_PATH, User, config=config
        )

    async def list_users(
        self, request: AdminListUsersRequest | None = None
    ) -> AdminListUsersResponse:
        """List users.

        Args:
            request: Optional pagination

        Returns:
            One page of users with pagination information.

        """
        if request is None:
            request = AdminListUsersRequest()

        def parse(response: httpx.Response) -> AdminListUsersResponse:
            page = decode_model(response, AdminListUsersResponse)
            return page.model_copy(update=parse_pagination(response))

        params = _paging_params(request.page, request.per_page)
        config = RequestConfig(params=params or None)
        return await self._client.make_parsed_request(
            "GET", ADMIN_USERS_PATH, parser=parse, config=config
        )

    async def get_user(self, request: AdminGetUserRequest) -> User:
        """Get a user by ID."""
        require(request.user_id, "user_id")
        return await self._client.make_request(
            "GET", f"{ADMIN_USERS_PATH}/{segment(request.user_id)}", User
        )

    async def update_user(self, request: AdminUpdateUserRequest) -> User:
        """Update a user by ID.

        Args:
            request: User ID and the attributes to change

        Returns:
            Updated user data.

        """
        require(request.user_id, "user_id")
        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "PUT",
            f"{ADMIN_USERS_PATH}/{segment(request.user_id)}",
            User,
            config=config,
        )

    async def delete_user(self, request: AdminDeleteUserRequest) -> None:
        """Delete a user by ID."""
        require(request.user_id, "user_id")
        body = json_body(request)
        config = RequestConfig(json_data=body or None)
        await self._client.make_empty_request(
            "DELETE",
            f"{ADMIN_USERS_PATH}/{segment(request.user_id)}",
            config=config,
        )

    # Factors

    async def list_user_factors(
        self, request: AdminListUserFactorsRequest
    ) -> list[Factor]:
        """List the MFA factors of a user."""
        require(request.user_id, "user_id")
        return await self._client.make_list_request(
            "GET",
            f"{ADMIN_USERS_PATH}/{segment(request.user_id)}/factors",
            Factor,
        )

    async def update_user_factor(
        self, request: AdminUpdateUserFactorRequest
    ) -> Factor:
        """Rename a factor of a user.

        Raises:
            ValidationError: If ``friendly_name`` is empty.

        """
        require(request.user_id, "user_id")
        require(request.factor_id, "factor_id")
        require(request.friendly_name, "friendly_name")

        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "PUT",
            f"{ADMIN_USERS_PATH}/{segment(request.user_id)}"
            f"/factors/{segment(request.factor_id)}",
            Factor,
            config=config,
        )

    async def delete_user_factor(self, request: AdminDeleteUserFactorRequest) -> None:
        """Delete a factor of a user."""
        require(request.user_id, "user_id")
        require(request.factor_id, "factor_id")
        await self._client.make_empty_request(
            "DELETE",
            f"{ADMIN_USERS_PATH}/{segment(request.user_id)}"
            f"/factors/{segment(request.factor_id)}",
        )

    # Invites

    async def invite(self, request: InviteRequest) -> User:
        """Invite a new user by email.

        Args:
            request: Email, metadata and optional redirect URL

        Returns:
            The invited user.

        """
        require(request.email, "email")

        params = {"redirect_to": request.redirect_to} if request.redirect_to else None
        config = RequestConfig(json_data=json_body(request), params=params)
        return await self._client.make_request(
            "POST", "/invite", User, config=config
        )
