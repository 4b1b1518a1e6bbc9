"""Tests for the admin service.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

import json
from typing import Any

import httpx
import pytest
import respx
from gotrue_sdk import (
    AdminAuditRequest,
    AdminCreateSSOProviderRequest,
    AdminCreateUserRequest,
    AdminDeleteSSOProviderRequest,
    AdminDeleteUserFactorRequest,
    AdminDeleteUserRequest,
    AdminGenerateLinkRequest,
    AdminGetSSOProviderRequest,
    AdminGetUserRequest,
    AdminListUserFactorsRequest,
    AdminListUsersRequest,
    AdminUpdateSSOProviderRequest,
    AdminUpdateUserFactorRequest,
    AdminUpdateUserRequest,
    AuditQuery,
    AuthClient,
    AuthorizationError,
    DecodeError,
    InviteRequest,
    ValidationError,
)

USER_ID = "5e3f5f4e-1b9a-4c1e-9a53-2b3c4d5e6f70"
FACTOR_ID = "2b306a77-21dc-4110-ba71-537cb56b9e98"
PROVIDER_ID = "0d5e7c1a-8f2b-4c3d-9e4f-5a6b7c8d9e0f"


def _sent_json(route: respx.Route) -> Any:
    return json.loads(route.calls.last.request.content)


@pytest.fixture
def sample_provider() -> dict[str, Any]:
    """SAML SSO provider payload."""
    return {
        "id": PROVIDER_ID,
        "saml": {
            "entity_id": "https://idp.example.com/metadata",
            "metadata_url": "https://idp.example.com/metadata",
            "attribute_mapping": {"keys": {"email": {"name": "mail"}}},
        },
        "domains": [{"domain": "example.com"}],
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-01T00:00:00Z",
    }


async def test_admin_requests_carry_service_token(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    service_token: str,
    sample_user: dict[str, Any],
) -> None:
    route = mock_api.get(f"{auth_url}/admin/users/{USER_ID}").mock(
        return_value=httpx.Response(200, json=sample_user)
    )

    user = await admin_client.admin.get_user(AdminGetUserRequest(user_id=USER_ID))

    assert user.id == USER_ID
    assert route.calls.last.request.headers["authorization"] == f"Bearer {service_token}"


async def test_admin_without_service_role(
    client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    mock_api.get(f"{auth_url}/admin/users").mock(
        return_value=httpx.Response(
            403, json={"code": 403, "error_code": "not_admin", "msg": "User not allowed"}
        )
    )

    with pytest.raises(AuthorizationError) as exc_info:
        await client.with_token("user-token").admin.list_users()

    assert exc_info.value.error_code == "not_admin"


async def test_audit_with_query_and_pagination(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    route = mock_api.get(f"{auth_url}/admin/audit").mock(
        return_value=httpx.Response(
            200,
            json=[
                {
                    "id": "a1",
                    "payload": {"action": "login", "actor_id": USER_ID},
                    "created_at": "2024-01-01T00:00:00Z",
                    "ip_address": "127.0.0.1",
                }
            ],
            headers={
                "X-Total-Count": "3",
                "Link": (
                    '</admin/audit?page=2&per_page=1>; rel="next", '
                    '</admin/audit?page=3&per_page=1>; rel="last"'
                ),
            },
        )
    )

    result = await admin_client.admin.audit(
        AdminAuditRequest(
            query=AuditQuery(column="action", value="login"), page=1, per_page=1
        )
    )

    assert [entry.id for entry in result.logs] == ["a1"]
    assert result.logs[0].payload == {"action": "login", "actor_id": USER_ID}
    assert result.total_count == 3
    assert result.next_page == 2
    assert result.total_pages == 3
    params = route.calls.last.request.url.params
    assert params["query"] == "action:login"
    assert params["page"] == "1"
    assert params["per_page"] == "1"


async def test_audit_last_page(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    mock_api.get(f"{auth_url}/admin/audit").mock(
        return_value=httpx.Response(200, json=[], headers={"X-Total-Count": "0"})
    )

    result = await admin_client.admin.audit(AdminAuditRequest())

    assert result.logs == []
    assert result.total_count == 0
    assert result.total_pages == 0
    assert result.next_page is None


async def test_audit_query_needs_value(
    admin_client: AuthClient, mock_api: respx.MockRouter
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        await admin_client.admin.audit(AdminAuditRequest(query=AuditQuery(column="author")))

    assert exc_info.value.field == "query.value"
    assert mock_api.calls.call_count == 0


async def test_invalid_total_count_header(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    mock_api.get(f"{auth_url}/admin/audit").mock(
        return_value=httpx.Response(200, json=[], headers={"X-Total-Count": "many"})
    )

    with pytest.raises(DecodeError):
        await admin_client.admin.audit(AdminAuditRequest())


async def test_invalid_link_header_url(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    mock_api.get(f"{auth_url}/admin/users").mock(
        return_value=httpx.Response(
            200,
            json={"users": []},
            headers={"Link": '<https://example.com:port/admin/users?page=2>; rel="next"'},
        )
    )

    with pytest.raises(DecodeError, match="invalid Link header URL"):
        await admin_client.admin.list_users()


async def test_generate_link_nests_inline_user(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_user: dict[str, Any],
) -> None:
    route = mock_api.post(f"{auth_url}/admin/generate_link").mock(
        return_value=httpx.Response(
            200,
            json={
                **sample_user,
                "action_link": f"{auth_url}/verify?token=abc&type=magiclink",
                "email_otp": "123456",
                "hashed_token": "abc",
                "redirect_to": "https://app.example.com",
                "verification_type": "magiclink",
            },
        )
    )

    result = await admin_client.admin.generate_link(
        AdminGenerateLinkRequest(type="magiclink", email="test@example.com")
    )

    assert result.email_otp == "123456"
    assert result.verification_type == "magiclink"
    assert result.user is not None
    assert result.user.id == USER_ID
    assert _sent_json(route) == {"type": "magiclink", "email": "test@example.com"}


@pytest.mark.parametrize(
    ("request_", "field"),
    [
        (AdminGenerateLinkRequest(type="signup", email="test@example.com"), "password"),
        (
            AdminGenerateLinkRequest(type="email_change_new", email="test@example.com"),
            "new_email",
        ),
        (AdminGenerateLinkRequest(type="recovery", email=""), "email"),
    ],
)
async def test_generate_link_validation(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    request_: AdminGenerateLinkRequest,
    field: str,
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        await admin_client.admin.generate_link(request_)

    assert exc_info.value.field == field
    assert mock_api.calls.call_count == 0


async def test_list_sso_providers(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_provider: dict[str, Any],
) -> None:
    mock_api.get(f"{auth_url}/admin/sso/providers").mock(
        return_value=httpx.Response(200, json={"items": [sample_provider]})
    )

    result = await admin_client.admin.list_sso_providers()

    assert [p.id for p in result.items] == [PROVIDER_ID]
    assert result.items[0].domains is not None
    assert result.items[0].domains[0].domain == "example.com"


async def test_create_sso_provider(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_provider: dict[str, Any],
) -> None:
    route = mock_api.post(f"{auth_url}/admin/sso/providers").mock(
        return_value=httpx.Response(201, json=sample_provider)
    )

    provider = await admin_client.admin.create_sso_provider(
        AdminCreateSSOProviderRequest(
            metadata_url="https://idp.example.com/metadata", domains=["example.com"]
        )
    )

    assert provider.id == PROVIDER_ID
    assert provider.saml is not None
    assert provider.saml.entity_id == "https://idp.example.com/metadata"
    assert _sent_json(route) == {
        "type": "saml",
        "metadata_url": "https://idp.example.com/metadata",
        "domains": ["example.com"],
    }


@pytest.mark.parametrize(
    "request_",
    [
        AdminCreateSSOProviderRequest(),
        AdminCreateSSOProviderRequest(metadata_url="https://idp", metadata_xml="<xml/>"),
    ],
)
async def test_create_sso_provider_needs_one_metadata_source(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    request_: AdminCreateSSOProviderRequest,
) -> None:
    with pytest.raises(ValidationError):
        await admin_client.admin.create_sso_provider(request_)

    assert mock_api.calls.call_count == 0


async def test_get_update_delete_sso_provider(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_provider: dict[str, Any],
) -> None:
    path = f"{auth_url}/admin/sso/providers/{PROVIDER_ID}"
    mock_api.get(path).mock(return_value=httpx.Response(200, json=sample_provider))
    update = mock_api.put(path).mock(return_value=httpx.Response(200, json=sample_provider))
    mock_api.delete(path).mock(return_value=httpx.Response(200, json=sample_provider))

    fetched = await admin_client.admin.get_sso_provider(
        AdminGetSSOProviderRequest(provider_id=PROVIDER_ID)
    )
    updated = await admin_client.admin.update_sso_provider(
        AdminUpdateSSOProviderRequest(provider_id=PROVIDER_ID, domains=["example.org"])
    )
    deleted = await admin_client.admin.delete_sso_provider(
        AdminDeleteSSOProviderRequest(provider_id=PROVIDER_ID)
    )

    assert fetched.id == updated.id == deleted.id == PROVIDER_ID
    assert _sent_json(update) == {"domains": ["example.org"]}


async def test_create_user(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_user: dict[str, Any],
) -> None:
    route = mock_api.post(f"{auth_url}/admin/users").mock(
        return_value=httpx.Response(200, json=sample_user)
    )

    user = await admin_client.admin.create_user(
        AdminCreateUserRequest(
            email="test@example.com",
            password="password",
            email_confirm=True,
            user_metadata={"name": "Test User"},
        )
    )

    assert user.email == "test@example.com"
    assert _sent_json(route) == {
        "email": "test@example.com",
        "password": "password",
        "email_confirm": True,
        "user_metadata": {"name": "Test User"},
    }


async def test_list_users_with_pagination(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_user: dict[str, Any],
) -> None:
    route = mock_api.get(f"{auth_url}/admin/users").mock(
        return_value=httpx.Response(
            200,
            json={"users": [sample_user], "aud": "authenticated"},
            headers={
                "X-Total-Count": "2",
                "Link": (
                    '</admin/users?page=2&per_page=1>; rel="next", '
                    '</admin/users?page=2&per_page=1>; rel="last"'
                ),
            },
        )
    )

    page = await admin_client.admin.list_users(AdminListUsersRequest(page=1, per_page=1))

    assert [u.id for u in page.users] == [USER_ID]
    assert page.aud == "authenticated"
    assert page.total_count == 2
    assert page.total_pages == 2
    assert page.next_page == 2
    params = route.calls.last.request.url.params
    assert params["page"] == "1"
    assert params["per_page"] == "1"


async def test_list_users_without_paging(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_user: dict[str, Any],
) -> None:
    route = mock_api.get(f"{auth_url}/admin/users").mock(
        return_value=httpx.Response(
            200, json={"users": [sample_user]}, headers={"X-Total-Count": "1"}
        )
    )

    page = await admin_client.admin.list_users()

    assert page.total_count == 1
    assert page.total_pages == 1
    assert page.next_page is None
    assert not route.calls.last.request.url.params


async def test_update_user(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_user: dict[str, Any],
) -> None:
    route = mock_api.put(f"{auth_url}/admin/users/{USER_ID}").mock(
        return_value=httpx.Response(200, json={**sample_user, "role": "admin"})
    )

    user = await admin_client.admin.update_user(
        AdminUpdateUserRequest(user_id=USER_ID, role="admin", ban_duration="none")
    )

    assert user.role == "admin"
    assert _sent_json(route) == {"role": "admin", "ban_duration": "none"}


async def test_delete_user(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    route = mock_api.delete(f"{auth_url}/admin/users/{USER_ID}").mock(
        return_value=httpx.Response(200, json={})
    )

    await admin_client.admin.delete_user(AdminDeleteUserRequest(user_id=USER_ID))
    assert route.calls.last.request.content == b""

    await admin_client.admin.delete_user(
        AdminDeleteUserRequest(user_id=USER_ID, should_soft_delete=True)
    )
    assert _sent_json(route) == {"should_soft_delete": True}


async def test_user_id_is_escaped_in_path(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    route = mock_api.get(url__startswith=f"{auth_url}/admin/users/").mock(
        return_value=httpx.Response(200, json={"id": "a/b"})
    )

    await admin_client.admin.get_user(AdminGetUserRequest(user_id="a/b"))

    assert route.calls.last.request.url.raw_path == b"/auth/v1/admin/users/a%2Fb"


async def test_empty_user_id_rejected(
    admin_client: AuthClient, mock_api: respx.MockRouter
) -> None:
    with pytest.raises(ValidationError):
        await admin_client.admin.get_user(AdminGetUserRequest(user_id=""))

    assert mock_api.calls.call_count == 0


async def test_list_user_factors(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    mock_api.get(f"{auth_url}/admin/users/{USER_ID}/factors").mock(
        return_value=httpx.Response(
            200,
            json=[
                {
                    "id": FACTOR_ID,
                    "status": "verified",
                    "friendly_name": "Phone app",
                    "factor_type": "totp",
                }
            ],
        )
    )

    factors = await admin_client.admin.list_user_factors(
        AdminListUserFactorsRequest(user_id=USER_ID)
    )

    assert [f.id for f in factors] == [FACTOR_ID]
    assert factors[0].status == "verified"


async def test_update_user_factor(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    route = mock_api.put(f"{auth_url}/admin/users/{USER_ID}/factors/{FACTOR_ID}").mock(
        return_value=httpx.Response(
            200,
            json={
                "id": FACTOR_ID,
                "status": "verified",
                "friendly_name": "Work phone",
                "factor_type": "totp",
            },
        )
    )

    factor = await admin_client.admin.update_user_factor(
        AdminUpdateUserFactorRequest(
            user_id=USER_ID, factor_id=FACTOR_ID, friendly_name="Work phone"
        )
    )

    assert factor.friendly_name == "Work phone"
    assert _sent_json(route) == {"friendly_name": "Work phone"}


async def test_update_user_factor_requires_friendly_name(
    admin_client: AuthClient, mock_api: respx.MockRouter
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        await admin_client.admin.update_user_factor(
            AdminUpdateUserFactorRequest(user_id=USER_ID, factor_id=FACTOR_ID)
        )

    assert exc_info.value.field == "friendly_name"
    assert mock_api.calls.call_count == 0


async def test_delete_user_factor(
    admin_client: AuthClient, mock_api: respx.MockRouter, auth_url: str
) -> None:
    route = mock_api.delete(f"{auth_url}/admin/users/{USER_ID}/factors/{FACTOR_ID}").mock(
        return_value=httpx.Response(200, json={"id": FACTOR_ID})
    )

    await admin_client.admin.delete_user_factor(
        AdminDeleteUserFactorRequest(user_id=USER_ID, factor_id=FACTOR_ID)
    )

    assert route.call_count == 1


async def test_invite(
    admin_client: AuthClient,
    mock_api: respx.MockRouter,
    auth_url: str,
    sample_user: dict[str, Any],
) -> None:
    route = mock_api.post(f"{auth_url}/invite").mock(
        return_value=httpx.Response(200, json=sample_user)
    )

    user = await admin_client.admin.invite(
        InviteRequest(
            email="test@example.com",
            data={"team": "qa"},
            redirect_to="https://app.example.com/invited",
        )
    )

    assert user.id == USER_ID
    request = route.calls.last.request
    assert request.url.params["redirect_to"] == "https://app.example.com/invited"
    assert _sent_json(route) == {"email": "test@example.com", "data": {"team": "qa"}}


async def test_invite_without_email_is_rejected_before_sending(
    admin_client: AuthClient, mock_api: respx.MockRouter
) -> None:
    with pytest.raises(ValidationError) as exc_info:
        await admin_client.admin.invite(InviteRequest())

    assert exc_info.value.field == "email"
    assert mock_api.calls.call_count == 0
