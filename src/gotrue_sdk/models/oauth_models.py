"""OAuth and SSO models for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from pydantic import BaseModel

from .token_models import Security

FLOW_IMPLICIT = "implicit"
FLOW_PKCE = "pkce"


class AuthorizeRequest(BaseModel):
    """OAuth authorize request model.

    ``scopes`` is a space separated list of extra provider scopes; email and
    name are always requested.
    """

    provider: str
    flow_type: str = FLOW_IMPLICIT
    scopes: str | None = None
    redirect_to: str | None = None


class AuthorizeResponse(BaseModel):
    """Provider URL to send the user to.

    ``verifier`` is set for the PKCE flow and must be kept to exchange the
    returned auth code for a session.
    """

    authorization_url: str
    verifier: str | None = None


class SSORequest(BaseModel):
    """Start an SSO sign-in with a provider ID or an email domain."""

    provider_id: str | None = None
    domain: str | None = None
    redirect_to: str | None = None
    skip_http_redirect: bool | None = None
    code_challenge: str | None = None
    code_challenge_method: str | None = None
    gotrue_meta_security: Security | None = None


class SSOResponse(BaseModel):
    """Identity provider URL to send the user to."""

    url: str
