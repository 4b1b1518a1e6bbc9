"""GoTrue models package.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from .admin_models import (
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
    AuditQuery,
    InviteRequest,
    Pagination,
    SAMLProvider,
    SSODomain,
    SSOProvider,
)
from .auth_models import (
    MagiclinkRequest,
    OTPRequest,
    RecoverRequest,
    ResendRequest,
    SignupRequest,
    SignupResponse,
    VerifyForUserRequest,
    VerifyForUserResponse,
    VerifyRequest,
    VerifyResponse,
)
from .health_models import HealthCheckResponse, SettingsResponse
from .mfa_models import (
    ChallengeFactorRequest,
    ChallengeFactorResponse,
    EnrollFactorRequest,
    EnrollFactorResponse,
    TOTPObject,
    UnenrollFactorRequest,
    UnenrollFactorResponse,
    VerifyFactorRequest,
    VerifyFactorResponse,
)
from .oauth_models import (
    FLOW_IMPLICIT,
    FLOW_PKCE,
    AuthorizeRequest,
    AuthorizeResponse,
    SSORequest,
    SSOResponse,
)
from .token_models import (
    GRANT_PASSWORD,
    GRANT_PKCE,
    GRANT_REFRESH_TOKEN,
    Security,
    Session,
    TokenRequest,
    TokenResponse,
)
from .user_models import Factor, Identity, UpdateUserRequest, User

__all__ = [
    # Health models
    "HealthCheckResponse",
    "SettingsResponse",
    # Token models
    "GRANT_PASSWORD",
    "GRANT_PKCE",
    "GRANT_REFRESH_TOKEN",
    "Security",
    "Session",
    "TokenRequest",
    "TokenResponse",
    # Sign-up, recovery and verification models
    "MagiclinkRequest",
    "OTPRequest",
    "RecoverRequest",
    "ResendRequest",
    "SignupRequest",
    "SignupResponse",
    "VerifyForUserRequest",
    "VerifyForUserResponse",
    "VerifyRequest",
    "VerifyResponse",
    # User models
    "Factor",
    "Identity",
    "UpdateUserRequest",
    "User",
    # MFA models
    "ChallengeFactorRequest",
    "ChallengeFactorResponse",
    "EnrollFactorRequest",
    "EnrollFactorResponse",
    "TOTPObject",
    "UnenrollFactorRequest",
    "UnenrollFactorResponse",
    "VerifyFactorRequest",
    "VerifyFactorResponse",
    # OAuth and SSO models
    "FLOW_IMPLICIT",
    "FLOW_PKCE",
    "AuthorizeRequest",
    "AuthorizeResponse",
    "SSORequest",
    "SSOResponse",
    # Admin models
    "AdminAuditRequest",
    "AdminAuditResponse",
    "AdminCreateSSOProviderRequest",
    "AdminCreateUserRequest",
    "AdminDeleteSSOProviderRequest",
    "AdminDeleteUserFactorRequest",
    "AdminDeleteUserRequest",
    "AdminGenerateLinkRequest",
    "AdminGenerateLinkResponse",
    "AdminGetSSOProviderRequest",
    "AdminGetUserRequest",
    "AdminListSSOProvidersResponse",
    "AdminListUserFactorsRequest",
    "AdminListUsersRequest",
    "AdminListUsersResponse",
    "AdminUpdateSSOProviderRequest",
    "AdminUpdateUserFactorRequest",
    "AdminUpdateUserRequest",
    "AuditLogEntry",
    "AuditQuery",
    "InviteRequest",
    "Pagination",
    "SAMLProvider",
    "SSODomain",
    "SSOProvider",
]
