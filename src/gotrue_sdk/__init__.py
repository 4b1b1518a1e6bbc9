"""
GoTrue Python SDK

Async client library for the GoTrue / Supabase Auth REST API.
Provides typed access to sign-up, sign-in, MFA, SSO and
administrative user management.
"""

from .client import AuthClient
from .config import ClientConfig
from .exceptions import *
from .models import *

__version__ = "1.0.0"

__all__ = [
    "AuthClient",
    "ClientConfig",
    # Exceptions
    "GoTrueError",
    "ConfigurationError",
    "ConstructionError",
    "ValidationError",
    "TransportError",
    "NetworkError",
    "TimeoutError",
    "DecodeError",
    "APIError",
    "BadRequestError",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "ConflictError",
    "UnprocessableEntityError",
    "RateLimitError",
    "ServerError",
    # Models
    "HealthCheckResponse",
    "SettingsResponse",
    "Session",
    "TokenRequest",
    "TokenResponse",
    "SignupRequest",
    "SignupResponse",
    "RecoverRequest",
    "ResendRequest",
    "OTPRequest",
    "MagiclinkRequest",
    "VerifyRequest",
    "VerifyResponse",
    "VerifyForUserRequest",
    "VerifyForUserResponse",
    "User",
    "Factor",
    "Identity",
    "UpdateUserRequest",
    "EnrollFactorRequest",
    "EnrollFactorResponse",
    "ChallengeFactorRequest",
    "ChallengeFactorResponse",
    "VerifyFactorRequest",
    "VerifyFactorResponse",
    "UnenrollFactorRequest",
    "UnenrollFactorResponse",
    "AuthorizeRequest",
    "AuthorizeResponse",
    "SSORequest",
    "SSOResponse",
    "AdminAuditRequest",
    "AdminAuditResponse",
    "AuditQuery",
    "AdminGenerateLinkRequest",
    "AdminGenerateLinkResponse",
    "AdminCreateUserRequest",
    "AdminListUsersRequest",
    "AdminListUsersResponse",
    "AdminGetUserRequest",
    "AdminUpdateUserRequest",
    "AdminDeleteUserRequest",
    "AdminListUserFactorsRequest",
    "AdminUpdateUserFactorRequest",
    "AdminDeleteUserFactorRequest",
    "AdminCreateSSOProviderRequest",
    "AdminGetSSOProviderRequest",
    "AdminUpdateSSOProviderRequest",
    "AdminDeleteSSOProviderRequest",
    "AdminListSSOProvidersResponse",
    "SSOProvider",
    "InviteRequest",
]
