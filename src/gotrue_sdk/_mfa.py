"""Multi-factor authentication service for GoTrue.

Copyright (c) 2025 GoTrue SDK. All rights reserved.
"""

from __future__ import annotations

from ._base import BaseClient, RequestConfig, json_body, require, segment
from .exceptions import ValidationError
from .models import (
    ChallengeFactorRequest,
    ChallengeFactorResponse,
    EnrollFactorRequest,
    EnrollFactorResponse,
    UnenrollFactorRequest,
    UnenrollFactorResponse,
    VerifyFactorRequest,
    VerifyFactorResponse,
)

FACTOR_TYPES = ("totp", "phone")


class MFAService:
    """Service for the signed-in user's MFA factors."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize MFA service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def enroll(self, request: EnrollFactorRequest) -> EnrollFactorResponse:
        """Enroll a new factor.

        Args:
            request: Factor type and its settings

        Returns:
            The unverified factor; TOTP factors include the QR code and secret.

        """
        if request.factor_type not in FACTOR_TYPES:
            msg = f"factor_type must be one of {', '.join(FACTOR_TYPES)}"
            raise ValidationError(msg, "factor_type")
        if request.factor_type == "phone":
            require(request.phone, "phone")

        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "POST", "/factors", EnrollFactorResponse, config=config
        )

    async def challenge(
        self, request: ChallengeFactorRequest
    ) -> ChallengeFactorResponse:
        """Create a challenge for an enrolled factor.

        Args:
            request: Factor to challenge

        Returns:
            Challenge ID and its expiry as a unix timestamp.

        """
        require(request.factor_id, "factor_id")

        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "POST",
            f"/factors/{segment(request.factor_id)}/challenge",
            ChallengeFactorResponse,
            config=config,
        )

    async def verify(self, request: VerifyFactorRequest) -> VerifyFactorResponse:
        """Verify a challenge and upgrade the session.

        Args:
            request: Factor, challenge and code

        Returns:
            A session at the higher assurance level.

        """
        require(request.factor_id, "factor_id")
        require(request.challenge_id, "challenge_id")
        require(request.code, "code")

        config = RequestConfig(json_data=json_body(request))
        return await self._client.make_request(
            "POST",
            f"/factors/{segment(request.factor_id)}/verify",
            VerifyFactorResponse,
            config=config,
        )

    async def unenroll(
        self, request: UnenrollFactorRequest
    ) -> UnenrollFactorResponse:
        """Remove an enrolled factor."""
        require(request.factor_id, "factor_id")

        return await self._client.make_request(
            "DELETE",
            f"/factors/{segment(request.factor_id)}",
            UnenrollFactorResponse,
        )
