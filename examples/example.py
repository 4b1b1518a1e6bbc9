"""Example usage of the GoTrue Python SDK."""
# Copyright (c) 2025 GoTrue SDK. All rights reserved.

import asyncio
import logging
import os

from gotrue_sdk import (
    AdminListUserFactorsRequest,
    AdminListUsersRequest,
    APIError,
    AuthClient,
    AuthenticationError,
    AuthorizeRequest,
    GoTrueError,
    RateLimitError,
    RecoverRequest,
    UpdateUserRequest,
)

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

PROJECT_REFERENCE = os.environ.get("GOTRUE_PROJECT_REFERENCE", "abcdefghijklmnop")
API_KEY = os.environ.get("GOTRUE_API_KEY", "anon-key")


async def main() -> None:
    """Execute main example function."""
    async with AuthClient(PROJECT_REFERENCE, API_KEY) as client:
        try:
            logger.info("=== Health Check Example ===")

            health = await client.health.check()
            logger.info("Service: %s %s", health.name, health.version)

            logger.info("=== Sign In Example ===")

            session = await client.auth.sign_in_with_email_password(
                "user@example.com", "password"
            )
            logger.info("Signed in! Token expires in %s seconds", session.expires_in)

            # Calls on behalf of the user go through a derived client
            user_client = client.with_token(session.access_token)
            user = await user_client.user.get()
            logger.info("Welcome, %s! (ID: %s)", user.email, user.id)

            logger.info("=== Profile Update Example ===")

            user = await user_client.user.update(
                UpdateUserRequest(data={"display_name": "Updated Name"})
            )
            logger.info("Metadata is now %s", user.user_metadata)

            logger.info("=== Refresh Example ===")

            session = await client.auth.refresh_token(session.refresh_token)
            logger.info("Refreshed session for %s", session.user.id if session.user else "?")

            logger.info("=== Logout Example ===")

            await client.with_token(session.access_token).auth.logout()
            logger.info("Logged out successfully!")

        except AuthenticationError as e:
            logger.exception("Authentication failed: %s", e.message)
        except APIError as e:
            logger.exception("API error: %s (Status: %s)", e.message, e.status_code)
        except GoTrueError:
            logger.exception("Request failed before reaching the server")


async def oauth_example() -> None:
    """Start a PKCE sign-in with an external provider."""
    logger.info("=== OAuth Example ===")

    async with AuthClient(PROJECT_REFERENCE, API_KEY) as client:
        result = await client.oauth.authorize(
            AuthorizeRequest(
                provider="github",
                flow_type="pkce",
                redirect_to="https://example.com/callback",
            )
        )
        logger.info("Send the user to: %s", result.authorization_url)
        # keep the verifier to exchange the auth code with TokenRequest(grant_type="pkce")
        logger.info("PKCE verifier: %s", result.verifier)


async def recovery_example() -> None:
    """Send a password recovery email, respecting the rate limit."""
    logger.info("=== Recovery Example ===")

    async with AuthClient(PROJECT_REFERENCE, API_KEY) as client:
        try:
            await client.auth.recover(RecoverRequest(email="user@example.com"))
            logger.info("Recovery email sent")
        except RateLimitError as e:
            logger.warning("Try again later: %s", e.message)


async def admin_example() -> None:
    """List users with the service role key."""
    logger.info("=== Admin Functions Example ===")

    service_role_key = os.environ.get("GOTRUE_SERVICE_ROLE_KEY")
    if not service_role_key:
        logger.info("GOTRUE_SERVICE_ROLE_KEY not set, skipping")
        return

    async with AuthClient(PROJECT_REFERENCE, API_KEY) as client:
        admin = client.with_token(service_role_key).admin
        page = await admin.list_users(AdminListUsersRequest(page=1, per_page=5))
        logger.info(
            "Found %s users on %s pages", page.total_count, page.total_pages
        )

        # Concurrent requests share the client's connection pool
        tasks = [
            admin.list_user_factors(AdminListUserFactorsRequest(user_id=u.id))
            for u in page.users
        ]
        results = await asyncio.gather(*tasks, return_exceptions=True)
        for i, result in enumerate(results):
            if isinstance(result, Exception):
                logger.error("Task %s failed: %s", i, result)
            else:
                logger.info("User %s has %s factors", page.users[i].id, len(result))


if __name__ == "__main__":
    asyncio.run(main())
    asyncio.run(oauth_example())
    asyncio.run(recovery_example())
    asyncio.run(admin_example())
