"""
Client for the GitHub OAuth token endpoint and user API.
"""

import logging

import httpx
from pydantic import ValidationError

from app.core.exceptions import GitHubAPIError
from app.github.config import GitHubConfig
from app.github.models import AccessTokenResponse


logger = logging.getLogger(__name__)


class GitHubClient:
    """
    Performs the two outbound calls of the login callback.

    Each call opens its own short-lived httpx.AsyncClient, so an instance
    holds no connection state and is safe to build per request.
    """

    def __init__(self, config: GitHubConfig):
        self._config = config

    async def exchange_code(self, code: str) -> AccessTokenResponse:
        """
        Exchange an authorization code for an access token.

        The code is forwarded as received. A code GitHub rejects yields a
        response with an empty access_token rather than an exception.

        Args:
            code: Authorization code from the callback query string

        Returns:
            Parsed token response

        Raises:
            GitHubAPIError: On network errors, non-2xx status or a non-JSON body
        """
        body = {
            "client_id": self._config.client_id,
            "client_secret": self._config.client_secret,
            "code": code,
        }
        headers = {
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    self._config.token_url, json=body, headers=headers
                )
                response.raise_for_status()
                token = AccessTokenResponse.model_validate(response.json())

        except httpx.HTTPStatusError as e:
            logger.error(
                f"Token exchange failed: {e.response.status_code} {e.response.text}"
            )
            raise GitHubAPIError(
                f"Token exchange failed with status {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Network error during token exchange: {e}")
            raise GitHubAPIError(f"Network error during token exchange: {e}") from e
        except (ValueError, ValidationError) as e:
            logger.error(f"Unparseable token exchange response: {e}")
            raise GitHubAPIError("Token exchange returned an invalid response") from e

        if not token.has_token:
            logger.warning(
                "Token exchange returned no access token",
                extra={"extra_fields": {"github_error": token.error}},
            )
        else:
            logger.info(
                "Exchanged authorization code for access token",
                extra={"extra_fields": {"token_type": token.token_type, "scope": token.scope}},
            )

        return token

    async def fetch_user(self, access_token: str) -> bytes:
        """
        Fetch the authenticated user's profile.

        Args:
            access_token: Token from exchange_code (may be empty)

        Returns:
            Raw JSON profile body, or empty bytes when there is no token
            or GitHub answers 401

        Raises:
            GitHubAPIError: On network errors or any other non-2xx status
        """
        if not access_token:
            logger.warning("No access token, skipping profile fetch")
            return b""

        headers = {
            "Authorization": f"token {access_token}",
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient() as client:
                response = await client.get(self._config.user_url, headers=headers)

                if response.status_code == 401:
                    logger.warning("GitHub rejected the access token")
                    return b""

                response.raise_for_status()
                user_data = response.content

        except httpx.HTTPStatusError as e:
            logger.error(
                f"Profile fetch failed: {e.response.status_code} {e.response.text}"
            )
            raise GitHubAPIError(
                f"Profile fetch failed with status {e.response.status_code}"
            ) from e
        except httpx.RequestError as e:
            logger.error(f"Network error during profile fetch: {e}")
            raise GitHubAPIError(f"Network error during profile fetch: {e}") from e

        logger.info(f"Fetched user profile ({len(user_data)} bytes)")
        return user_data
