"""
GitHub login endpoints.

- GET /login/github - Redirect to GitHub's authorization page
- GET /login/github/callback - Exchange code, fetch profile, render it
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import RedirectResponse

from app.github.client import GitHubClient
from app.github.config import GitHubConfig, get_github_config
from app.github.renderer import render_profile


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/login/github", tags=["github"])


def get_github_client(
    config: Annotated[GitHubConfig, Depends(get_github_config)],
) -> GitHubClient:
    """Provide a GitHubClient bound to the application configuration."""
    return GitHubClient(config)


Config = Annotated[GitHubConfig, Depends(get_github_config)]
Client = Annotated[GitHubClient, Depends(get_github_client)]


@router.get("")
async def login(config: Config):
    """
    Start the GitHub OAuth flow.

    Returns:
        301 redirect to GitHub's authorization page
    """
    logger.info(
        "Redirecting to GitHub authorization",
        extra={"extra_fields": {"redirect_uri": config.callback_url}},
    )
    return RedirectResponse(
        url=config.authorization_redirect_url,
        status_code=status.HTTP_301_MOVED_PERMANENTLY,
    )


@router.get("/callback")
async def callback(client: Client, code: Annotated[str, Query()] = ""):
    """
    Handle GitHub's redirect back after user consent.

    The code is passed to GitHub unvalidated; a bad code ends in a 401.

    Args:
        client: GitHub API client
        code: One-time authorization code

    Returns:
        Tab-indented user profile JSON, or 401 unauthorized
    """
    logger.info("GitHub callback received")

    token = await client.exchange_code(code)
    user_data = await client.fetch_user(token.access_token)

    return render_profile(user_data)
