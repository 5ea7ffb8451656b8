"""
GitHub OAuth configuration.

Loaded once at startup from environment variables (optionally seeded
from a .env file) and passed to handlers through dependency injection.
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv

from app.core.exceptions import ConfigError


logger = logging.getLogger(__name__)


# GitHub OAuth endpoints
GITHUB_AUTHORIZE_URL = "https://github.com/login/oauth/authorize"
GITHUB_TOKEN_URL = "https://github.com/login/oauth/access_token"

# GitHub REST API endpoint for the authenticated user
GITHUB_USER_URL = "https://api.github.com/user"

CALLBACK_PATH = "/login/github/callback"

# Environment variable names, keyed by the field they populate
REQUIRED_ENV_VARS = {
    "port": "PORT",
    "client_id": "GITHUB_CLIENT_ID",
    "client_secret": "GITHUB_CLIENT_SECRET",
    "protocol": "PROTOCOL",
    "host": "HOST",
}


@dataclass(frozen=True)
class GitHubConfig:
    """
    GitHub OAuth configuration settings.

    Fields are None when the corresponding environment variable is unset.
    Call validate() at startup to fail fast.
    """

    port: str | None
    client_id: str | None
    client_secret: str | None
    protocol: str | None
    host: str | None

    authorize_url: str = GITHUB_AUTHORIZE_URL
    token_url: str = GITHUB_TOKEN_URL
    user_url: str = GITHUB_USER_URL

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> "GitHubConfig":
        """
        Load configuration from environment variables.

        Variables from the .env file never override ones already set
        in the process environment.

        Args:
            dotenv_path: Explicit .env location (searched from cwd if omitted)
        """
        path = dotenv_path or find_dotenv(usecwd=True)
        if path and load_dotenv(path, override=False):
            logger.info(f"Loaded environment from {path}")
        else:
            logger.info("No .env file found, using process environment only")

        return cls(**{field: os.getenv(var) for field, var in REQUIRED_ENV_VARS.items()})

    def validate(self) -> None:
        """
        Validate required configuration.

        A variable counts as missing only when it is unset; a variable set
        to an empty string is accepted. PORT must be ASCII digits in 1..65535.

        Raises:
            ConfigError: If any required variable is missing or PORT is invalid
        """
        missing = [
            var
            for field, var in REQUIRED_ENV_VARS.items()
            if getattr(self, field) is None
        ]
        if missing:
            raise ConfigError(f"Missing required environment variables: {', '.join(missing)}")

        port = self.port or ""
        if not (port.isascii() and port.isdecimal()) or not 0 < int(port) < 65536:
            raise ConfigError(f"PORT must be a TCP port number, got {self.port!r}")

    @property
    def callback_url(self) -> str:
        """URL GitHub redirects the browser back to after consent."""
        return f"{self.protocol}://{self.host}:{self.port}{CALLBACK_PATH}"

    @property
    def authorization_redirect_url(self) -> str:
        """GitHub authorization page URL for this client."""
        return (
            f"{self.authorize_url}?client_id={self.client_id}"
            f"&redirect_uri={self.callback_url}"
        )


@lru_cache()
def get_github_config() -> GitHubConfig:
    """Get GitHub configuration singleton."""
    return GitHubConfig.from_env()
