"""
Domain exceptions for the login flow.

These exceptions are raised by the GitHub integration and caught
by centralized exception handlers in main.py.
"""


class ConfigError(Exception):
    """
    Raised when required configuration is missing or invalid.

    Only fatal at startup. Request handlers never see it because the
    configuration is validated before the listener binds.
    """

    pass


class GitHubAPIError(Exception):
    """
    Raised when a call to GitHub fails.

    Covers network errors, unexpected status codes and unparseable
    response bodies. Results in a 502 response; the process keeps running.
    """

    pass


class ProfileRenderError(Exception):
    """Raised when the user profile returned by GitHub is not valid JSON."""

    pass
