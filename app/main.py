"""
FastAPI application for logging in with a GitHub account.

This module wires the routers and exception handlers and provides the
process entry point. The OAuth flow itself lives in app/github.
"""

import logging
import sys
from contextlib import asynccontextmanager

# Configure logging FIRST, before other local imports
from app.logging_config import setup_global_logging

setup_global_logging()

# Now import other modules (they will use the configured logging)
from fastapi import FastAPI, Request, status  # noqa: E402
from fastapi.responses import HTMLResponse, JSONResponse  # noqa: E402

from app.core.exceptions import (  # noqa: E402
    ConfigError,
    GitHubAPIError,
    ProfileRenderError,
)
from app.github import router as github_router  # noqa: E402
from app.github.config import get_github_config  # noqa: E402

logger = logging.getLogger(__name__)

LOGIN_LINK_HTML = '<a href="/login/github">Login with GitHub Account</a>'


# ============================================================================
# Application Lifecycle
# ============================================================================


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Validates configuration on startup so a misconfigured server never
    starts accepting requests.
    """
    get_github_config().validate()
    logger.info("Application starting up...")
    yield
    logger.info("Shutting down application...")


app = FastAPI(
    title="GitHub OAuth Login",
    description="Logs in with GitHub and displays the user's profile",
    version="1.0.0",
    lifespan=lifespan,
)


# ============================================================================
# Centralized Exception Handlers
# ============================================================================


@app.exception_handler(GitHubAPIError)
async def github_api_error_handler(request: Request, exc: GitHubAPIError):
    """
    Handle GitHub API failures.

    Returns 502 Bad Gateway for this request only; the server keeps running.
    """
    logger.error(f"GitHub API error: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"status": "error", "message": str(exc)},
    )


@app.exception_handler(ProfileRenderError)
async def profile_render_error_handler(request: Request, exc: ProfileRenderError):
    """Handle a profile body from GitHub that is not JSON."""
    logger.error(f"Profile render error: {str(exc)}")
    return JSONResponse(
        status_code=status.HTTP_502_BAD_GATEWAY,
        content={"status": "error", "message": "GitHub returned an invalid profile"},
    )


# ============================================================================
# Endpoints
# ============================================================================


@app.get("/", response_class=HTMLResponse)
async def root():
    """Entry page with a link to start the GitHub login."""
    return LOGIN_LINK_HTML


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


app.include_router(github_router.router)


# ============================================================================
# Main Entry Point
# ============================================================================


def run() -> None:
    """
    Validate configuration and serve the application.

    Exits with status 1 if required configuration is missing.
    """
    import uvicorn

    config = get_github_config()
    try:
        config.validate()
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    logger.info(f"Server running on port {config.port}")
    uvicorn.run(app, host="0.0.0.0", port=int(config.port))


if __name__ == "__main__":
    run()
