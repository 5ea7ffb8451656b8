"""
Shared test configuration and fixtures.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.github.config import GitHubConfig, get_github_config


@pytest.fixture
def github_config():
    """Valid GitHub configuration for a local server on port 8080."""
    return GitHubConfig(
        port="8080",
        client_id="test-client-id",
        client_secret="test-client-secret",
        protocol="http",
        host="localhost",
    )


@pytest.fixture
def client(github_config):
    """
    Test client with the GitHub configuration overridden.

    Lifespan events are not run, so the real environment is never consulted.
    """
    app.dependency_overrides[get_github_config] = lambda: github_config

    yield TestClient(app)

    app.dependency_overrides.pop(get_github_config, None)
