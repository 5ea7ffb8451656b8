"""
Tests for the entry page and health endpoints.
"""


class TestEntryPage:
    """Test the GET / entry page."""

    def test_root_returns_login_link(self, client):
        """Test the root page links to the GitHub login."""
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert (
            '<a href="/login/github">Login with GitHub Account</a>' in response.text
        )

    def test_root_is_idempotent(self, client):
        """Test repeated requests return byte-identical responses."""
        bodies = {client.get("/").content for _ in range(5)}

        assert len(bodies) == 1

    def test_root_ignores_query_parameters(self, client):
        """Test the page does not depend on request input."""
        assert client.get("/?foo=bar").content == client.get("/").content


class TestHealthEndpoint:
    """Test the /health endpoint."""

    def test_health_endpoint(self, client):
        """Test the /health endpoint returns healthy status."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestRouting:
    """Test routing edge cases."""

    def test_nonexistent_endpoint_returns_404(self, client):
        """Test that a nonexistent endpoint returns 404."""
        response = client.get("/nonexistent")
        assert response.status_code == 404

    def test_login_accepts_get_only(self, client):
        """Test that the login endpoint only accepts GET requests."""
        response = client.post("/login/github")
        assert response.status_code == 405
