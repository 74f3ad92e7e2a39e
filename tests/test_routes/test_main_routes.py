"""
Smoke tests for the main blueprint routes.

These verify that the application starts up correctly and the
index page and health check endpoints respond.
"""


class TestIndex:
    """Tests for the landing page."""

    def test_index_returns_200(self, client, db_session):
        """The index page should return HTTP 200."""
        response = client.get("/")
        assert response.status_code == 200

    def test_index_shows_organizations_page(self, client, db_session):
        """The index renders the same directory as /organizations."""
        response = client.get("/")
        assert b"<h1" in response.data
        assert b"Organizations" in response.data


class TestHealthCheck:
    """Tests for the health check endpoint."""

    def test_health_check_returns_200(self, client):
        """The health check should report a connected database."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy", "database": "connected"}


class TestErrorPages:
    """Tests for the application-wide error handlers."""

    def test_unknown_url_renders_404_page(self, client):
        response = client.get("/no-such-page")
        assert response.status_code == 404
        assert b"Page not found" in response.data
