"""
Smoke tests for the main blueprint and the JSON error handlers.
"""


class TestHealthCheck:
    """Tests for the health check endpoint."""

    def test_health_check_returns_200(self, client):
        """The health check should report a connected database."""
        response = client.get("/health")
        assert response.status_code == 200
        assert response.get_json() == {"status": "healthy", "database": "connected"}


class TestErrorHandlers:
    """Unknown routes and methods answer with JSON errors."""

    def test_unknown_route_returns_json_404(self, client):
        response = client.get("/api/desconocido")
        assert response.status_code == 404
        assert "error" in response.get_json()

    def test_wrong_method_returns_json_405(self, client):
        response = client.patch("/api/jefes/1", json={})
        assert response.status_code == 405
        assert "error" in response.get_json()

    def test_non_numeric_id_does_not_match_route(self, client):
        """Path segments that are not integers fall through to 404."""
        response = client.get("/api/jefes/abc")
        assert response.status_code == 404
