"""Tests for error handling."""

from unittest.mock import patch


class TestServerErrors:
    def test_development_error_exposes_details(self, client):
        with patch("blogful.services.get_all_articles", side_effect=ValueError("boom")):
            response = client.get("/articles")

        assert response.status_code == 500
        assert response.get_json() == {
            "message": "boom",
            "error": {"type": "ValueError", "args": ["'boom'"]},
        }

    def test_production_error_hides_details(self, production_app):
        client = production_app.test_client()

        with patch("blogful.services.get_all_articles", side_effect=ValueError("secret dsn")):
            response = client.get("/articles")

        assert response.status_code == 500
        assert response.get_json() == {"error": {"message": "server error"}}

    def test_server_error_is_logged(self, client, caplog):
        with patch("blogful.services.get_by_id", side_effect=RuntimeError("lost connection")):
            client.get("/articles/1")

        records = [r for r in caplog.records if r.name == "blogful.errors"]
        assert records
        assert records[0].exc_info is not None


class TestHttpErrors:
    def test_unknown_route(self, client):
        response = client.get("/articlces")
        assert response.status_code == 404
        assert set(response.get_json()) == {"error"}
        assert response.get_json()["error"]["message"]

    def test_method_not_allowed(self, client):
        response = client.put("/articles/1", json={"title": "x"})
        assert response.status_code == 405
        assert "message" in response.get_json()["error"]
