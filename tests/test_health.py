from __future__ import annotations

from fastapi.testclient import TestClient

from mimetable.config import Settings


def test_health_endpoint(client, magic_file):
    """GET /api/health should return 200 with table stats."""
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["service"] == "mimetable"
    assert data["version"] == "0.1.0"
    assert data["checks"]["magic_table"] == {
        "source": str(magic_file),
        "mime_types": 8,
        "extensions": 14,
    }


def test_readiness_endpoint(client):
    """GET /api/health/ready should return 200 with status=ready."""
    response = client.get("/api/health/ready")
    assert response.status_code == 200
    assert response.json()["status"] == "ready"


# ── Edge Cases ────────────────────────────────────────────────────────


class TestHealthEdgeCases:
    def test_readiness_with_missing_table(self, tmp_path, monkeypatch):
        """A missing magic table reports not ready instead of erroring."""
        from mimetable.main import app

        missing = Settings(magic=tmp_path / "missing.types", _env_file=None)
        monkeypatch.setattr("mimetable.dependencies.get_settings", lambda: missing)

        # No lifespan: startup would fail on the missing table
        resp = TestClient(app).get("/api/health/ready")
        assert resp.status_code == 503
        data = resp.json()
        assert data["status"] == "not ready"
        assert "does not exist" in data["error"]

    def test_startup_builds_table(self, magic_file, monkeypatch):
        """The lifespan builds the shared table before serving."""
        from mimetable import dependencies
        from mimetable.main import app

        configured = Settings(magic=magic_file, _env_file=None)
        monkeypatch.setattr("mimetable.dependencies.get_settings", lambda: configured)

        with TestClient(app):
            assert dependencies._table is not None
            assert dependencies._table.source == str(magic_file)
