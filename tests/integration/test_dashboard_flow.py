"""Integration tests for the admin dashboard endpoints."""
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch

from src.api.main import create_app
from src.core.config import Settings
from src.services.record_store import RegistrationStore
from src.utils.exceptions import StoreFailureError


def _seed(file_path):
    store = RegistrationStore(str(file_path))
    store.insert({"name": "Ann", "email": "ann@example.com", "registration_type": "student",
                  "created_at": "2025-10-01T09:00:00+00:00"})
    store.insert({"name": "Ben", "email": "ben@example.com", "registration_type": "professional",
                  "company": "Acme", "created_at": "2025-10-02T09:00:00+00:00"})
    store.insert({"name": "Cat", "email": "cat@example.com", "registration_type": "student",
                  "phone": "0912 345 678", "created_at": "2025-10-03T09:00:00+00:00"})


@pytest.fixture
def client(tmp_path, monkeypatch):
    """API client over a store with two students and one professional."""
    file_path = tmp_path / "registrations.json"
    _seed(file_path)
    monkeypatch.setattr("src.services.record_store.REGISTRATIONS_FILE", str(file_path))
    return TestClient(create_app())


def _names(response):
    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    return [record["name"] for record in body["data"]]


class TestStats:
    """Test GET /admin/stats."""

    def test_stats(self, client):
        """Test counts over the seeded store."""
        response = client.get("/admin/stats")

        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "data": {"total": 3, "students": 2, "professionals": 1},
        }

    def test_stats_on_empty_store(self, tmp_path, monkeypatch):
        """Test a fresh deployment reports zeros."""
        monkeypatch.setattr("src.services.record_store.REGISTRATIONS_FILE", str(tmp_path / "none.json"))
        response = TestClient(create_app()).get("/admin/stats")

        assert response.json()["data"] == {"total": 0, "students": 0, "professionals": 0}

    def test_stats_failure(self, client):
        """Test store errors return 500 with the stats message."""
        with patch("src.api.routes.get_stats", side_effect=StoreFailureError("unreadable")):
            response = client.get("/admin/stats")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to fetch dashboard statistics"}


class TestListRegistrations:
    """Test GET /admin/registrations."""

    def test_defaults_newest_first(self, client):
        """Test no params lists all newest first."""
        assert _names(client.get("/admin/registrations")) == ["Cat", "Ben", "Ann"]

    def test_student_desc(self, client):
        """Test student filter, newest first."""
        assert _names(client.get("/admin/registrations", params={"type": "student", "sort": "desc"})) == ["Cat", "Ann"]

    def test_professional_asc(self, client):
        """Test professional filter, oldest first."""
        assert _names(client.get("/admin/registrations", params={"type": "professional", "sort": "asc"})) == ["Ben"]

    def test_bogus_params_equal_defaults(self, client):
        """Test unknown type and sort fall back to all and desc."""
        bogus = client.get("/admin/registrations", params={"type": "bogus-type", "sort": "bogus-sort"})
        default = client.get("/admin/registrations", params={"type": "all", "sort": "desc"})

        assert bogus.status_code == 200
        assert bogus.json() == default.json()

    def test_search(self, client):
        """Test name/email substring search."""
        assert _names(client.get("/admin/registrations", params={"search": "CAT@"})) == ["Cat"]

    def test_absent_optional_fields_are_omitted(self, client):
        """Test company and phone keys only appear when stored."""
        data = client.get("/admin/registrations", params={"sort": "asc"}).json()["data"]
        ann, ben, cat = data

        assert "company" not in ann and "phone" not in ann
        assert ben["company"] == "Acme" and "phone" not in ben
        assert cat["phone"] == "0912 345 678" and "company" not in cat

    def test_list_failure(self, client):
        """Test store errors return 500 with the list message."""
        with patch("src.api.routes.list_registrations", side_effect=StoreFailureError("unreadable")):
            response = client.get("/admin/registrations")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": "Failed to fetch registrations"}


class TestCors:
    """Test origin allow-list."""

    @pytest.fixture
    def cors_client(self, tmp_path, monkeypatch):
        monkeypatch.setattr("src.services.record_store.REGISTRATIONS_FILE", str(tmp_path / "cors.json"))
        config = Settings(allowed_origins=["http://localhost:8501"])
        return TestClient(create_app(config))

    def test_allowed_origin(self, cors_client):
        """Test listed origins get the CORS header."""
        response = cors_client.get("/", headers={"Origin": "http://localhost:8501"})

        assert response.headers.get("access-control-allow-origin") == "http://localhost:8501"

    def test_disallowed_origin(self, cors_client):
        """Test unlisted origins get no CORS header."""
        response = cors_client.get("/", headers={"Origin": "http://evil.example"})

        assert "access-control-allow-origin" not in response.headers

    def test_no_origin_passes(self, cors_client):
        """Test requests without an Origin header are served."""
        assert cors_client.get("/").status_code == 200

    def test_preflight(self, cors_client):
        """Test preflight for a POST from an allowed origin."""
        response = cors_client.options(
            "/register",
            headers={
                "Origin": "http://localhost:8501",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert "POST" in response.headers.get("access-control-allow-methods", "")
