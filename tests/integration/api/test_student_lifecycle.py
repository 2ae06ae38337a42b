"""Integration tests for the full student API application."""

import pytest
from fastapi.testclient import TestClient

from student_records.api.app import create_app
from student_records.config import Settings

BASE = "/api/students"


@pytest.fixture
def client():
    """Create a test client; the lifespan builds a fresh store."""
    app = create_app(Settings())
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.mark.integration
class TestStudentCrudFullFlow:
    """Full CRUD flows through every layer."""

    def test_student_crud_full_flow(self, client: TestClient, student_payload) -> None:
        """Create -> Read -> Update -> Delete flow."""
        # 1. Create
        create_response = client.post(BASE, json=student_payload("S100"))
        assert create_response.status_code == 200
        student_id = create_response.json()["data"]["id"]

        # 2. Read
        get_response = client.get(f"{BASE}/{student_id}")
        assert get_response.status_code == 200
        assert get_response.json()["data"] == create_response.json()["data"]

        # 3. Update
        update_response = client.put(
            f"{BASE}/{student_id}",
            json=student_payload("S100", name="Ada King", enrollmentDate="2025-02-01T00:00:00"),
        )
        assert update_response.status_code == 200
        updated = update_response.json()["data"]
        assert updated["name"] == "Ada King"
        assert updated["enrollmentDate"] == "2025-02-01T00:00:00"
        assert updated["id"] == student_id

        # 4. Delete
        delete_response = client.delete(f"{BASE}/{student_id}")
        assert delete_response.status_code == 200
        assert delete_response.json()["data"] is True

        # 5. Gone
        assert client.get(f"{BASE}/{student_id}").json()["message"] == "Student not found"
        assert client.get(BASE).json()["data"] == []

    def test_duplicate_and_conflict_scenario(self, client: TestClient, student_payload) -> None:
        """A(S100) ok, B(s100) rejected, C(S200) ok; A cannot take S200."""
        a = client.post(BASE, json=student_payload("S100", name="A")).json()["data"]

        b = client.post(BASE, json=student_payload("s100", name="B"))
        assert b.status_code == 400
        assert b.json()["message"] == "Student with this ID number already exists"

        c = client.post(BASE, json=student_payload("S200", name="C"))
        assert c.status_code == 200
        c_data = c.json()["data"]

        listed = client.get(BASE).json()["data"]
        assert len(listed) == 2
        assert {s["id"] for s in listed} == {a["id"], c_data["id"]}

        moved = client.put(f"{BASE}/{a['id']}", json=student_payload("S200", name="A"))
        assert moved.status_code == 400
        assert client.get(f"{BASE}/{a['id']}").json()["data"]["idNumber"] == "S100"
        assert client.get(f"{BASE}/{c_data['id']}").json()["data"] == c_data

        assert client.delete(f"{BASE}/{a['id']}").status_code == 200
        assert client.get(f"{BASE}/{a['id']}").status_code == 400


@pytest.mark.integration
class TestApplication:
    """Application wiring."""

    def test_store_is_reset_on_restart(self, student_payload) -> None:
        """Students do not survive a restart of the app."""
        app = create_app(Settings())
        with TestClient(app) as client:
            assert client.post(BASE, json=student_payload()).status_code == 200

        with TestClient(app) as client:
            assert client.get(BASE).json()["data"] == []

    def test_health(self, client: TestClient) -> None:
        """Liveness check answers with a plain status, not an envelope."""
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_custom_api_prefix(self, student_payload) -> None:
        """Routes are mounted under the configured prefix."""
        app = create_app(Settings(api_prefix="/v2"))
        with TestClient(app) as client:
            assert client.post("/v2/students", json=student_payload()).status_code == 200
            assert client.get(BASE).status_code == 404

    def test_cors_headers(self) -> None:
        """Configured origins are allowed."""
        app = create_app(Settings(cors_origins=["https://school.example"]))
        with TestClient(app) as client:
            response = client.get(BASE, headers={"Origin": "https://school.example"})

        assert response.headers["access-control-allow-origin"] == "https://school.example"
