import pytest

from models.DashboardDBModel import DashboardDataDB
from models.UserDBModel import UserDB


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


class TestSyncUser:
    def test_creates_user_once(self, client, rows):
        user = {"id": "idp-42", "email": "founder@example.com", "full_name": "Sam Founder"}

        assert client.post("/api/sync-user", json=user).json() == {"success": True}
        assert client.post("/api/sync-user", json=dict(user, full_name="Renamed")).json() == {"success": True}

        [stored] = rows(UserDB)
        assert stored.id == "idp-42"
        assert stored.full_name == "Sam Founder"

    @pytest.mark.parametrize("body", [
        {"email": "founder@example.com"},
        {"id": "idp-42"},
        {"id": " ", "email": "founder@example.com"},
    ])
    def test_requires_id_and_email(self, client, rows, body):
        response = client.post("/api/sync-user", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}
        assert rows(UserDB) == []


class TestDashboardData:
    def test_save_then_load(self, client):
        saved = client.post("/api/save-dashboard-data", json={
            "user_id": "user-1", "data_type": "kanban", "data": {"columns": ["todo", "done"]},
        })
        assert saved.json() == {"success": True}

        [entry] = client.get("/api/load-dashboard-data", params={"user_id": "user-1"}).json()["data"]
        assert entry["data_type"] == "kanban"
        assert entry["data"] == {"columns": ["todo", "done"]}

    def test_save_replaces_existing_entry(self, client, rows):
        for version in (1, 2):
            client.post("/api/save-dashboard-data", json={
                "user_id": "user-1", "data_type": "goals", "data": {"version": version},
            })

        [stored] = rows(DashboardDataDB)
        assert stored.data == {"version": 2}

    def test_entries_are_per_user(self, client):
        client.post("/api/save-dashboard-data", json={"user_id": "a", "data_type": "goals", "data": [1]})
        client.post("/api/save-dashboard-data", json={"user_id": "b", "data_type": "goals", "data": [2]})

        data = client.get("/api/load-dashboard-data", params={"user_id": "b"}).json()["data"]
        assert [entry["data"] for entry in data] == [[2]]

    def test_missing_data_type(self, client):
        response = client.post("/api/save-dashboard-data", json={"user_id": "user-1", "data": {}})
        assert response.status_code == 400
        assert response.json() == {"error": "Missing required fields"}

    def test_load_requires_user_id(self, client):
        response = client.get("/api/load-dashboard-data")
        assert response.status_code == 400
        assert response.json() == {"error": "Missing user_id"}
