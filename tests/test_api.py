"""Tests for API endpoints."""

import logging
import pytest
from fastapi.testclient import TestClient
from unittest.mock import patch
import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from api.http_server import app
from database import DatabaseManager, get_db


@pytest.fixture
def client():
    """Test client backed by a fresh in-memory database."""
    manager = DatabaseManager("sqlite://")
    manager.initialize()

    def override_get_db():
        with manager.get_session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides.clear()
    manager.close()


@pytest.fixture
def user(client):
    response = client.post("/users", json={
        "firstName": "Ada",
        "lastName": "Lovelace",
        "timezone": "Europe/London",
        "isActive": True
    })
    assert response.status_code == 201
    return response.json()


class TestTaskEndpoints:
    """Test task-related endpoints."""

    def test_create_task(self, client):
        response = client.post("/tasks", json={"title": "Write spec", "status": "Pending"})

        assert response.status_code == 201
        data = response.json()
        assert data["id"] == 1
        assert data["title"] == "Write spec"
        assert data["status"] == "Pending"
        assert data["description"] is None
        assert data["assignedTo"] is None
        assert data["createdAt"] == data["updatedAt"]

    def test_create_task_with_timezone_hint(self, client):
        response = client.post("/tasks?timezone=America/Chicago", json={"title": "Call"})

        assert response.status_code == 201
        data = response.json()
        assert data["createdAt"] == data["updatedAt"]

    def test_create_task_with_assignee(self, client, user):
        response = client.post("/tasks", json={"title": "Review", "assignedTo": {"id": user["id"]}})

        assert response.status_code == 201
        assert response.json()["assignedTo"] == user

    def test_create_task_with_unknown_assignee(self, client):
        response = client.post("/tasks", json={"title": "Review", "assignedTo": {"id": 99}})

        assert response.status_code == 404
        assert response.text == "User not found with id: 99"
        assert response.headers["content-type"].startswith("text/plain")
        assert client.get("/tasks").json() == []

    def test_blank_title_rejected(self, client):
        response = client.post("/tasks", json={"title": "   "})

        assert response.status_code == 400
        assert response.text == "Title is mandatory"

    def test_missing_title_rejected(self, client):
        response = client.post("/tasks", json={"description": "no title"})

        assert response.status_code == 400
        assert response.text == "Title is mandatory"

    def test_bad_status_rejected(self, client):
        response = client.post("/tasks", json={"title": "T", "status": "Done"})

        assert response.status_code == 400
        assert response.text == "Status must be 'Pending', 'In Progress', or 'Completed'"

    def test_list_tasks(self, client):
        client.post("/tasks", json={"title": "One"})
        client.post("/tasks", json={"title": "Two", "status": "In Progress"})

        response = client.get("/tasks")

        assert response.status_code == 200
        assert [task["title"] for task in response.json()] == ["One", "Two"]

    def test_get_task(self, client):
        created = client.post("/tasks", json={"title": "Write spec", "status": "Pending"}).json()

        response = client.get("/tasks/1")

        assert response.status_code == 200
        assert response.json() == created

    def test_get_task_not_found(self, client):
        response = client.get("/tasks/999")

        assert response.status_code == 404
        assert response.text == "Task not found with id: 999"

    def test_update_task(self, client, user):
        created = client.post("/tasks", json={
            "title": "Old",
            "description": "old text",
            "status": "Pending",
            "assignedTo": {"id": user["id"]}
        }).json()

        response = client.put("/tasks/1?timezone=Asia/Tokyo", json={"title": "New", "status": "Completed"})

        assert response.status_code == 200
        data = response.json()
        assert data["title"] == "New"
        assert data["description"] is None
        assert data["status"] == "Completed"
        assert data["createdAt"] == created["createdAt"]
        assert data["updatedAt"] > data["createdAt"]
        assert data["assignedTo"] == user

    def test_update_task_not_found(self, client):
        response = client.put("/tasks/3", json={"title": "New"})

        assert response.status_code == 404
        assert response.text == "Task not found with id: 3"

    def test_update_task_invalid(self, client):
        client.post("/tasks", json={"title": "Old"})

        response = client.put("/tasks/1", json={"title": ""})

        assert response.status_code == 400
        assert response.text == "Title is mandatory"

    def test_delete_task_twice(self, client):
        client.post("/tasks", json={"title": "Write spec"})

        first = client.delete("/tasks/1")
        second = client.delete("/tasks/1")

        assert first.status_code == 204
        assert second.status_code == 404
        assert second.text == "Task not found with id: 1"
        assert client.get("/tasks/1").status_code == 404

    def test_task_with_deleted_assignee(self, client, user):
        client.post("/tasks", json={"title": "Review", "assignedTo": {"id": user["id"]}})
        client.delete(f"/users/{user['id']}")

        response = client.get("/tasks/1")

        assert response.status_code == 404
        assert response.text == f"User not found with id: {user['id']}"

    def test_deleted_assignee_not_reattached_to_new_user(self, client, user):
        client.post("/tasks", json={"title": "Review", "assignedTo": {"id": user["id"]}})
        client.delete(f"/users/{user['id']}")

        new_user = client.post("/users", json={"firstName": "Eve", "lastName": "Moneypenny", "timezone": "UTC"})
        response = client.get("/tasks/1")

        assert new_user.json()["id"] != user["id"]
        assert response.status_code == 404
        assert response.text == f"User not found with id: {user['id']}"

    def test_deleted_task_id_not_reused(self, client):
        client.post("/tasks", json={"title": "First"})
        client.delete("/tasks/1")

        response = client.post("/tasks", json={"title": "Second"})

        assert response.json()["id"] == 2
        assert client.get("/tasks/1").status_code == 404

    def test_failed_update_leaves_task_unchanged(self, client):
        created = client.post("/tasks", json={"title": "Old", "status": "Pending"}).json()

        response = client.put("/tasks/1", json={"title": "New", "status": "Completed", "assignedTo": {"id": 42}})

        assert response.status_code == 404
        assert response.text == "User not found with id: 42"
        assert client.get("/tasks/1").json() == created

    def test_oversized_id_rejected(self, client):
        response = client.get("/tasks/1180591620717411303424")

        assert response.status_code == 400
        assert response.text == "Input should be less than or equal to 9223372036854775807"

    def test_oversized_assignee_id_rejected(self, client):
        response = client.post("/tasks", json={"title": "T", "assignedTo": {"id": 2**70}})

        assert response.status_code == 400


class TestUserEndpoints:
    """Test user-related endpoints."""

    def test_create_user(self, user):
        assert user == {
            "id": 1,
            "firstName": "Ada",
            "lastName": "Lovelace",
            "timezone": "Europe/London",
            "isActive": True
        }

    def test_create_user_snake_case(self, client):
        response = client.post("/users", json={
            "first_name": "Grace",
            "last_name": "Hopper",
            "timezone": "America/New_York"
        })

        assert response.status_code == 201
        assert response.json()["isActive"] is None

    def test_missing_first_name(self, client):
        response = client.post("/users", json={"lastName": "Hopper", "timezone": "UTC"})

        assert response.status_code == 400
        assert response.text == "First name is mandatory"

    def test_invalid_timezone(self, client):
        response = client.post("/users", json={"firstName": "A", "lastName": "B", "timezone": "Nowhere/Land"})

        assert response.status_code == 400
        assert response.text == "Timezone must be a valid time zone id"

    def test_list_users(self, client, user):
        response = client.get("/users")

        assert response.status_code == 200
        assert response.json() == [user]

    def test_get_user_not_found(self, client):
        response = client.get("/users/5")

        assert response.status_code == 404
        assert response.text == "User not found with id: 5"

    def test_oversized_user_id_rejected(self, client):
        response = client.delete("/users/1180591620717411303424")

        assert response.status_code == 400

    def test_update_user(self, client, user):
        response = client.put(f"/users/{user['id']}", json={
            "firstName": "Ada",
            "lastName": "King",
            "timezone": "Europe/Paris"
        })

        assert response.status_code == 200
        data = response.json()
        assert data["lastName"] == "King"
        assert data["timezone"] == "Europe/Paris"
        assert data["isActive"] is None

    def test_delete_user(self, client, user):
        response = client.delete(f"/users/{user['id']}")

        assert response.status_code == 204
        assert client.get(f"/users/{user['id']}").status_code == 404


class TestHealthEndpoints:
    """Test health and status endpoints."""

    def test_root_endpoint(self, client):
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Task Manager"
        assert data["version"] == "1.0.0"

    def test_health_endpoint(self, client):
        with patch("api.http_server.db_manager.ping", return_value=True):
            response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy", "database": True}

    def test_health_endpoint_degraded(self, client):
        with patch("api.http_server.db_manager.ping", return_value=False):
            response = client.get("/health")

        assert response.json()["status"] == "degraded"


class TestServerErrors:
    """Test handling of unexpected failures."""

    def test_unhandled_error_logged_once_without_traceback(self, client, caplog):
        with patch("services.task_service.TaskService.get_all_tasks", side_effect=RuntimeError("boom")):
            with caplog.at_level(logging.ERROR, logger="api.http_server"):
                response = client.get("/tasks")

        assert response.status_code == 500
        assert response.text == "Internal server error"
        records = [r for r in caplog.records if r.name == "api.http_server"]
        assert len(records) == 1
        assert records[0].exc_info is None
        assert "boom" in records[0].getMessage()
