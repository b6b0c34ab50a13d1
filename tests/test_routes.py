# =============================================================================
# tests/test_routes.py - HTTP Endpoint Tests
# =============================================================================
# Exercises the routers and error handlers through FastAPI's TestClient.
# =============================================================================

from unittest.mock import patch

from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from app.config import Settings
from app.main import create_app
from app.routers.products import PRODUCTS_MESSAGE
from core.services.user_service import UserService


# =============================================================================
# Products
# =============================================================================

class TestProducts:
    """GET /api/products is a static placeholder."""

    def test_returns_static_message(self, client):
        response = client.get("/api/products")

        assert response.status_code == 200
        assert response.json() == {
            "message": "This is new feature change, a new route for products samin"
        }
        assert response.json()["message"] == PRODUCTS_MESSAGE


# =============================================================================
# Users
# =============================================================================

class TestUserRoutes:
    """CRUD over /api/users."""

    def test_create_and_get(self, client, sample_user_payload):
        created = client.post("/api/users", json=sample_user_payload)

        assert created.status_code == 201
        body = created.json()
        assert body["name"] == "erin"
        assert body["email"] == "erin@example.com"
        assert "createdAt" in body
        assert "updatedAt" in body

        fetched = client.get(f"/api/users/{body['id']}")
        assert fetched.status_code == 200
        assert fetched.json()["id"] == body["id"]

    def test_timestamps_match_between_write_and_read(self, client, sample_user_payload):
        # Arrange: Create a user and read it back
        created = client.post("/api/users", json=sample_user_payload).json()

        # Act
        fetched = client.get(f"/api/users/{created['id']}").json()

        # Assert: Same rendering on both paths
        assert fetched["createdAt"] == created["createdAt"]
        assert fetched["updatedAt"] == created["updatedAt"]

    def test_update_timestamp_matches_read(self, client, sample_user_payload):
        user_id = client.post("/api/users", json=sample_user_payload).json()["id"]

        updated = client.put(f"/api/users/{user_id}", json={"name": "erin2"}).json()
        fetched = client.get(f"/api/users/{user_id}").json()

        assert fetched["updatedAt"] == updated["updatedAt"]
        assert fetched["createdAt"] == updated["createdAt"]

    def test_list_users(self, client):
        client.post("/api/users", json={"name": "a", "email": "a@example.com"})
        client.post("/api/users", json={"name": "b", "email": "b@example.com"})

        response = client.get("/api/users")

        assert response.status_code == 200
        assert {user["name"] for user in response.json()} == {"a", "b"}

    def test_create_missing_email(self, client):
        response = client.post("/api/users", json={"name": "erin"})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_ERROR"

    def test_create_duplicate(self, client, sample_user_payload):
        client.post("/api/users", json=sample_user_payload)

        response = client.post(
            "/api/users",
            json={"name": "erin", "email": "someone@example.com"},
        )

        assert response.status_code == 409
        assert response.json()["code"] == "DUPLICATE_KEY"
        users = client.get("/api/users").json()
        assert len(users) == 1
        assert users[0]["email"] == "erin@example.com"

    def test_update_user(self, client, sample_user_payload):
        user_id = client.post("/api/users", json=sample_user_payload).json()["id"]

        response = client.put(f"/api/users/{user_id}", json={"name": "erin2"})

        assert response.status_code == 200
        assert response.json()["name"] == "erin2"
        assert response.json()["email"] == "erin@example.com"

    def test_update_with_empty_body(self, client, sample_user_payload):
        user_id = client.post("/api/users", json=sample_user_payload).json()["id"]

        response = client.put(f"/api/users/{user_id}", json={})

        assert response.status_code == 422

    def test_delete_user(self, client, sample_user_payload):
        user_id = client.post("/api/users", json=sample_user_payload).json()["id"]

        response = client.delete(f"/api/users/{user_id}")

        assert response.status_code == 200
        assert response.json()["id"] == user_id
        assert client.get(f"/api/users/{user_id}").status_code == 404

    def test_missing_user(self, client):
        response = client.get(f"/api/users/{ObjectId()}")

        assert response.status_code == 404
        body = response.json()
        assert body["code"] == "USER_NOT_FOUND"
        assert "suggestion" in body

    def test_invalid_user_id(self, client):
        response = client.get("/api/users/not-an-id")

        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_USER_ID"


# =============================================================================
# Error handling
# =============================================================================

class TestUnhandledErrors:
    """Unexpected failures become a uniform 500."""

    def test_storage_failure_returns_500(self, mongo_store, test_settings):
        app = create_app(mongo_store, settings=test_settings)

        with patch.object(UserService, "list_users", side_effect=PyMongoError("socket closed")):
            with TestClient(app, raise_server_exceptions=False) as test_client:
                response = test_client.get("/api/users")

        assert response.status_code == 500
        assert response.json() == {
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }


# =============================================================================
# Health
# =============================================================================

class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_health_reports_app_settings(self, mongo_store):
        app = create_app(mongo_store, settings=Settings(_env_file=None, NODE_ENV="staging"))

        with TestClient(app) as test_client:
            response = test_client.get("/api/health")

        assert response.json()["environment"] == "staging"

    def test_readiness(self, client):
        response = client.get("/api/health/ready")

        assert response.status_code == 200
        assert response.json()["status"] == "ready"
