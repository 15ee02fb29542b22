"""Integration tests for the auth endpoints via TestClient."""

from datetime import UTC, datetime, timedelta

from protean import current_domain
from storefront.identity.tokens import issue_token
from storefront.identity.user.user import User


def _register(client, **overrides):
    body = {"email": "ada@example.com", "password": "secret123", "firstName": "Ada", "lastName": "Lovelace"}
    body.update(overrides)
    return client.post("/auth/register", json=body)


class TestRegister:
    def test_register(self, client):
        response = _register(client)

        assert response.status_code == 201
        body = response.json()
        assert body["user"]["email"] == "ada@example.com"
        assert body["user"]["firstName"] == "Ada"
        assert "passwordHash" not in body["user"]
        assert body["token"]

    def test_duplicate(self, client):
        _register(client)
        response = _register(client, email="ADA@example.com")

        assert response.status_code == 400
        assert response.json()["errors"] == {"email": ["User already exists"]}

    def test_short_password(self, client):
        response = _register(client, password="123")
        assert response.status_code == 400

    def test_unknown_field_rejected(self, client):
        response = _register(client, isAdmin=True)

        assert response.status_code == 400
        assert response.json()["error"] == "ValidationError"


class TestLogin:
    def test_login(self, client):
        _register(client)

        response = client.post("/auth/login", json={"email": "ada@example.com", "password": "secret123"})

        assert response.status_code == 200
        assert response.json()["user"]["lastName"] == "Lovelace"

    def test_bad_password(self, client):
        _register(client)

        response = client.post("/auth/login", json={"email": "ada@example.com", "password": "nope-nope"})

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized", "message": "Invalid credentials"}


class TestMe:
    def test_me(self, client, auth_headers):
        response = client.get("/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["user"]["email"] == "shopper@example.com"

    def test_missing_token(self, client):
        response = client.get("/auth/me")

        assert response.status_code == 401
        assert response.json() == {"error": "Unauthorized", "message": "Access token required"}

    def test_expired_token(self, client, make_user):
        user = make_user()
        token, _ = issue_token(user.id, now=datetime.now(UTC) - timedelta(days=30))

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 401

    def test_deleted_user(self, client, make_user):
        user = make_user()
        token, _ = issue_token(user.id)
        current_domain.repository_for(User)._dao.delete(user)

        response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden"
