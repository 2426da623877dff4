# backend/tests/integration/test_auth.py
from datetime import timedelta

from gmassist.utils.security import create_access_token


def test_register_user(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "testuser", "password": "testpassword123"},
    )

    assert response.status_code == 201
    data = response.json()
    assert data["username"] == "testuser"
    assert data["isActive"] is True
    assert "id" in data
    assert "password" not in data
    assert "hashedPassword" not in data


def test_register_duplicate_username(client):
    client.post(
        "/api/auth/register",
        json={"username": "testuser", "password": "testpassword123"},
    )

    response = client.post(
        "/api/auth/register",
        json={"username": "testuser", "password": "otherpassword"},
    )

    assert response.status_code == 400
    assert response.json()["message"] == "Username already registered"


def test_register_rejects_short_password(client):
    response = client.post(
        "/api/auth/register",
        json={"username": "testuser", "password": "123"},
    )

    assert response.status_code == 422
    fields = [e["field"] for e in response.json()["errors"]]
    assert "password" in fields


def test_login_success(client):
    client.post(
        "/api/auth/register",
        json={"username": "testuser", "password": "testpassword123"},
    )

    response = client.post(
        "/api/auth/login",
        json={"username": "testuser", "password": "testpassword123"},
    )

    assert response.status_code == 200
    data = response.json()
    assert "access_token" in data
    assert data["token_type"] == "bearer"


def test_login_wrong_password(client):
    client.post(
        "/api/auth/register",
        json={"username": "testuser", "password": "testpassword123"},
    )

    response = client.post(
        "/api/auth/login",
        json={"username": "testuser", "password": "wrongpassword"},
    )

    assert response.status_code == 401
    assert response.json()["error"] == "unauthorized"


def test_get_current_user(client, auth_headers):
    response = client.get("/api/auth/me", headers=auth_headers)

    assert response.status_code == 200
    assert response.json()["username"] == "gamemaster"


def test_get_current_user_without_token(client):
    response = client.get("/api/auth/me")

    # Older FastAPI releases answer 403 for a missing bearer token
    assert response.status_code in (401, 403)


def test_expired_token_is_rejected(client, auth_headers):
    me = client.get("/api/auth/me", headers=auth_headers).json()
    token = create_access_token(me["id"], expires_delta=timedelta(minutes=-1))

    response = client.get("/api/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid or expired token"
