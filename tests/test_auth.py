# File: tests/test_auth.py | Version: 2.0 | Path: /tests/test_auth.py
from fastapi.testclient import TestClient

from second_brain_api.crud import users as crud_users

PASSWORD = "Passw0rd!"


def test_register_and_login(client: TestClient):
    reg = client.post("/auth/register", json={"email": "Test@Example.com", "password": PASSWORD})
    assert reg.status_code == 201, reg.text
    body = reg.json()
    assert body["success"] is True
    assert body["data"]["user"]["email"] == "test@example.com"
    assert body["data"]["user"]["authProvider"] == "local"
    assert body["data"]["tokens"]["tokenType"] == "bearer"

    login = client.post(
        "/auth/login",
        data={"username": "test@example.com", "password": PASSWORD},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert login.status_code == 200, login.text
    data = login.json()["data"]
    assert data["tokens"]["accessToken"]
    assert data["tokens"]["refreshToken"]
    assert data["user"]["lastLoginAt"] is not None


def test_register_with_username_and_full_name(client: TestClient):
    r = client.post(
        "/auth/register",
        json={"email": "named@example.com", "username": "named_user", "fullName": "Named", "password": PASSWORD},
    )
    assert r.status_code == 201, r.text
    user = r.json()["data"]["user"]
    assert user["username"] == "named_user"
    assert user["fullName"] == "Named"

    r = client.post(
        "/auth/register",
        json={"email": "other@example.com", "username": "named_user", "password": PASSWORD},
    )
    assert r.status_code == 409
    assert r.json()["error"] == "USERNAME_ALREADY_EXISTS"


def test_register_rejects_duplicates_and_bad_formats(client: TestClient):
    assert client.post("/auth/register", json={"email": "dup@example.com", "password": PASSWORD}).status_code == 201

    r = client.post("/auth/register", json={"email": "dup@example.com", "password": PASSWORD})
    assert r.status_code == 409
    assert r.json()["error"] == "EMAIL_ALREADY_EXISTS"

    r = client.post("/auth/register", json={"email": "not-an-email", "password": PASSWORD})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_EMAIL_FORMAT"

    r = client.post("/auth/register", json={"email": "weak@example.com", "password": "password"})
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_PASSWORD_FORMAT"

    r = client.post(
        "/auth/register", json={"email": "u@example.com", "username": "x!", "password": PASSWORD}
    )
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_USERNAME_FORMAT"

    r = client.post("/auth/register", json={"email": "missing@example.com"})
    assert r.status_code == 422


def test_login_failures(client: TestClient, db_session):
    client.post("/auth/register", json={"email": "login@example.com", "password": PASSWORD})

    r = client.post("/auth/login", json={"email": "login@example.com", "password": "Wrong0!pass"})
    assert r.status_code == 401
    assert r.json()["error"] == "INVALID_CREDENTIALS"

    r = client.post("/auth/login", json={"email": "nobody@example.com", "password": PASSWORD})
    assert r.status_code == 401
    assert r.json()["message"] == "Invalid email or password"

    user = crud_users.get_user_by_email(db_session, "login@example.com")
    user.is_active = False
    db_session.commit()
    r = client.post("/auth/login", json={"email": "login@example.com", "password": PASSWORD})
    assert r.status_code == 401
    assert r.json()["error"] == "ACCOUNT_DEACTIVATED"


def test_oauth_only_account_cannot_use_password_login(client: TestClient, db_session):
    crud_users.create_or_update_google_user(
        db_session, {"id": "g-123", "email": "google@example.com", "name": "G User"}
    )
    r = client.post("/auth/login", json={"email": "google@example.com", "password": PASSWORD})
    assert r.status_code == 401
    assert r.json()["error"] == "OAUTH_ACCOUNT"


def test_token_endpoint_returns_bare_pair(client: TestClient):
    client.post("/auth/register", json={"email": "form@example.com", "password": PASSWORD})
    r = client.post("/auth/token", data={"username": "form@example.com", "password": PASSWORD})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["token_type"] == "bearer"
    assert body["access_token"] and body["refresh_token"]
    assert "success" not in body

    r = client.post("/auth/token", data={"username": "form@example.com", "password": "nope"})
    assert r.status_code == 401
