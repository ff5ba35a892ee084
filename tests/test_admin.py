# File: /tests/test_admin.py | Version: 1.0 | Title: Admin router (role guard, stats, user listing, initial setup)
import pytest
from fastapi.testclient import TestClient

from second_brain_api.core.config import settings
from second_brain_api.core.permissions import Role, has_min_role, normalize_role
from second_brain_api.crud import users as crud_users
from second_brain_api.models import User
from conftest import PASSWORD, register_user


def _headers(data):
    return {"Authorization": f"Bearer {data['tokens']['accessToken']}"}


def _admin_headers(client, db_session, role=Role.ADMIN, email=None):
    data = register_user(client, email=email)
    user = crud_users.get_user(db_session, data["user"]["id"])
    crud_users.set_role(db_session, user, role.value)
    return _headers(data)


def _setup_body(**overrides):
    body = {"email": "root@example.com", "username": "root_admin", "password": PASSWORD}
    body.update(overrides)
    return body


def test_role_ranking():
    assert normalize_role(" Admin ") is Role.ADMIN
    assert normalize_role("owner") is None
    assert has_min_role(User(role="super_admin"), Role.ADMIN)
    assert not has_min_role(User(role="moderator"), Role.ADMIN)
    assert not has_min_role(User(role="bogus"), Role.USER)


def test_admin_routes_require_admin_role(client: TestClient, auth_headers):
    for path in ("/admin/dashboard", "/admin/users", "/admin/users/stats"):
        r = client.get(path, headers=auth_headers)
        assert r.status_code == 403, path
        assert r.json()["error"] == "FORBIDDEN"

    r = client.get("/admin/users")
    assert r.status_code == 401
    assert r.json()["error"] == "TOKEN_MISSING"


def test_user_stats_and_dashboard(client: TestClient, db_session):
    register_user(client)
    register_user(client)
    headers = _admin_headers(client, db_session)

    r = client.get("/admin/users/stats", headers=headers)
    assert r.status_code == 200, r.text
    stats = r.json()["data"]
    assert stats["total"] == 3
    assert stats["active"] == 3
    assert stats["admins"] == 1
    assert stats["users"] == 2
    assert stats["superAdmins"] == 0

    client.get("/document-view/tasks/config", headers=headers)
    client.post("/document-view/tasks/records", json={"title": "x"}, headers=headers)
    r = client.get("/admin/dashboard", headers=headers)
    assert r.status_code == 200, r.text
    dash = r.json()["data"]
    assert dash["totalUsers"] == 3
    assert dash["recentSignups"] == 3
    assert dash["totalRecords"] == 1
    assert dash["totalDocumentViews"] == 1


def test_list_users_filters_and_pages(client: TestClient, db_session):
    for i in range(3):
        register_user(client, email=f"member{i}@example.com")
    headers = _admin_headers(client, db_session, role=Role.SUPER_ADMIN, email="boss@example.com")

    r = client.get("/admin/users?limit=2", headers=headers)
    assert r.status_code == 200, r.text
    page = r.json()["data"]
    assert page["total"] == 4
    assert len(page["users"]) == 2
    assert page["pages"] == 2
    assert page["hasNext"] is True
    assert "hashedPassword" not in page["users"][0]

    r = client.get("/admin/users?search=MEMBER1", headers=headers)
    assert [u["email"] for u in r.json()["data"]["users"]] == ["member1@example.com"]

    r = client.get("/admin/users?role=super_admin", headers=headers)
    assert [u["email"] for u in r.json()["data"]["users"]] == ["boss@example.com"]

    r = client.get("/admin/users?role=owner", headers=headers)
    assert r.status_code == 422


def test_initial_setup_runs_once(client: TestClient):
    r = client.get("/admin/setup-status")
    assert r.json()["data"] == {"setupNeeded": True}

    r = client.post("/admin/setup", json=_setup_body(fullName="Root"))
    assert r.status_code == 201, r.text
    assert r.json()["data"]["role"] == "super_admin"

    r = client.get("/admin/setup-status")
    assert r.json()["data"] == {"setupNeeded": False}

    r = client.post("/admin/setup", json=_setup_body(email="other@example.com", username="other"))
    assert r.status_code == 409

    r = client.post("/auth/login", json={"email": "root@example.com", "password": PASSWORD})
    assert r.status_code == 200
    token = r.json()["data"]["tokens"]["accessToken"]
    r = client.get("/admin/users/stats", headers={"Authorization": f"Bearer {token}"})
    assert r.status_code == 200
    assert r.json()["data"]["superAdmins"] == 1


def test_initial_setup_validates_input(client: TestClient):
    r = client.post("/admin/setup", json=_setup_body(password="weak"))
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_PASSWORD_FORMAT"

    r = client.post("/admin/setup", json=_setup_body(username="x"))
    assert r.status_code == 400
    assert r.json()["error"] == "INVALID_USERNAME_FORMAT"


def test_initial_setup_checks_configured_token(client: TestClient, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "INITIAL_SETUP_TOKEN", "let-me-in")

    r = client.post("/admin/setup", json=_setup_body())
    assert r.status_code == 403

    r = client.post("/admin/setup", json=_setup_body(setupToken="wrong"))
    assert r.status_code == 403

    r = client.post("/admin/setup", json=_setup_body(setupToken="let-me-in"))
    assert r.status_code == 201, r.text
