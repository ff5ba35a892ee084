# File: /tests/test_document_view_api.py | Version: 1.0 | Title: /document-view/{module} HTTP surface
import json

from fastapi.testclient import TestClient

from conftest import register_user

BASE = "/document-view/tasks"


def test_routes_require_bearer_token(client: TestClient):
    r = client.get(f"{BASE}/config")
    assert r.status_code == 401
    body = r.json()
    assert body["success"] is False
    assert body["error"] == "TOKEN_MISSING"


def test_config_envelope_is_camel_case(client: TestClient, auth_headers):
    r = client.get(f"{BASE}/config", headers=auth_headers)
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["success"] is True
    data = body["data"]
    assert data["moduleType"] == "tasks"
    assert data["databaseId"] == "tasks-main-db"
    assert "requiredProperties" in data and "frozenProperties" in data
    assert data["views"][0]["visibleProperties"]


def test_database_id_query_param(client: TestClient, auth_headers):
    r = client.get(f"{BASE}/config?databaseId=side-db", headers=auth_headers)
    assert r.json()["data"]["databaseId"] == "side-db"


def test_database_scoped_view_routes(client: TestClient, auth_headers):
    side = f"{BASE}/databases/side-db/views"
    r = client.post(side, json={"name": "Side board", "type": "BOARD"}, headers=auth_headers)
    assert r.status_code == 201, r.text
    view_id = r.json()["data"]["id"]

    side_ids = [v["id"] for v in client.get(side, headers=auth_headers).json()["data"]]
    main_ids = [v["id"] for v in client.get(f"{BASE}/views", headers=auth_headers).json()["data"]]
    assert view_id in side_ids
    assert view_id not in main_ids

    r = client.get(f"{side}/{view_id}", headers=auth_headers)
    assert r.json()["data"]["name"] == "Side board"
    r = client.patch(f"{side}/{view_id}", json={"name": "Renamed"}, headers=auth_headers)
    assert r.status_code == 200, r.text
    assert r.json()["data"]["name"] == "Renamed"
    r = client.delete(f"{side}/{view_id}", headers=auth_headers)
    assert r.status_code == 200
    assert client.get(f"{side}/{view_id}", headers=auth_headers).status_code == 404


def test_unknown_module_is_400(client: TestClient, auth_headers):
    r = client.get("/document-view/spaceships/views", headers=auth_headers)
    assert r.status_code == 400
    assert r.json() == {
        "success": False,
        "message": "Module 'spaceships' is not registered",
        "error": "MODULE_NOT_REGISTERED",
    }


def test_frozen_config(client: TestClient, auth_headers):
    r = client.get(f"{BASE}/frozen-config", headers=auth_headers)
    assert r.status_code == 200
    rules = r.json()["data"]["frozenProperties"]
    assert {"propertyId", "allowEdit", "allowHide", "allowDelete"} <= set(rules[0])


def test_view_lifecycle(client: TestClient, auth_headers):
    r = client.get(f"{BASE}/views/default", headers=auth_headers)
    assert r.json()["data"]["id"] == "all-tasks"

    r = client.post(
        f"{BASE}/views",
        json={"name": "Mine", "type": "LIST", "filters": [{"propertyId": "status", "operator": "equals", "value": "completed"}]},
        headers=auth_headers,
    )
    assert r.status_code == 201, r.text
    view_id = r.json()["data"]["id"]

    r = client.patch(f"{BASE}/views/{view_id}", json={"name": "Renamed"}, headers=auth_headers)
    assert r.status_code == 200
    assert r.json()["data"]["name"] == "Renamed"
    assert r.json()["data"]["filters"][0]["propertyId"] == "status"

    r = client.put(f"{BASE}/views/{view_id}", json={"groupBy": "priority"}, headers=auth_headers)
    assert r.json()["data"]["groupBy"] == "priority"

    r = client.post(f"{BASE}/views/{view_id}/duplicate", json={"name": "Twin"}, headers=auth_headers)
    assert r.status_code == 201
    assert r.json()["data"]["name"] == "Twin"
    assert r.json()["data"]["isDefault"] is False

    r = client.post(f"{BASE}/views/all-tasks/duplicate", headers=auth_headers)
    assert r.status_code == 201
    assert r.json()["data"]["name"] == "All Tasks (Copy)"

    assert client.delete(f"{BASE}/views/{view_id}", headers=auth_headers).status_code == 200
    assert client.get(f"{BASE}/views/{view_id}", headers=auth_headers).status_code == 404


def test_protected_views_cannot_be_deleted(client: TestClient, auth_headers):
    r = client.delete(f"{BASE}/views/all-tasks", headers=auth_headers)
    assert r.status_code == 409
    assert r.json()["error"] == "INVARIANT_VIOLATION"
    r = client.delete(f"{BASE}/views/calendar-view", headers=auth_headers)
    assert r.status_code == 409
    assert "system view" in r.json()["message"]


def test_property_lifecycle(client: TestClient, auth_headers):
    r = client.post(f"{BASE}/properties", json={"name": "Effort", "type": "number"}, headers=auth_headers)
    assert r.status_code == 201, r.text
    prop = r.json()["data"]
    assert prop["width"] == 150 and prop["visible"] is True

    r = client.patch(f"{BASE}/properties/{prop['id']}", json={"width": 90}, headers=auth_headers)
    assert r.json()["data"]["width"] == 90
    assert r.json()["data"]["name"] == "Effort"

    r = client.get(f"{BASE}/properties", headers=auth_headers)
    assert prop["id"] in [p["id"] for p in r.json()["data"]]

    assert client.delete(f"{BASE}/properties/{prop['id']}", headers=auth_headers).status_code == 200
    assert client.delete(f"{BASE}/properties/{prop['id']}", headers=auth_headers).status_code == 404


def test_property_guards(client: TestClient, auth_headers):
    r = client.post(f"{BASE}/properties", json={"id": "title"}, headers=auth_headers)
    assert r.status_code == 409

    r = client.put(f"{BASE}/properties/status", json={"frozen": False}, headers=auth_headers)
    assert r.status_code == 409

    r = client.delete(f"{BASE}/properties/title", headers=auth_headers)
    assert r.status_code == 409
    assert r.json()["message"] == "Cannot remove required property 'title'"


def test_records_endpoints(client: TestClient, auth_headers):
    for title, status in [("b", "completed"), ("a", "in_progress"), ("c", "not_started")]:
        r = client.post(f"{BASE}/records", json={"title": title, "status": status}, headers=auth_headers)
        assert r.status_code == 201

    r = client.get(f"{BASE}/records?sortBy=title&sortOrder=desc&limit=2", headers=auth_headers)
    data = r.json()["data"]
    assert [i["title"] for i in data["items"]] == ["c", "b"]
    assert data["total"] == 3 and data["pages"] == 2 and data["limit"] == 2

    flt = json.dumps([{"propertyId": "status", "operator": "equals", "value": "completed"}])
    r = client.get(f"{BASE}/records", params={"filters": flt}, headers=auth_headers)
    assert [i["title"] for i in r.json()["data"]["items"]] == ["b"]

    r = client.get(f"{BASE}/records?viewId=active-tasks", headers=auth_headers)
    assert {i["title"] for i in r.json()["data"]["items"]} == {"a", "c"}

    record_id = r.json()["data"]["items"][0]["id"]
    r = client.put(f"{BASE}/records/{record_id}", json={"status": "completed"}, headers=auth_headers)
    assert r.json()["data"]["status"] == "completed"
    assert client.get(f"{BASE}/records/{record_id}", headers=auth_headers).status_code == 200
    assert client.delete(f"{BASE}/records/{record_id}", headers=auth_headers).status_code == 200
    assert client.get(f"{BASE}/records/{record_id}", headers=auth_headers).status_code == 404


def test_records_query_validation(client: TestClient, auth_headers):
    r = client.get(f"{BASE}/records", params={"filters": "{not json"}, headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["error"] == "BAD_REQUEST"

    r = client.get(f"{BASE}/records", params={"filters": json.dumps({"a": 1})}, headers=auth_headers)
    assert r.status_code == 400

    bad_op = json.dumps([{"propertyId": "status", "operator": "resembles", "value": "x"}])
    r = client.get(f"{BASE}/records", params={"filters": bad_op}, headers=auth_headers)
    assert r.status_code == 409

    r = client.get(f"{BASE}/records?limit=101", headers=auth_headers)
    assert r.status_code == 422
    assert r.json()["message"] == "Validation error"


def test_tenancy_between_users(client: TestClient, auth_headers):
    r = client.post(f"{BASE}/records", json={"title": "secret"}, headers=auth_headers)
    record_id = r.json()["data"]["id"]
    client.post(f"{BASE}/views", json={"name": "Private view"}, headers=auth_headers)

    other = register_user(client)
    other_headers = {"Authorization": f"Bearer {other['tokens']['accessToken']}"}
    assert client.get(f"{BASE}/records/{record_id}", headers=other_headers).status_code == 404
    names = [v["name"] for v in client.get(f"{BASE}/views", headers=other_headers).json()["data"]]
    assert "Private view" not in names
