# File: /tests/test_record_delegation.py | Version: 1.0 | Title: Record service delegation + generic SQL record store
import uuid

import pytest

from second_brain_api.core.exceptions import (
    NotFoundError,
    OperationFailedError,
    ServiceUnavailableError,
)
from second_brain_api.module_configs import build_default_registry
from second_brain_api.schemas.document_view import ViewCreate, ViewFilter, ViewSort
from second_brain_api.services.document_view import DocumentViewService
from second_brain_api.services.record_service import RecordQueryOptions, build_record_services


@pytest.fixture()
def registry():
    return build_default_registry()


@pytest.fixture()
def svc(db_session, registry):
    return DocumentViewService(db_session, registry, build_record_services(registry))


@pytest.fixture()
def uid():
    return str(uuid.uuid4())


def _seed_tasks(svc, uid):
    for title, status, priority in [
        ("Write report", "in_progress", "high"),
        ("Buy milk", "completed", "low"),
        ("Call bank", "not_started", "urgent"),
        ("Plan trip", "cancelled", "medium"),
    ]:
        svc.create_record(uid, "tasks", {"title": title, "status": status, "priority": priority})


def test_record_crud_roundtrip(svc, uid):
    created = svc.create_record(uid, "tasks", {"title": "First", "status": "not_started"})
    assert created["title"] == "First"
    assert created["databaseId"] == "tasks-main-db"
    assert created["createdBy"] == uid

    fetched = svc.get_record(uid, "tasks", created["id"])
    assert fetched["status"] == "not_started"

    updated = svc.update_record(uid, "tasks", created["id"], {"status": "completed", "id": "hijack"})
    assert updated["status"] == "completed"
    assert updated["title"] == "First"
    assert updated["id"] == created["id"]

    assert svc.delete_record(uid, "tasks", created["id"]) is True
    with pytest.raises(NotFoundError):
        svc.get_record(uid, "tasks", created["id"])


def test_records_are_scoped_by_user_and_module(svc, uid):
    rec = svc.create_record(uid, "notes", {"title": "Private"})
    with pytest.raises(NotFoundError):
        svc.get_record(str(uuid.uuid4()), "notes", rec["id"])
    with pytest.raises(NotFoundError):
        svc.get_record(uid, "books", rec["id"])
    assert svc.get_records(str(uuid.uuid4()), "notes")["total"] == 0


def test_records_filter_sort_search_and_paginate(svc, uid):
    _seed_tasks(svc, uid)
    page = svc.get_records(
        uid,
        "tasks",
        RecordQueryOptions(
            filters=[ViewFilter(property_id="status", operator="not_equals", value="cancelled")],
            sorts=[ViewSort(property_id="title")],
            page=1,
            limit=2,
        ),
    )
    assert page["total"] == 3
    assert page["pages"] == 2
    assert [r["title"] for r in page["items"]] == ["Buy milk", "Call bank"]

    found = svc.get_records(uid, "tasks", RecordQueryOptions(search="REPORT"))
    assert [r["title"] for r in found["items"]] == ["Write report"]


def test_view_id_supplies_filters_and_sorts(svc, uid):
    _seed_tasks(svc, uid)
    page = svc.get_records(uid, "tasks", RecordQueryOptions(view_id="active-tasks"))
    titles = {r["title"] for r in page["items"]}
    assert titles == {"Write report", "Call bank"}

    # caller-supplied filters win over the view's
    page = svc.get_records(
        uid,
        "tasks",
        RecordQueryOptions(
            view_id="active-tasks",
            filters=[ViewFilter(property_id="status", operator="equals", value="completed")],
        ),
    )
    assert [r["title"] for r in page["items"]] == ["Buy milk"]


def test_disabled_view_filters_are_ignored(svc, uid):
    _seed_tasks(svc, uid)
    view = svc.create_view(
        uid,
        "tasks",
        ViewCreate(
            name="Off",
            filters=[ViewFilter(property_id="status", operator="equals", value="x", enabled=False)],
        ),
    )
    assert svc.get_records(uid, "tasks", RecordQueryOptions(view_id=view.id))["total"] == 4


def test_database_id_partitions_records(svc, uid):
    svc.create_record(uid, "databases", {"name": "main"})
    svc.create_record(uid, "databases", {"name": "side"}, database_id="side-db")
    main = svc.get_records(uid, "databases")
    side = svc.get_records(uid, "databases", database_id="side-db")
    assert [r["name"] for r in main["items"]] == ["main"]
    assert [r["name"] for r in side["items"]] == ["side"]


def test_missing_record_service_is_unavailable(db_session, registry, uid):
    svc = DocumentViewService(db_session, registry, {})
    with pytest.raises(ServiceUnavailableError) as exc:
        svc.get_records(uid, "tasks")
    assert exc.value.message == "Record service for tasks does not implement get_records"


def test_record_service_missing_operation_is_unavailable(db_session, registry, uid):
    class ReadOnly:
        def get_records(self, db, user_id, options):
            return {"items": [], "total": 0, "page": 1, "limit": 0, "pages": 0}

    svc = DocumentViewService(db_session, registry, {"sql:tasks": ReadOnly()})
    assert svc.get_records(uid, "tasks")["total"] == 0
    with pytest.raises(ServiceUnavailableError) as exc:
        svc.delete_record(uid, "tasks", "r1")
    assert "delete_record" in exc.value.message


def test_unexpected_failures_are_wrapped(db_session, registry, uid, caplog):
    class Broken:
        def get_record(self, db, user_id, record_id):
            raise RuntimeError("disk on fire")

        def delete_record(self, db, user_id, record_id):
            raise NotFoundError("Record not found")

    svc = DocumentViewService(db_session, registry, {"sql:goals": Broken()})
    with pytest.raises(OperationFailedError) as exc:
        svc.get_record(uid, "goals", "r1")
    assert "goals" in exc.value.message and "disk on fire" in exc.value.message
    assert any(getattr(r, "module_type", None) == "goals" for r in caplog.records)

    # application errors pass through untouched
    with pytest.raises(NotFoundError):
        svc.delete_record(uid, "goals", "r1")
