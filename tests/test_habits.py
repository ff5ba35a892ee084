# File: /tests/test_habits.py | Version: 1.0 | Title: Habit check-ins keep streak properties current
import uuid
from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from second_brain_api.core.exceptions import NotFoundError
from second_brain_api.module_configs import build_default_registry
from second_brain_api.services.document_view import DocumentViewService
from second_brain_api.services.habits import HabitTracker, streak_fields
from second_brain_api.services.record_service import build_record_services

TODAY = date(2025, 3, 15)


@pytest.fixture()
def svc(db_session):
    registry = build_default_registry()
    return DocumentViewService(db_session, registry, build_record_services(registry))


@pytest.fixture()
def uid():
    return str(uuid.uuid4())


def _habit(svc, uid):
    return svc.create_record(uid, "habits", {"name": "Meditate", "frequency": "daily", "status": "active"})


def test_check_ins_store_streak_fields(svc, uid):
    tracker = HabitTracker(svc)
    habit = _habit(svc, uid)

    for n in (2, 1, 0):
        tracker.mark_completed(uid, habit["id"], TODAY - timedelta(days=n), today=TODAY)

    stored = svc.get_record(uid, "habits", habit["id"])
    assert stored["currentStreak"] == 3
    assert stored["longestStreak"] == 3
    assert stored["lastCompleted"] == TODAY.isoformat()
    assert [e["date"] for e in stored["completionHistory"]] == [
        (TODAY - timedelta(days=n)).isoformat() for n in (2, 1, 0)
    ]


def test_uncheck_breaks_current_streak_but_keeps_longest(svc, uid):
    tracker = HabitTracker(svc)
    habit = _habit(svc, uid)
    for n in (3, 2, 1, 0):
        tracker.mark_completed(uid, habit["id"], TODAY - timedelta(days=n), today=TODAY)

    tracker.mark_incomplete(uid, habit["id"], TODAY - timedelta(days=1), today=TODAY)

    stored = svc.get_record(uid, "habits", habit["id"])
    assert stored["currentStreak"] == 1
    assert stored["longestStreak"] == 4
    assert len(stored["completionHistory"]) == 3


def test_repeat_check_in_replaces_entry(svc, uid):
    tracker = HabitTracker(svc)
    habit = _habit(svc, uid)
    tracker.mark_completed(uid, habit["id"], TODAY, value=1, today=TODAY)
    tracker.mark_completed(uid, habit["id"], TODAY, value=5, notes="long session", today=TODAY)

    history = tracker.history(uid, habit["id"])
    assert history == [{"date": TODAY.isoformat(), "completed": True, "value": 5, "notes": "long session"}]


def test_history_range_and_missing_habit(svc, uid):
    tracker = HabitTracker(svc)
    habit = _habit(svc, uid)
    for n in (10, 5, 0):
        tracker.mark_completed(uid, habit["id"], TODAY - timedelta(days=n), today=TODAY)

    recent = tracker.history(uid, habit["id"], start=TODAY - timedelta(days=6))
    assert [e["date"] for e in recent] == [(TODAY - timedelta(days=5)).isoformat(), TODAY.isoformat()]

    with pytest.raises(NotFoundError):
        tracker.mark_completed(uid, "missing", TODAY)


def test_streak_fields_empty_history():
    assert streak_fields([], previous_longest=7, today=TODAY) == {
        "currentStreak": 0,
        "longestStreak": 7,
        "lastCompleted": None,
    }


def test_habit_check_in_endpoints(client: TestClient, auth_headers):
    habit = client.post(
        "/document-view/habits/records", json={"name": "Stretch"}, headers=auth_headers
    ).json()["data"]
    today = date.today()

    r = client.post(f"/habits/{habit['id']}/complete", json={"date": today.isoformat()}, headers=auth_headers)
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["currentStreak"] == 1
    assert data["lastCompleted"] == today.isoformat()

    r = client.get(f"/habits/{habit['id']}/history", headers=auth_headers)
    assert r.status_code == 200
    assert len(r.json()["data"]) == 1

    r = client.post(f"/habits/{habit['id']}/incomplete", json={"date": today.isoformat()}, headers=auth_headers)
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["currentStreak"] == 0
    assert data["longestStreak"] == 1
    assert data["lastCompleted"] is None

    r = client.post("/habits/nope/complete", headers=auth_headers)
    assert r.status_code == 404
    assert r.json()["success"] is False
