# File: /tests/test_stats.py | Version: 1.0 | Title: Pipeline counts, streaks and /stats endpoints
from datetime import date, timedelta

from fastapi.testclient import TestClient

from second_brain_api.schemas.document_view import PropertyOption
from second_brain_api.services.stats import NO_VALUE, calculate_streak, count_by_property

TODAY = date(2025, 3, 15)


def _days_ago(*offsets):
    return [(TODAY - timedelta(days=n)).isoformat() for n in offsets]


def test_count_by_property_zero_fills_declared_options():
    opts = [PropertyOption(name="To do", value="todo"), PropertyOption(name="Done", value="done")]
    records = [{"status": "done"}, {"status": "done"}, {"status": "blocked"}, {}]
    counts = count_by_property(records, "status", opts)
    assert counts == {"todo": 0, "done": 2, "blocked": 1, NO_VALUE: 1}
    assert list(counts)[:2] == ["todo", "done"]


def test_count_by_property_spreads_multi_values():
    counts = count_by_property([{"tags": ["a", "b"]}, {"tags": ["a"]}, {"tags": []}], "tags")
    assert counts == {"a": 2, "b": 1, NO_VALUE: 1}


def test_streak_current_ends_today_or_yesterday():
    assert calculate_streak(_days_ago(0, 1, 2), TODAY) == {"current": 3, "best": 3}
    assert calculate_streak(_days_ago(1, 2), TODAY) == {"current": 2, "best": 2}
    assert calculate_streak(_days_ago(2, 3, 4, 5), TODAY) == {"current": 0, "best": 4}


def test_streak_best_run_and_noise():
    dates = _days_ago(0, 5, 6, 7, 8) + ["not-a-date", None, _days_ago(0)[0]]
    assert calculate_streak(dates, TODAY) == {"current": 1, "best": 4}
    assert calculate_streak([], TODAY) == {"current": 0, "best": 0}
    # future completions are ignored
    assert calculate_streak([(TODAY + timedelta(days=1)).isoformat()], TODAY)["best"] == 0


def test_stats_endpoints(client: TestClient, auth_headers):
    for status in ("completed", "completed", "in_progress"):
        r = client.post(
            "/document-view/tasks/records",
            json={"title": f"t-{status}", "status": status},
            headers=auth_headers,
        )
        assert r.status_code == 201, r.text
    today = date.today()
    habit = client.post(
        "/document-view/habits/records", json={"name": "Read"}, headers=auth_headers
    ).json()["data"]
    for day in (today, today - timedelta(days=1)):
        r = client.post(
            f"/habits/{habit['id']}/complete", json={"date": day.isoformat()}, headers=auth_headers
        )
        assert r.status_code == 200, r.text

    r = client.get("/stats/dashboard", headers=auth_headers)
    assert r.status_code == 200, r.text
    data = r.json()["data"]
    assert data["totals"]["tasks"] == 3
    assert data["totals"]["habits"] == 1
    assert data["total"] == 4

    r = client.get("/stats/tasks/pipeline", headers=auth_headers)
    assert r.status_code == 200, r.text
    counts = r.json()["data"]["counts"]
    assert counts["completed"] == 2
    assert counts["in_progress"] == 1
    assert counts["not_started"] == 0

    r = client.get("/stats/tasks/pipeline?groupBy=nope", headers=auth_headers)
    assert r.status_code == 404

    r = client.get("/stats/habits/streaks", headers=auth_headers)
    assert r.status_code == 200, r.text
    streaks = r.json()["data"]
    assert streaks[0]["name"] == "Read"
    assert streaks[0]["current"] == 2


def test_stats_unknown_module_is_400(client: TestClient, auth_headers):
    r = client.get("/stats/spaceships/pipeline", headers=auth_headers)
    assert r.status_code == 400
    assert r.json()["error"] == "MODULE_NOT_REGISTERED"
