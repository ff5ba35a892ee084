# File: /second_brain_api/services/stats.py | Version: 1.0 | Title: Derived statistics over generic records (pipelines, streaks)
from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Any, Dict, Iterable, List, Optional, Sequence

from second_brain_api.schemas.document_view import PropertyOption

NO_VALUE = "No Value"


def _bucket(value: Any) -> str:
    if value is None or value == "":
        return NO_VALUE
    return str(value)


def count_by_property(
    records: Iterable[Dict[str, Any]],
    property_id: str,
    options: Optional[Sequence[PropertyOption]] = None,
) -> Dict[str, int]:
    """
    Count records per value of `property_id`.

    Every declared option appears (zero-filled) in declaration order, followed
    by values found on records but not declared, then "No Value".
    """
    counts: Dict[str, int] = {}
    for opt in options or []:
        counts[str(opt.value if opt.value is not None else opt.name)] = 0

    missing = 0
    for rec in records:
        raw = rec.get(property_id)
        values = raw if isinstance(raw, list) else [raw]
        if not values:
            values = [None]
        for v in values:
            key = _bucket(v)
            if key == NO_VALUE:
                missing += 1
            else:
                counts[key] = counts.get(key, 0) + 1

    counts[NO_VALUE] = missing
    return counts


def _as_date(value: Any) -> Optional[date]:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        try:
            return date.fromisoformat(value[:10])
        except ValueError:
            return None
    return None


def calculate_streak(dates: Iterable[Any], today: Optional[date] = None) -> Dict[str, int]:
    """Current and best run of consecutive completion days; the current run may end today or yesterday."""
    today = today or date.today()
    days: List[date] = sorted({d for d in (_as_date(x) for x in dates) if d is not None and d <= today})
    if not days:
        return {"current": 0, "best": 0}

    best = run = 1
    for prev, cur in zip(days, days[1:]):
        run = run + 1 if cur - prev == timedelta(days=1) else 1
        best = max(best, run)

    current = 0
    if days[-1] >= today - timedelta(days=1):
        current = 1
        for prev, cur in zip(reversed(days[:-1]), reversed(days[1:])):
            if cur - prev != timedelta(days=1):
                break
            current += 1

    return {"current": current, "best": best}
