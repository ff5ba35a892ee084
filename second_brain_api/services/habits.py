# File: /second_brain_api/services/habits.py | Version: 1.0 | Title: Habit check-ins (completion history + stored streak fields)
from __future__ import annotations

import logging
from datetime import date
from typing import Any, Dict, List, Optional

from second_brain_api.core.registry import ModuleType
from second_brain_api.services.document_view import DocumentViewService
from second_brain_api.services.stats import calculate_streak

logger = logging.getLogger(__name__)

HISTORY_KEY = "completionHistory"


def completion_history(habit: Dict[str, Any]) -> List[Dict[str, Any]]:
    history = habit.get(HISTORY_KEY)
    if not isinstance(history, list):
        return []
    return [e for e in history if isinstance(e, dict) and e.get("date")]


def completed_dates(habit: Dict[str, Any]) -> List[str]:
    return [e["date"] for e in completion_history(habit) if e.get("completed", True)]


def streak_fields(
    history: List[Dict[str, Any]], previous_longest: Any = 0, today: Optional[date] = None
) -> Dict[str, Any]:
    """currentStreak / longestStreak / lastCompleted derived from a completion history."""
    dates = [e["date"] for e in history if e.get("completed", True)]
    streak = calculate_streak(dates, today)
    try:
        longest = int(previous_longest or 0)
    except (TypeError, ValueError):
        longest = 0
    return {
        "currentStreak": streak["current"],
        "longestStreak": max(longest, streak["best"]),
        "lastCompleted": max(dates) if dates else None,
    }


class HabitTracker:
    """
    Check-ins for habit records. Each check-in rewrites the habit's
    completion history and its system-calculated streak properties in one
    record update, through the habits record service.
    """

    def __init__(self, documents: DocumentViewService) -> None:
        self.documents = documents

    def _save(
        self, user_id: str, habit: Dict[str, Any], history: List[Dict[str, Any]], today: Optional[date]
    ) -> Dict[str, Any]:
        history = sorted(history, key=lambda e: e["date"])
        changes = {HISTORY_KEY: history, **streak_fields(history, habit.get("longestStreak"), today)}
        return self.documents.update_record(user_id, ModuleType.HABITS, habit["id"], changes)

    def mark_completed(
        self,
        user_id: str,
        habit_id: str,
        day: date,
        value: Optional[float] = None,
        notes: Optional[str] = None,
        today: Optional[date] = None,
    ) -> Dict[str, Any]:
        habit = self.documents.get_record(user_id, ModuleType.HABITS, habit_id)
        key = day.isoformat()
        entry: Dict[str, Any] = {"date": key, "completed": True}
        if value is not None:
            entry["value"] = value
        if notes:
            entry["notes"] = notes
        # one entry per day; a repeat check-in replaces the earlier one
        history = [e for e in completion_history(habit) if e["date"] != key] + [entry]
        logger.info("Habit completed", extra={"user_id": user_id, "operation": "habit_complete"})
        return self._save(user_id, habit, history, today)

    def mark_incomplete(
        self, user_id: str, habit_id: str, day: date, today: Optional[date] = None
    ) -> Dict[str, Any]:
        habit = self.documents.get_record(user_id, ModuleType.HABITS, habit_id)
        key = day.isoformat()
        history = [e for e in completion_history(habit) if e["date"] != key]
        logger.info("Habit marked incomplete", extra={"user_id": user_id, "operation": "habit_incomplete"})
        return self._save(user_id, habit, history, today)

    def history(
        self,
        user_id: str,
        habit_id: str,
        start: Optional[date] = None,
        end: Optional[date] = None,
    ) -> List[Dict[str, Any]]:
        habit = self.documents.get_record(user_id, ModuleType.HABITS, habit_id)
        entries = completion_history(habit)
        if start:
            entries = [e for e in entries if e["date"] >= start.isoformat()]
        if end:
            entries = [e for e in entries if e["date"] <= end.isoformat()]
        return entries
