# File: /second_brain_api/routers/habits.py | Version: 1.0 | Title: Habit check-in router (complete / incomplete / history)
from __future__ import annotations

from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, Query

from second_brain_api.core.responses import ok
from second_brain_api.models import User
from second_brain_api.routers.document_view import get_document_view_service
from second_brain_api.schemas.habits import HabitCheckIn, HabitUncheck
from second_brain_api.security import get_current_user
from second_brain_api.services.document_view import DocumentViewService
from second_brain_api.services.habits import HabitTracker

router = APIRouter(prefix="/habits", tags=["Habits"])


def get_habit_tracker(svc: DocumentViewService = Depends(get_document_view_service)) -> HabitTracker:
    return HabitTracker(svc)


@router.post("/{habit_id}/complete")
def complete_habit(
    habit_id: str,
    body: Optional[HabitCheckIn] = None,
    tracker: HabitTracker = Depends(get_habit_tracker),
    current_user: User = Depends(get_current_user),
):
    body = body or HabitCheckIn()
    habit = tracker.mark_completed(
        current_user.id, habit_id, body.date or date.today(), value=body.value, notes=body.notes
    )
    return ok("Habit marked as completed", habit)


@router.post("/{habit_id}/incomplete")
def uncomplete_habit(
    habit_id: str,
    body: Optional[HabitUncheck] = None,
    tracker: HabitTracker = Depends(get_habit_tracker),
    current_user: User = Depends(get_current_user),
):
    day = (body.date if body else None) or date.today()
    habit = tracker.mark_incomplete(current_user.id, habit_id, day)
    return ok("Habit marked as incomplete", habit)


@router.get("/{habit_id}/history")
def habit_history(
    habit_id: str,
    start_date: Optional[date] = Query(default=None, alias="startDate"),
    end_date: Optional[date] = Query(default=None, alias="endDate"),
    tracker: HabitTracker = Depends(get_habit_tracker),
    current_user: User = Depends(get_current_user),
):
    entries = tracker.history(current_user.id, habit_id, start_date, end_date)
    return ok("Habit history retrieved successfully", entries)
