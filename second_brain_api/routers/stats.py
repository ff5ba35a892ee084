# File: /second_brain_api/routers/stats.py | Version: 1.0 | Title: Stats Router (dashboard totals, pipelines, habit streaks)
from __future__ import annotations

from datetime import date

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from second_brain_api.core.exceptions import NotFoundError
from second_brain_api.core.registry import ModuleConfigRegistry, ModuleType, get_registry
from second_brain_api.core.responses import ok
from second_brain_api.crud.records import count_records
from second_brain_api.db.session import get_db
from second_brain_api.models import User
from second_brain_api.routers.document_view import get_document_view_service
from second_brain_api.security import get_current_user
from second_brain_api.services.document_view import DocumentViewService
from second_brain_api.services.habits import completed_dates
from second_brain_api.services.stats import calculate_streak, count_by_property

router = APIRouter(prefix="/stats", tags=["Stats"])


@router.get("/dashboard")
def dashboard(
    db: Session = Depends(get_db),
    registry: ModuleConfigRegistry = Depends(get_registry),
    current_user: User = Depends(get_current_user),
):
    totals = {
        mt: count_records(db, user_id=current_user.id, module_type=mt)
        for mt in registry.get_module_types()
    }
    return ok("Dashboard stats retrieved successfully", {"totals": totals, "total": sum(totals.values())})


@router.get("/habits/streaks")
def habit_streaks(
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    page = svc.get_records(current_user.id, ModuleType.HABITS)
    today = date.today()
    streaks = []
    for habit in page["items"]:
        s = calculate_streak(completed_dates(habit), today)
        streaks.append(
            {"id": habit["id"], "name": habit.get("name"), "lastCompleted": habit.get("lastCompleted"), **s}
        )
    return ok("Habit streaks retrieved successfully", streaks)


@router.get("/{module_type}/pipeline")
def pipeline(
    module_type: str,
    group_by: str = Query(default="status", alias="groupBy"),
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    props = svc.list_properties(current_user.id, module_type)
    prop = next((p for p in props if p.id == group_by), None)
    if prop is None:
        raise NotFoundError(f"Property '{group_by}' not found")

    page = svc.get_records(current_user.id, module_type)
    counts = count_by_property(page["items"], group_by, prop.options)
    return ok(
        "Pipeline stats retrieved successfully",
        {"moduleType": module_type, "groupBy": group_by, "total": page["total"], "counts": counts},
    )
