# File: /second_brain_api/routers/admin.py | Version: 1.0 | Title: Admin Router (role-gated stats + user listing, first super-admin setup)
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from second_brain_api.core.permissions import Role, require_role
from second_brain_api.core.responses import ok
from second_brain_api.db.session import get_db
from second_brain_api.models import User
from second_brain_api.schemas.admin import SuperAdminSetup
from second_brain_api.schemas.user import UserOut
from second_brain_api.services import admin as admin_service

router = APIRouter(prefix="/admin", tags=["Admin"])
logger = logging.getLogger(__name__)


# ---------------------------
# Initial setup (no auth; closes once a super admin exists)
# ---------------------------


@router.get("/setup-status")
def setup_status(db: Session = Depends(get_db)):
    return ok("Setup status retrieved successfully", {"setupNeeded": admin_service.setup_needed(db)})


@router.post("/setup", status_code=status.HTTP_201_CREATED)
def initial_setup(body: SuperAdminSetup, db: Session = Depends(get_db)):
    user = admin_service.create_initial_super_admin(db, body)
    return ok("Super admin created successfully", UserOut.model_validate(user))


# ---------------------------
# Admin+
# ---------------------------


@router.get("/dashboard")
def dashboard(
    db: Session = Depends(get_db),
    admin: User = Depends(require_role(Role.ADMIN)),
):
    return ok("Admin dashboard stats retrieved successfully", admin_service.dashboard_stats(db))


@router.get("/users/stats")
def user_stats(
    db: Session = Depends(get_db),
    admin: User = Depends(require_role(Role.ADMIN)),
):
    return ok("User statistics retrieved successfully", admin_service.user_stats(db))


@router.get("/users")
def list_users(
    role: Optional[Role] = None,
    is_active: Optional[bool] = Query(default=None, alias="isActive"),
    search: Optional[str] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    db: Session = Depends(get_db),
    admin: User = Depends(require_role(Role.ADMIN)),
):
    logger.info("Admin listed users", extra={"user_id": admin.id, "operation": "admin_list_users"})
    result = admin_service.list_users(
        db, role=role, is_active=is_active, search=search, page=page, limit=limit
    )
    return ok("Users retrieved successfully", result)
