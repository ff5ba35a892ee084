# File: /second_brain_api/services/admin.py | Version: 1.0 | Title: Admin statistics, user listing and first super-admin setup
from __future__ import annotations

import logging
import secrets
from datetime import timedelta
from math import ceil
from typing import Optional

from sqlalchemy.orm import Session

from second_brain_api.core.auth_errors import EmailAlreadyExistsError, UsernameAlreadyExistsError
from second_brain_api.core.config import settings
from second_brain_api.core.exceptions import ForbiddenError, InvariantViolationError
from second_brain_api.core.permissions import Role
from second_brain_api.crud import users as crud_users
from second_brain_api.db.base_class import utcnow
from second_brain_api.models import DocumentView, Record, User
from second_brain_api.schemas.admin import AdminDashboardStats, AdminUserStats, SuperAdminSetup, UserPage
from second_brain_api.schemas.user import UserOut
from second_brain_api.security import (
    get_password_hash,
    validate_email,
    validate_password,
    validate_username,
)

logger = logging.getLogger(__name__)


def dashboard_stats(db: Session) -> AdminDashboardStats:
    now = utcnow()
    thirty_days_ago = now - timedelta(days=30)
    recent = crud_users.count_users(db, created_since=thirty_days_ago)
    previous = crud_users.count_users(
        db, created_since=now - timedelta(days=60), created_before=thirty_days_ago
    )
    # signup growth over the last 30 days against the 30 before
    growth = ((recent - previous) / previous) * 100 if previous else 0.0
    return AdminDashboardStats(
        total_users=crud_users.count_users(db),
        active_users=crud_users.count_users(db, is_active=True),
        total_records=db.query(Record).count(),
        total_document_views=db.query(DocumentView).count(),
        recent_signups=recent,
        recent_activity=crud_users.count_users(db, logged_in_since=now - timedelta(days=1)),
        growth_rate=round(growth, 2),
    )


def user_stats(db: Session) -> AdminUserStats:
    return AdminUserStats(
        total=crud_users.count_users(db),
        active=crud_users.count_users(db, is_active=True),
        super_admins=crud_users.count_users(db, role=Role.SUPER_ADMIN.value),
        admins=crud_users.count_users(db, role=Role.ADMIN.value),
        moderators=crud_users.count_users(db, role=Role.MODERATOR.value),
        users=crud_users.count_users(db, role=Role.USER.value),
    )


def list_users(
    db: Session,
    *,
    role: Optional[Role] = None,
    is_active: Optional[bool] = None,
    search: Optional[str] = None,
    page: int = 1,
    limit: int = 10,
) -> UserPage:
    rows, total = crud_users.list_users(
        db,
        role=role.value if role else None,
        is_active=is_active,
        search=search,
        offset=(page - 1) * limit,
        limit=limit,
    )
    pages = ceil(total / limit) if total else 0
    return UserPage(
        users=[UserOut.model_validate(u) for u in rows],
        total=total,
        page=page,
        limit=limit,
        pages=pages,
        has_next=page < pages,
        has_prev=page > 1,
    )


def setup_needed(db: Session) -> bool:
    return crud_users.count_users(db, role=Role.SUPER_ADMIN.value) == 0


def create_initial_super_admin(db: Session, body: SuperAdminSetup) -> User:
    """One-time bootstrap; refused once any super admin exists."""
    if not setup_needed(db):
        raise InvariantViolationError("Super admin already exists. Initial setup has already been completed.")

    expected = settings.INITIAL_SETUP_TOKEN
    if expected and not secrets.compare_digest(body.setup_token or "", expected):
        logger.warning("Initial setup refused: bad setup token", extra={"operation": "admin_setup"})
        raise ForbiddenError("Invalid setup token provided.")

    email = validate_email(body.email)
    password = validate_password(body.password)
    username = validate_username(body.username)
    if crud_users.get_user_by_email(db, email):
        raise EmailAlreadyExistsError()
    if crud_users.get_user_by_username(db, username):
        raise UsernameAlreadyExistsError()

    user = crud_users.create_local_user(
        db,
        email=email,
        username=username,
        full_name=body.full_name,
        hashed_password=get_password_hash(password),
        role=Role.SUPER_ADMIN.value,
    )
    logger.info("Initial super admin created", extra={"user_id": user.id, "operation": "admin_setup"})
    return user
