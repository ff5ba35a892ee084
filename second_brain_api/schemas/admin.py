# File: /second_brain_api/schemas/admin.py | Version: 1.0 | Title: Admin request / response bodies
from __future__ import annotations

from typing import List, Optional

from second_brain_api.schemas._base import CamelModel
from second_brain_api.schemas.user import UserOut


class SuperAdminSetup(CamelModel):
    email: str
    username: str
    password: str
    full_name: Optional[str] = None
    setup_token: Optional[str] = None


class AdminDashboardStats(CamelModel):
    total_users: int
    active_users: int
    total_records: int
    total_document_views: int
    recent_signups: int
    recent_activity: int
    growth_rate: float


class AdminUserStats(CamelModel):
    total: int
    active: int
    super_admins: int
    admins: int
    moderators: int
    users: int


class UserPage(CamelModel):
    users: List[UserOut]
    total: int
    page: int
    limit: int
    pages: int
    has_next: bool
    has_prev: bool
