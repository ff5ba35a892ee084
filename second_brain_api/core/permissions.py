# File: /second_brain_api/core/permissions.py | Version: 2.0 | Title: Account roles + role-gated dependencies
from __future__ import annotations

from enum import Enum
from typing import Callable, Optional

from fastapi import Depends

from second_brain_api.core.exceptions import ForbiddenError
from second_brain_api.models import User
from second_brain_api.security import get_current_user


class Role(str, Enum):
    USER = "user"
    MODERATOR = "moderator"
    ADMIN = "admin"
    SUPER_ADMIN = "super_admin"


# Lowest → Highest
ROLE_ORDER = [Role.USER, Role.MODERATOR, Role.ADMIN, Role.SUPER_ADMIN]
ROLE_RANK = {r: i for i, r in enumerate(ROLE_ORDER)}


def normalize_role(value: str | Role | None) -> Optional[Role]:
    if value is None:
        return None
    if isinstance(value, Role):
        return value
    try:
        normalized = value.strip().lower()
    except AttributeError:
        return None
    for r in Role:
        if r.value == normalized:
            return r
    return None


def has_min_role(user: User, minimum: Role) -> bool:
    current = normalize_role(getattr(user, "role", None))
    if current is None:
        return False
    return ROLE_RANK[current] >= ROLE_RANK[minimum]


def require_role(minimum: Role) -> Callable:
    """
    Dependency factory; resolves to the current user when their role is high enough.

    Example:
      @router.get("/admin/users")
      def list_users(admin: User = Depends(require_role(Role.ADMIN))): ...
    """

    def _dep(current_user: User = Depends(get_current_user)) -> User:
        if not has_min_role(current_user, minimum):
            raise ForbiddenError(f"Requires role '{minimum.value}' or higher")
        return current_user

    return _dep
