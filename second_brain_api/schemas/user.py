# File: /second_brain_api/schemas/user.py | Version: 3.0 | Title: Public user representation (camelCase)
from __future__ import annotations

from datetime import datetime
from typing import Optional

from second_brain_api.schemas._base import CamelModel


class UserOut(CamelModel):
    id: str
    email: str
    username: Optional[str] = None
    full_name: Optional[str] = None
    avatar_url: Optional[str] = None
    auth_provider: str = "local"
    role: str = "user"
    is_active: bool = True
    last_login_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
