# File: /second_brain_api/schemas/auth.py | Version: 3.0 | Title: Auth request / response bodies
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from second_brain_api.schemas._base import CamelModel
from second_brain_api.schemas.user import UserOut


class RefreshRequest(CamelModel):
    refresh_token: str


class ChangePasswordRequest(CamelModel):
    current_password: str
    new_password: str


class ForgotPasswordRequest(CamelModel):
    email: str


class ResetPasswordRequest(CamelModel):
    token: str
    new_password: str


class AuthTokens(CamelModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class AuthResult(CamelModel):
    user: UserOut
    tokens: AuthTokens


class TokenResponse(BaseModel):
    """Bare OAuth2 password-flow response (snake_case, no envelope)."""

    access_token: str
    refresh_token: Optional[str] = None
    token_type: str = "bearer"
