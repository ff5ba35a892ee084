# File: /second_brain_api/routers/auth_oauth.py | Version: 1.0 | Title: Google OAuth login (/auth/google, /auth/google/callback)
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from second_brain_api.core.auth_errors import AccountDeactivatedError, OAuthCodeInvalidError
from second_brain_api.core.responses import ok
from second_brain_api.crud import users as crud_users
from second_brain_api.db.session import get_db
from second_brain_api.routers.auth import issue_tokens
from second_brain_api.schemas.auth import AuthResult
from second_brain_api.schemas.user import UserOut
from second_brain_api.security import verify_state_token
from second_brain_api.services import oauth

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)


@router.get("/google")
def google_login():
    return ok("Google login URL generated", oauth.build_google_login_url())


@router.get("/google/callback")
def google_callback(
    code: Optional[str] = None,
    state: Optional[str] = None,
    db: Session = Depends(get_db),
):
    verify_state_token(state)
    if not code:
        raise OAuthCodeInvalidError()

    access_token = oauth.exchange_code_for_token(code)
    profile = oauth.fetch_google_profile(access_token)
    user = crud_users.create_or_update_google_user(db, profile)
    if not user.is_active:
        raise AccountDeactivatedError()

    logger.info("Google login", extra={"user_id": user.id})
    result = AuthResult(user=UserOut.model_validate(user), tokens=issue_tokens(user))
    return ok("Google authentication successful", result)
