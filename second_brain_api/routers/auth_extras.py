# File: /second_brain_api/routers/auth_extras.py | Version: 2.0 | Title: Auth Extras (/auth/me, /auth/refresh, password change + reset)
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from second_brain_api.core.auth_errors import (
    OAuthOnlyAccountError,
    PasswordMismatchError,
    ResetNotAvailableError,
    ResetTokenInvalidError,
    UserInactiveError,
    UserNotFoundError,
)
from second_brain_api.core.responses import ok
from second_brain_api.crud import users as crud_users
from second_brain_api.db.session import get_db
from second_brain_api.models import User
from second_brain_api.schemas.auth import (
    ChangePasswordRequest,
    ForgotPasswordRequest,
    RefreshRequest,
    ResetPasswordRequest,
)
from second_brain_api.schemas.user import UserOut
from second_brain_api.security import (
    create_access_token,
    create_password_reset_token,
    decode_password_reset_token,
    decode_refresh_token,
    get_current_user,
    get_password_hash,
    validate_email,
    validate_password,
    verify_password,
)
from second_brain_api.services.mailer import send_password_reset

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)

_FORGOT_MESSAGE = "If an account exists for that email, a reset link has been sent"


@router.get("/me")
def me(current_user: User = Depends(get_current_user)):
    return ok("User retrieved successfully", UserOut.model_validate(current_user))


@router.post("/refresh")
def refresh(body: RefreshRequest, db: Session = Depends(get_db)):
    payload = decode_refresh_token(body.refresh_token)
    user = crud_users.get_user(db, payload["sub"])
    if user is None:
        raise UserNotFoundError()
    if not user.is_active:
        raise UserInactiveError()
    token = create_access_token({"sub": str(user.id)})
    return ok("Token refreshed successfully", {"accessToken": token, "tokenType": "bearer"})


@router.post("/change-password")
def change_password(
    body: ChangePasswordRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if current_user.is_oauth_only:
        raise OAuthOnlyAccountError()
    if not verify_password(body.current_password, current_user.hashed_password):
        logger.warning("Password change refused: mismatch", extra={"user_id": current_user.id})
        raise PasswordMismatchError()
    validate_password(body.new_password)
    crud_users.set_password(db, current_user, get_password_hash(body.new_password))
    logger.info("Password changed", extra={"user_id": current_user.id})
    return ok("Password changed successfully")


@router.post("/forgot-password")
def forgot_password(body: ForgotPasswordRequest, db: Session = Depends(get_db)):
    """Same answer whether or not the account exists."""
    email = validate_email(body.email)
    user = crud_users.get_user_by_email(db, email)
    if user is None:
        return ok(_FORGOT_MESSAGE)
    if user.is_oauth_only:
        raise ResetNotAvailableError()
    send_password_reset(user.email, create_password_reset_token(user))
    return ok(_FORGOT_MESSAGE)


@router.post("/reset-password")
def reset_password(body: ResetPasswordRequest, db: Session = Depends(get_db)):
    payload = decode_password_reset_token(body.token)
    user = crud_users.get_user(db, payload["sub"])
    # The token is bound to the email at issue time
    if user is None or user.email != payload.get("email"):
        raise ResetTokenInvalidError()
    if user.is_oauth_only:
        raise ResetNotAvailableError()
    validate_password(body.new_password)
    crud_users.set_password(db, user, get_password_hash(body.new_password))
    logger.info("Password reset", extra={"user_id": user.id})
    return ok("Password reset successfully")
