# File: /second_brain_api/routers/auth.py | Version: 3.0 | Title: Auth Router (JSON+form tolerant) register/login/token/logout
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Depends, Form, HTTPException, Request, status
from sqlalchemy.orm import Session

from second_brain_api.core.auth_errors import (
    AccountDeactivatedError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    OAuthAccountError,
    UsernameAlreadyExistsError,
)
from second_brain_api.core.exceptions import BadRequestError
from second_brain_api.core.responses import ok
from second_brain_api.crud import users as crud_users
from second_brain_api.db.session import get_db
from second_brain_api.models import User
from second_brain_api.schemas.auth import AuthResult, AuthTokens, TokenResponse
from second_brain_api.schemas.user import UserOut
from second_brain_api.security import (
    create_access_token,
    create_refresh_token,
    get_current_user,
    get_password_hash,
    validate_email,
    validate_password,
    validate_username,
    verify_password,
)

router = APIRouter(prefix="/auth", tags=["Auth"])
logger = logging.getLogger(__name__)


# ---------------------------
# Utilities
# ---------------------------


async def read_json_or_form(request: Request) -> Dict[str, Any]:
    """Accept JSON or form-encoded bodies and normalize keys."""
    ctype = (request.headers.get("content-type") or "").lower()
    data: Dict[str, Any] = {}
    if "application/json" in ctype:
        try:
            body = await request.json()
        except ValueError:
            raise BadRequestError("Malformed JSON body")
        if isinstance(body, dict):
            data = body
    else:
        form = await request.form()
        data = dict(form)

    # alias: username -> email (OAuth-style)
    if "username" in data and "email" not in data:
        data["email"] = data["username"]
    # camelCase spelling from web clients
    if "fullName" in data and "full_name" not in data:
        data["full_name"] = data["fullName"]
    return data


def issue_tokens(user: User) -> AuthTokens:
    sub = {"sub": str(user.id)}
    return AuthTokens(access_token=create_access_token(sub), refresh_token=create_refresh_token(sub))


def _require(payload: Dict[str, Any], *keys: str) -> None:
    if any(not payload.get(k) for k in keys):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Email and password required",
        )


def authenticate(db: Session, email: str, password: str) -> User:
    """Password login rules shared by /login and /token."""
    user = crud_users.get_user_by_email(db, email)
    if user is None:
        logger.warning("Login failed: unknown account", extra={"operation": "login"})
        raise InvalidCredentialsError()
    if user.is_oauth_only:
        logger.warning("Login refused: OAuth-only account", extra={"user_id": user.id})
        raise OAuthAccountError()
    if not user.is_active:
        logger.warning("Login refused: deactivated account", extra={"user_id": user.id})
        raise AccountDeactivatedError()
    if not verify_password(password, user.hashed_password):
        logger.warning("Login failed: bad password", extra={"user_id": user.id})
        raise InvalidCredentialsError()
    return crud_users.touch_last_login(db, user)


# ---------------------------
# Endpoints
# ---------------------------


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(request: Request, db: Session = Depends(get_db)):
    """
    Register a local account from JSON or form {email, password, [username], [full_name]}.
    Returns the user plus an access/refresh token pair.
    """
    payload = await read_json_or_form(request)
    _require(payload, "email", "password")

    email = validate_email(payload["email"])
    password = validate_password(payload["password"])
    # `username` doubles as the email alias; only a distinct value is a handle
    username = payload.get("username")
    if username == payload.get("email"):
        username = None
    if username:
        validate_username(username)

    if crud_users.get_user_by_email(db, email):
        raise EmailAlreadyExistsError()
    if username and crud_users.get_user_by_username(db, username):
        raise UsernameAlreadyExistsError()

    user = crud_users.create_local_user(
        db,
        email=email,
        username=username,
        full_name=payload.get("full_name"),
        hashed_password=get_password_hash(password),
    )
    logger.info("User registered", extra={"user_id": user.id})
    result = AuthResult(user=UserOut.model_validate(user), tokens=issue_tokens(user))
    return ok("User registered successfully", result)


@router.post("/login")
async def login(request: Request, db: Session = Depends(get_db)):
    """
    Login with JSON or form {email/username, password}.
    Returns the user and both tokens for later /auth/refresh use.
    """
    payload = await read_json_or_form(request)
    _require(payload, "email", "password")

    user = authenticate(db, (payload["email"] or "").strip().lower(), payload["password"])
    result = AuthResult(user=UserOut.model_validate(user), tokens=issue_tokens(user))
    return ok("Login successful", result)


@router.post("/token", response_model=TokenResponse)
def login_oauth_form(
    db: Session = Depends(get_db),
    username: str = Form(...),
    password: str = Form(...),
):
    """
    OAuth2 password-flow variant for tools; bare token pair, no envelope.
    """
    user = authenticate(db, (username or "").strip().lower(), password)
    tokens = issue_tokens(user)
    return TokenResponse(access_token=tokens.access_token, refresh_token=tokens.refresh_token)


@router.post("/logout")
def logout(current_user: User = Depends(get_current_user)):
    # Tokens are stateless; clients drop them
    logger.info("User logged out", extra={"user_id": current_user.id})
    return ok("Logged out successfully")


@router.post("/logout-all")
def logout_all(current_user: User = Depends(get_current_user)):
    logger.info("User logged out of all devices", extra={"user_id": current_user.id})
    return ok("Logged out from all devices successfully")
