# File: /second_brain_api/security.py | Version: 2.0 | Title: JWT Security (access, refresh, OAuth state, password reset) + credential format rules
import logging
import re
import secrets
from datetime import UTC, datetime, timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import OAuth2PasswordBearer
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from second_brain_api.core.auth_errors import (
    InvalidEmailFormatError,
    InvalidPasswordFormatError,
    InvalidUsernameFormatError,
    OAuthStateInvalidError,
    RefreshTokenExpiredError,
    RefreshTokenInvalidError,
    ResetTokenExpiredError,
    ResetTokenInvalidError,
    TokenExpiredError,
    TokenInvalidError,
    TokenMissingError,
    UserInactiveError,
)
from second_brain_api.core.config import settings
from second_brain_api.db.session import get_db
from second_brain_api.models import User

logger = logging.getLogger(__name__)

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Missing tokens are reported by get_current_user, not by the scheme
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/token", auto_error=False)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
PASSWORD_RE = re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}$")
USERNAME_RE = re.compile(r"^[a-zA-Z0-9_]{3,30}$")

STATE_PURPOSE = "oauth_state"
RESET_PURPOSE = "password_reset"


def verify_password(plain_password: str, hashed_password: Optional[str]) -> bool:
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


# ---------------------------
# Format rules
# ---------------------------


def validate_email(email: str) -> str:
    email = (email or "").strip().lower()
    if not EMAIL_RE.match(email):
        raise InvalidEmailFormatError()
    return email


def validate_password(password: str) -> str:
    if not PASSWORD_RE.match(password or ""):
        raise InvalidPasswordFormatError()
    return password


def validate_username(username: str) -> str:
    if not USERNAME_RE.match(username or ""):
        raise InvalidUsernameFormatError()
    return username


# ---------------------------
# JWT helpers
# ---------------------------


def _jwt_encode(claims: dict, key: Optional[str] = None) -> str:
    return jwt.encode(claims, key or settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def _jwt_decode(token: str, key: Optional[str] = None) -> dict:
    return jwt.decode(token, key or settings.SECRET_KEY, algorithms=[settings.ALGORITHM])


def _expiry(minutes: int) -> datetime:
    return datetime.now(UTC) + timedelta(minutes=minutes)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(UTC) + (
        expires_delta or timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    )
    to_encode.update({"exp": expire, "type": "access"})
    return _jwt_encode(to_encode)


def create_refresh_token(data: dict, expires_minutes: Optional[int] = None) -> str:
    to_encode = data.copy()
    to_encode.update(
        {"exp": _expiry(expires_minutes or settings.REFRESH_TOKEN_EXPIRE_MINUTES), "type": "refresh"}
    )
    return _jwt_encode(to_encode, settings.REFRESH_SECRET_KEY)


def decode_access_token(token: str) -> dict:
    try:
        payload = _jwt_decode(token)
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise TokenInvalidError()
    # state and reset tokens share the signing key; only typed access tokens pass
    if payload.get("type") != "access" or "purpose" in payload or not payload.get("sub"):
        raise TokenInvalidError()
    return payload


def decode_refresh_token(token: str) -> dict:
    try:
        payload = _jwt_decode(token, settings.REFRESH_SECRET_KEY)
    except ExpiredSignatureError:
        raise RefreshTokenExpiredError()
    except JWTError:
        raise RefreshTokenInvalidError()
    if payload.get("type") != "refresh" or not payload.get("sub"):
        raise RefreshTokenInvalidError()
    return payload


def create_state_token() -> str:
    """Signed, short-lived OAuth state carrying a random nonce."""
    claims = {
        "purpose": STATE_PURPOSE,
        "nonce": secrets.token_urlsafe(16),
        "exp": _expiry(settings.OAUTH_STATE_EXPIRE_MINUTES),
    }
    return _jwt_encode(claims)


def verify_state_token(state: Optional[str]) -> dict:
    if not state:
        raise OAuthStateInvalidError()
    try:
        payload = _jwt_decode(state)
    except JWTError:
        raise OAuthStateInvalidError()
    if payload.get("purpose") != STATE_PURPOSE or not payload.get("nonce"):
        raise OAuthStateInvalidError()
    return payload


def create_password_reset_token(user: User) -> str:
    claims = {
        "sub": str(user.id),
        "email": user.email,
        "purpose": RESET_PURPOSE,
        "exp": _expiry(settings.PASSWORD_RESET_EXPIRE_MINUTES),
    }
    return _jwt_encode(claims)


def decode_password_reset_token(token: str) -> dict:
    try:
        payload = _jwt_decode(token)
    except ExpiredSignatureError:
        raise ResetTokenExpiredError()
    except JWTError:
        raise ResetTokenInvalidError()
    if payload.get("purpose") != RESET_PURPOSE or not payload.get("sub"):
        raise ResetTokenInvalidError()
    return payload


# ---------------------------
# Dependency
# ---------------------------


def get_current_user(
    token: Optional[str] = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    if not token:
        raise TokenMissingError()
    payload = decode_access_token(token)

    user = db.query(User).filter(User.id == str(payload["sub"])).first()
    if user is None:
        logger.warning("Token subject does not exist")
        raise TokenInvalidError()
    if not user.is_active:
        logger.warning("Inactive user presented a token", extra={"user_id": user.id})
        raise UserInactiveError()
    return user
