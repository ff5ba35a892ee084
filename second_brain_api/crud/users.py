# File: /second_brain_api/crud/users.py | Version: 1.0 | Title: User lookups + account mutations
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import or_
from sqlalchemy.orm import Session

from second_brain_api.db.base_class import utcnow
from second_brain_api.models.user import User


def get_user(db: Session, user_id: str) -> Optional[User]:
    return db.query(User).filter(User.id == str(user_id)).first()


def get_user_by_email(db: Session, email: str) -> Optional[User]:
    return db.query(User).filter(User.email == (email or "").strip().lower()).first()


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.query(User).filter(User.username == username).first()


def get_user_by_google_id(db: Session, google_id: str) -> Optional[User]:
    return db.query(User).filter(User.google_id == google_id).first()


def create_local_user(
    db: Session,
    *,
    email: str,
    hashed_password: str,
    username: Optional[str] = None,
    full_name: Optional[str] = None,
    role: str = "user",
) -> User:
    user = User(
        email=email.strip().lower(),
        username=username,
        full_name=full_name,
        hashed_password=hashed_password,
        auth_provider="local",
        role=role,
        is_active=True,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


def create_or_update_google_user(db: Session, profile: Dict[str, Any]) -> User:
    """
    Link by google id first, then by email (an existing local account keeps
    its password and gains the google id).
    """
    google_id = str(profile["id"])
    email = (profile.get("email") or "").strip().lower()

    user = get_user_by_google_id(db, google_id) or (get_user_by_email(db, email) if email else None)
    if user is None:
        user = User(
            email=email,
            full_name=profile.get("name"),
            google_id=google_id,
            avatar_url=profile.get("picture"),
            auth_provider="google",
            hashed_password=None,
            is_active=True,
        )
        db.add(user)
    else:
        user.google_id = google_id
        if profile.get("picture"):
            user.avatar_url = profile["picture"]
        if not user.full_name and profile.get("name"):
            user.full_name = profile["name"]
    user.last_login_at = utcnow()
    db.commit()
    db.refresh(user)
    return user


def touch_last_login(db: Session, user: User) -> User:
    user.last_login_at = utcnow()
    db.commit()
    db.refresh(user)
    return user


def set_password(db: Session, user: User, hashed_password: str) -> User:
    user.hashed_password = hashed_password
    db.commit()
    db.refresh(user)
    return user


def set_role(db: Session, user: User, role: str) -> User:
    user.role = role
    db.commit()
    db.refresh(user)
    return user


def count_users(
    db: Session,
    *,
    role: Optional[str] = None,
    is_active: Optional[bool] = None,
    created_since: Optional[datetime] = None,
    created_before: Optional[datetime] = None,
    logged_in_since: Optional[datetime] = None,
) -> int:
    q = db.query(User)
    if role is not None:
        q = q.filter(User.role == role)
    if is_active is not None:
        q = q.filter(User.is_active.is_(is_active))
    if created_since is not None:
        q = q.filter(User.created_at >= created_since)
    if created_before is not None:
        q = q.filter(User.created_at < created_before)
    if logged_in_since is not None:
        q = q.filter(User.last_login_at >= logged_in_since)
    return q.count()


def list_users(
    db: Session,
    *,
    role: Optional[str] = None,
    is_active: Optional[bool] = None,
    search: Optional[str] = None,
    offset: int = 0,
    limit: int = 10,
) -> Tuple[List[User], int]:
    """Newest first; `search` matches email, username or full name (case-insensitive)."""
    q = db.query(User)
    if role is not None:
        q = q.filter(User.role == role)
    if is_active is not None:
        q = q.filter(User.is_active.is_(is_active))
    if search:
        like = f"%{search.strip()}%"
        q = q.filter(or_(User.email.ilike(like), User.username.ilike(like), User.full_name.ilike(like)))
    total = q.count()
    rows = q.order_by(User.created_at.desc(), User.id.asc()).offset(offset).limit(limit).all()
    return rows, total
