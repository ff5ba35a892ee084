# File: /second_brain_api/crud/document_view.py | Version: 1.0 | Title: CRUD helpers for the DocumentView aggregate
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from second_brain_api.db.base_class import utcnow
from second_brain_api.models.document_view import DocumentView

logger = logging.getLogger(__name__)


def get_document_view(
    db: Session, *, user_id: str, module_type: str, database_id: str
) -> Optional[DocumentView]:
    return (
        db.query(DocumentView)
        .filter(
            DocumentView.user_id == str(user_id),
            DocumentView.module_type == module_type,
            DocumentView.database_id == database_id,
        )
        .first()
    )


def insert_document_view(db: Session, dv: DocumentView) -> DocumentView:
    """
    Insert a freshly seeded aggregate.

    Concurrent first access for the same (user, module, database) lets only
    one insert through the unique constraint; the loser rolls back and
    returns the winner's row.
    """
    db.add(dv)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        winner = get_document_view(
            db, user_id=dv.user_id, module_type=dv.module_type, database_id=dv.database_id
        )
        if winner is None:
            raise
        logger.info(
            "Document view created concurrently; using existing row",
            extra={"module_type": dv.module_type, "user_id": dv.user_id},
        )
        return winner
    db.refresh(dv)
    return dv


def save_document_view(db: Session, dv: DocumentView, *, edited_by: str) -> DocumentView:
    # JSON columns are only flushed when reassigned, never on in-place mutation
    dv.properties = list(dv.properties or [])
    dv.views = list(dv.views or [])
    dv.last_edited_by = str(edited_by)
    dv.updated_at = utcnow()
    db.commit()
    db.refresh(dv)
    return dv
