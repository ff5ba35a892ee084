# File: /second_brain_api/crud/records.py | Version: 1.0 | Title: CRUD helpers for generic module records
from __future__ import annotations

from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from second_brain_api.db.base_class import utcnow
from second_brain_api.models.record import Record


def list_records(
    db: Session, *, user_id: str, module_type: str, database_id: Optional[str] = None
) -> List[Record]:
    q = db.query(Record).filter(Record.user_id == str(user_id), Record.module_type == module_type)
    if database_id:
        q = q.filter(Record.database_id == database_id)
    return q.order_by(Record.created_at.asc(), Record.id.asc()).all()


def count_records(db: Session, *, user_id: str, module_type: str) -> int:
    return (
        db.query(Record)
        .filter(Record.user_id == str(user_id), Record.module_type == module_type)
        .count()
    )


def get_record(db: Session, *, user_id: str, module_type: str, record_id: str) -> Optional[Record]:
    return (
        db.query(Record)
        .filter(
            Record.id == str(record_id),
            Record.user_id == str(user_id),
            Record.module_type == module_type,
        )
        .first()
    )


def create_record(
    db: Session, *, user_id: str, module_type: str, database_id: str, properties: Dict[str, Any]
) -> Record:
    rec = Record(
        user_id=str(user_id),
        module_type=module_type,
        database_id=database_id,
        properties=dict(properties),
        created_by=str(user_id),
        last_edited_by=str(user_id),
    )
    db.add(rec)
    db.commit()
    db.refresh(rec)
    return rec


def update_record(db: Session, rec: Record, *, edited_by: str, properties: Dict[str, Any]) -> Record:
    # Reassign so the JSON column is marked dirty
    rec.properties = {**(rec.properties or {}), **properties}
    rec.last_edited_by = str(edited_by)
    rec.updated_at = utcnow()
    db.commit()
    db.refresh(rec)
    return rec


def delete_record(db: Session, rec: Record) -> bool:
    db.delete(rec)
    db.commit()
    return True
