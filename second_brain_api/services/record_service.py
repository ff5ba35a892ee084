# File: /second_brain_api/services/record_service.py | Version: 1.0 | Title: Record services (protocol + SQL-backed generic store)
from __future__ import annotations

import logging
from math import ceil
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from pydantic import Field
from sqlalchemy.orm import Session

from second_brain_api.core.exceptions import NotFoundError
from second_brain_api.core.registry import ModuleConfigRegistry
from second_brain_api.crud import records as crud_records
from second_brain_api.crud.record_query import apply_filters, apply_search, apply_sorts
from second_brain_api.models.record import Record
from second_brain_api.schemas._base import CamelModel
from second_brain_api.schemas.document_view import ViewFilter, ViewSort

logger = logging.getLogger(__name__)

# Keys the store owns; callers cannot overwrite them through record data
_RESERVED_KEYS = {"id", "createdAt", "updatedAt", "createdBy", "lastEditedBy", "databaseId"}


class RecordQueryOptions(CamelModel):
    filters: List[ViewFilter] = Field(default_factory=list)
    sorts: List[ViewSort] = Field(default_factory=list)
    search: Optional[str] = None
    page: int = Field(default=1, ge=1)
    limit: Optional[int] = Field(default=None, ge=1)
    view_id: Optional[str] = None
    database_id: Optional[str] = None


@runtime_checkable
class RecordService(Protocol):
    def get_records(self, db: Session, user_id: str, options: RecordQueryOptions) -> Dict[str, Any]: ...

    def get_record(self, db: Session, user_id: str, record_id: str) -> Dict[str, Any]: ...

    def create_record(self, db: Session, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]: ...

    def update_record(
        self, db: Session, user_id: str, record_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]: ...

    def delete_record(self, db: Session, user_id: str, record_id: str) -> bool: ...


def record_to_dict(rec: Record) -> Dict[str, Any]:
    """Flatten a stored record: property bag plus the store-owned audit keys."""
    return {
        **(rec.properties or {}),
        "id": rec.id,
        "databaseId": rec.database_id,
        "createdBy": rec.created_by,
        "lastEditedBy": rec.last_edited_by,
        "createdAt": rec.created_at.isoformat() if rec.created_at else None,
        "updatedAt": rec.updated_at.isoformat() if rec.updated_at else None,
    }


def paginate(items: List[Dict[str, Any]], page: int, limit: Optional[int]) -> Dict[str, Any]:
    total = len(items)
    if limit is None:
        return {"items": items, "total": total, "page": 1, "limit": total, "pages": 1 if total else 0}
    start = (page - 1) * limit
    return {
        "items": items[start : start + limit],
        "total": total,
        "page": page,
        "limit": limit,
        "pages": ceil(total / limit) if total else 0,
    }


class SqlRecordService:
    """
    Generic record store for one module type over the `records` table.

    Every read and write is scoped by (user_id, module_type); another user's
    record id behaves exactly like a missing one.
    """

    def __init__(self, module_type: str, default_database_id: str) -> None:
        self.module_type = module_type
        self.default_database_id = default_database_id

    def _load(self, db: Session, user_id: str, record_id: str) -> Record:
        rec = crud_records.get_record(
            db, user_id=user_id, module_type=self.module_type, record_id=record_id
        )
        if rec is None:
            raise NotFoundError("Record not found")
        return rec

    @staticmethod
    def _clean(data: Dict[str, Any]) -> Dict[str, Any]:
        return {k: v for k, v in (data or {}).items() if k not in _RESERVED_KEYS}

    def get_records(self, db: Session, user_id: str, options: RecordQueryOptions) -> Dict[str, Any]:
        rows = crud_records.list_records(
            db,
            user_id=user_id,
            module_type=self.module_type,
            database_id=options.database_id or self.default_database_id,
        )
        items = [record_to_dict(r) for r in rows]
        items = apply_filters(items, options.filters)
        items = apply_search(items, options.search)
        items = apply_sorts(items, options.sorts)
        return paginate(items, options.page, options.limit)

    def get_record(self, db: Session, user_id: str, record_id: str) -> Dict[str, Any]:
        return record_to_dict(self._load(db, user_id, record_id))

    def create_record(self, db: Session, user_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        database_id = (data or {}).get("databaseId") or self.default_database_id
        rec = crud_records.create_record(
            db,
            user_id=user_id,
            module_type=self.module_type,
            database_id=database_id,
            properties=self._clean(data),
        )
        logger.info("Record created", extra={"module_type": self.module_type, "user_id": user_id})
        return record_to_dict(rec)

    def update_record(
        self, db: Session, user_id: str, record_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        rec = self._load(db, user_id, record_id)
        rec = crud_records.update_record(db, rec, edited_by=user_id, properties=self._clean(data))
        return record_to_dict(rec)

    def delete_record(self, db: Session, user_id: str, record_id: str) -> bool:
        rec = self._load(db, user_id, record_id)
        return crud_records.delete_record(db, rec)


def build_record_services(registry: ModuleConfigRegistry) -> Dict[str, RecordService]:
    """One SqlRecordService per registered module, keyed by its record-service locator."""
    services: Dict[str, RecordService] = {}
    for config in registry.get_all():
        services[config.services.record_service] = SqlRecordService(
            config.module_type, config.services.database_id
        )
    return services
