# File: /second_brain_api/services/document_view.py | Version: 1.0 | Title: DocumentView service (schema, views, properties, record delegation)
from __future__ import annotations

import copy
import logging
from typing import Any, Dict, List, Optional

from sqlalchemy.orm import Session

from second_brain_api.core.exceptions import (
    AppError,
    NotFoundError,
    OperationFailedError,
    ServiceUnavailableError,
)
from second_brain_api.core.registry import ModuleConfigRegistry
from second_brain_api.crud.document_view import (
    get_document_view,
    insert_document_view,
    save_document_view,
)
from second_brain_api.db.base_class import gen_uuid, utcnow
from second_brain_api.models.document_view import DocumentView
from second_brain_api.schemas.document_view import (
    DocumentViewOut,
    Property,
    PropertyCreate,
    PropertyUpdate,
    View,
    ViewCreate,
    ViewUpdate,
)
from second_brain_api.schemas.module_config import FrozenConfig, FrozenPropertyRule, ModuleConfig
from second_brain_api.services.document_view_rules import DocumentViewRules
from second_brain_api.services.record_service import RecordQueryOptions, RecordService

logger = logging.getLogger(__name__)

# Patch fields that may be explicitly cleared with null
_VIEW_CLEARABLE = {"description", "group_by"}
_PROPERTY_CLEARABLE = {"description", "default_value", "options", "validation", "module_specific"}


def _dump(model) -> Dict[str, Any]:
    return model.model_dump(mode="json", by_alias=True)


def _changes(patch, clearable) -> Dict[str, Any]:
    raw = patch.model_dump(exclude_unset=True)
    return {k: v for k, v in raw.items() if v is not None or k in clearable}


class DocumentViewService:
    """
    Per-user schema and view management for every registered module.

    One DocumentView aggregate exists per (user, module, database). It is
    seeded from the module's defaults on first access and never re-synced
    with later config changes.
    """

    def __init__(
        self,
        db: Session,
        registry: ModuleConfigRegistry,
        record_services: Dict[str, RecordService],
    ) -> None:
        self.db = db
        self.registry = registry
        self.record_services = record_services

    # ---------------------------
    # Aggregate resolution
    # ---------------------------

    def _config(self, module_type) -> ModuleConfig:
        return self.registry.get_module_config(module_type)

    def resolve(
        self, user_id: str, module_type, database_id: Optional[str] = None
    ) -> DocumentView:
        config = self._config(module_type)
        uid = str(user_id)
        db_id = database_id or config.services.database_id

        existing = get_document_view(
            self.db, user_id=uid, module_type=config.module_type, database_id=db_id
        )
        if existing is not None:
            return existing

        data = config.data
        dv = DocumentView(
            id=gen_uuid(),
            user_id=uid,
            module_type=config.module_type,
            database_id=db_id,
            name=config.display_name_plural,
            description=config.description,
            icon=config.icon,
            properties=[_dump(p) for p in data.default_properties],
            views=[_dump(v) for v in data.default_views],
            required_properties=list(data.required_properties),
            frozen_properties=list(data.frozen_properties),
            permissions=[{"userId": uid, "permission": "admin"}],
            is_public=False,
            is_default=True,
            frozen=False,
            created_by=uid,
            last_edited_by=uid,
        )
        dv = insert_document_view(self.db, dv)
        logger.info(
            "Document view created", extra={"module_type": config.module_type, "user_id": uid}
        )
        return dv

    def get_or_create_document_view(
        self, user_id: str, module_type, database_id: Optional[str] = None
    ) -> DocumentViewOut:
        return DocumentViewOut.model_validate(self.resolve(user_id, module_type, database_id))

    # ---------------------------
    # Views
    # ---------------------------

    @staticmethod
    def _views(dv: DocumentView) -> List[View]:
        return [View.model_validate(v) for v in dv.views or []]

    def _save_views(self, dv: DocumentView, views: List[View], user_id: str) -> None:
        dv.views = [_dump(v) for v in views]
        save_document_view(self.db, dv, edited_by=str(user_id))

    @staticmethod
    def _find_view(views: List[View], view_id: str) -> int:
        for i, v in enumerate(views):
            if v.id == view_id:
                return i
        raise NotFoundError(f"View '{view_id}' not found")

    def list_views(self, user_id: str, module_type, database_id: Optional[str] = None) -> List[View]:
        return self._views(self.resolve(user_id, module_type, database_id))

    def get_view(
        self, user_id: str, module_type, view_id: str, database_id: Optional[str] = None
    ) -> View:
        views = self.list_views(user_id, module_type, database_id)
        return views[self._find_view(views, view_id)]

    def get_default_view(
        self, user_id: str, module_type, database_id: Optional[str] = None
    ) -> Optional[View]:
        views = self.list_views(user_id, module_type, database_id)
        for v in views:
            if v.is_default:
                return v
        return views[0] if views else None

    def create_view(
        self, user_id: str, module_type, data: ViewCreate, database_id: Optional[str] = None
    ) -> View:
        dv = self.resolve(user_id, module_type, database_id)
        uid = str(user_id)
        now = utcnow()
        view = View.model_validate(
            {
                **data.model_dump(),
                "id": gen_uuid(),
                "created_by": uid,
                "last_edited_by": uid,
                "created_at": now,
                "updated_at": now,
            }
        )
        self._save_views(dv, self._views(dv) + [view], uid)
        return view

    def update_view(
        self,
        user_id: str,
        module_type,
        view_id: str,
        patch: ViewUpdate,
        database_id: Optional[str] = None,
    ) -> View:
        dv = self.resolve(user_id, module_type, database_id)
        views = self._views(dv)
        idx = self._find_view(views, view_id)
        current = views[idx]
        updated = View.model_validate(
            {
                **current.model_dump(),
                **_changes(patch, _VIEW_CLEARABLE),
                "id": current.id,
                "last_edited_by": str(user_id),
                "updated_at": utcnow(),
            }
        )
        views[idx] = updated
        self._save_views(dv, views, user_id)
        return updated

    def delete_view(
        self, user_id: str, module_type, view_id: str, database_id: Optional[str] = None
    ) -> bool:
        dv = self.resolve(user_id, module_type, database_id)
        views = self._views(dv)
        idx = self._find_view(views, view_id)
        DocumentViewRules.ensure_view_deletable(views[idx])
        del views[idx]
        self._save_views(dv, views, user_id)
        return True

    def duplicate_view(
        self,
        user_id: str,
        module_type,
        view_id: str,
        new_name: Optional[str] = None,
        database_id: Optional[str] = None,
    ) -> View:
        dv = self.resolve(user_id, module_type, database_id)
        views = self._views(dv)
        source = views[self._find_view(views, view_id)]
        uid = str(user_id)
        now = utcnow()
        copy_ = View.model_validate(
            {
                **copy.deepcopy(source.model_dump()),
                "id": gen_uuid(),
                "name": new_name or f"{source.name} (Copy)",
                "is_default": False,
                "created_by": uid,
                "last_edited_by": uid,
                "created_at": now,
                "updated_at": now,
            }
        )
        self._save_views(dv, views + [copy_], uid)
        return copy_

    # ---------------------------
    # Properties
    # ---------------------------

    @staticmethod
    def _properties(dv: DocumentView) -> List[Property]:
        return [Property.model_validate(p) for p in dv.properties or []]

    @staticmethod
    def _find_property(props: List[Property], property_id: str) -> int:
        for i, p in enumerate(props):
            if p.id == property_id:
                return i
        raise NotFoundError(f"Property '{property_id}' not found")

    def list_properties(
        self, user_id: str, module_type, database_id: Optional[str] = None
    ) -> List[Property]:
        return self._properties(self.resolve(user_id, module_type, database_id))

    def add_property(
        self, user_id: str, module_type, data: PropertyCreate, database_id: Optional[str] = None
    ) -> Property:
        dv = self.resolve(user_id, module_type, database_id)
        props = self._properties(dv)

        if data.id:
            DocumentViewRules.ensure_unique_property_id(props, data.id)

        fields = {k: v for k, v in data.model_dump().items() if v is not None}
        new_prop = Property.model_validate(
            {
                **fields,
                "id": data.id or gen_uuid(),
                "name": data.name or "New Property",
                "type": data.type or "text",
                "order": len(props) if data.order is None else data.order,
                "visible": data.visible is not False,
                "width": data.width or 150,
            }
        )

        views = self._views(dv)
        for i, v in enumerate(views):
            if v.is_default:
                if new_prop.id not in v.visible_properties:
                    views[i] = v.model_copy(
                        update={"visible_properties": v.visible_properties + [new_prop.id]}
                    )
                break

        dv.properties = [_dump(p) for p in props + [new_prop]]
        self._save_views(dv, views, user_id)
        return new_prop

    def update_property(
        self,
        user_id: str,
        module_type,
        property_id: str,
        patch: PropertyUpdate,
        database_id: Optional[str] = None,
    ) -> Property:
        dv = self.resolve(user_id, module_type, database_id)
        props = self._properties(dv)
        idx = self._find_property(props, property_id)
        changes = _changes(patch, _PROPERTY_CLEARABLE)
        DocumentViewRules.ensure_not_unfrozen(dv.frozen_properties or [], property_id, changes)

        updated = Property.model_validate(
            {**props[idx].model_dump(), **changes, "id": property_id}
        )
        props[idx] = updated
        dv.properties = [_dump(p) for p in props]
        save_document_view(self.db, dv, edited_by=str(user_id))
        return updated

    def property_protection(
        self, user_id: str, module_type, property_id: str, database_id: Optional[str] = None
    ) -> Optional[str]:
        """Name of the rule blocking removal of `property_id`, or None when it may be removed."""
        dv = self.resolve(user_id, module_type, database_id)
        return DocumentViewRules.removal_blocked_by(
            dv.required_properties or [], dv.frozen_properties or [], property_id
        )

    def delete_property(
        self, user_id: str, module_type, property_id: str, database_id: Optional[str] = None
    ) -> bool:
        dv = self.resolve(user_id, module_type, database_id)
        props = self._properties(dv)
        idx = self._find_property(props, property_id)

        blocked = DocumentViewRules.removal_blocked_by(
            dv.required_properties or [], dv.frozen_properties or [], property_id
        )
        if blocked:
            logger.info(
                "Property removal refused",
                extra={"module_type": dv.module_type, "user_id": dv.user_id},
            )
            return False

        del props[idx]
        dv.properties = [_dump(p) for p in props]
        save_document_view(self.db, dv, edited_by=str(user_id))
        return True

    # ---------------------------
    # Frozen config
    # ---------------------------

    def get_frozen_config(self, module_type) -> FrozenConfig:
        config = self._config(module_type)
        if config.frozen_config is not None:
            return config.frozen_config
        return FrozenConfig(
            view_type=config.module_type,
            module_type=config.module_type,
            description=f"Frozen configuration for {config.display_name_plural}",
            frozen_properties=[
                FrozenPropertyRule(property_id=pid, reason="System property")
                for pid in config.data.frozen_properties
            ],
        )

    # ---------------------------
    # Record delegation
    # ---------------------------

    def _delegate(self, module_type, operation: str, *args: Any) -> Any:
        config = self._config(module_type)
        service = self.record_services.get(config.services.record_service)
        method = getattr(service, operation, None) if service is not None else None
        if method is None:
            raise ServiceUnavailableError(
                f"Record service for {config.module_type} does not implement {operation}"
            )
        try:
            return method(self.db, *args)
        except AppError:
            raise
        except Exception as exc:
            logger.exception(
                "Record service failed",
                extra={"module_type": config.module_type, "operation": operation},
            )
            raise OperationFailedError(
                f"{config.module_type} {operation} failed: {exc}",
                details={"moduleType": config.module_type},
            ) from exc

    def get_records(
        self,
        user_id: str,
        module_type,
        options: Optional[RecordQueryOptions] = None,
        database_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        options = options or RecordQueryOptions()
        config = self._config(module_type)
        effective_db = database_id or options.database_id or config.services.database_id
        update: Dict[str, Any] = {"database_id": effective_db}

        if options.view_id:
            view = self.get_view(user_id, module_type, options.view_id, effective_db)
            if not options.filters:
                update["filters"] = [f for f in view.filters if f.enabled]
            if not options.sorts:
                update["sorts"] = [s for s in view.sorts if s.enabled]

        return self._delegate(
            module_type, "get_records", str(user_id), options.model_copy(update=update)
        )

    def get_record(self, user_id: str, module_type, record_id: str) -> Dict[str, Any]:
        return self._delegate(module_type, "get_record", str(user_id), record_id)

    def create_record(
        self,
        user_id: str,
        module_type,
        data: Dict[str, Any],
        database_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        payload = dict(data or {})
        if database_id:
            payload["databaseId"] = database_id
        return self._delegate(module_type, "create_record", str(user_id), payload)

    def update_record(
        self, user_id: str, module_type, record_id: str, data: Dict[str, Any]
    ) -> Dict[str, Any]:
        return self._delegate(module_type, "update_record", str(user_id), record_id, dict(data or {}))

    def delete_record(self, user_id: str, module_type, record_id: str) -> bool:
        return self._delegate(module_type, "delete_record", str(user_id), record_id)
