# File: /second_brain_api/routers/document_view.py | Version: 1.0 | Title: Document View Router (config, views, properties, records per module)
from __future__ import annotations

import json
from typing import Any, Dict, List, Literal, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from second_brain_api.core.exceptions import BadRequestError, InvariantViolationError, NotFoundError
from second_brain_api.core.registry import ModuleConfigRegistry, get_record_services, get_registry
from second_brain_api.core.responses import ok
from second_brain_api.db.session import get_db
from second_brain_api.models import User
from second_brain_api.schemas.document_view import (
    PropertyCreate,
    PropertyUpdate,
    ViewCreate,
    ViewDuplicate,
    ViewFilter,
    ViewSort,
    ViewUpdate,
)
from second_brain_api.security import get_current_user
from second_brain_api.services.document_view import DocumentViewService
from second_brain_api.services.record_service import RecordQueryOptions

router = APIRouter(prefix="/document-view/{module_type}", tags=["Document Views"])

_filters_adapter = TypeAdapter(List[ViewFilter])


def get_document_view_service(
    db: Session = Depends(get_db),
    registry: ModuleConfigRegistry = Depends(get_registry),
    record_services=Depends(get_record_services),
) -> DocumentViewService:
    return DocumentViewService(db, registry, record_services)


DatabaseId = Query(default=None, alias="databaseId")


def parse_filters(raw: Optional[str]) -> List[ViewFilter]:
    """`filters` query param: a JSON list of filter objects."""
    if not raw:
        return []
    try:
        return _filters_adapter.validate_python(json.loads(raw))
    except json.JSONDecodeError:
        raise BadRequestError("Invalid filters parameter: malformed JSON")
    except ValidationError:
        raise BadRequestError("Invalid filters parameter: expected a list of filter objects")


# ---------------------------
# Config
# ---------------------------


@router.get("/config")
def get_config(
    module_type: str,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    dv = svc.get_or_create_document_view(current_user.id, module_type, database_id)
    return ok("Document view retrieved successfully", dv)


@router.get("/frozen-config")
def get_frozen_config(
    module_type: str,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return ok("Frozen configuration retrieved successfully", svc.get_frozen_config(module_type))


# ---------------------------
# Views
# ---------------------------


@router.get("/views")
def list_views(
    module_type: str,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return ok("Views retrieved successfully", svc.list_views(current_user.id, module_type, database_id))


@router.post("/views", status_code=status.HTTP_201_CREATED)
def create_view(
    module_type: str,
    body: ViewCreate,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    view = svc.create_view(current_user.id, module_type, body, database_id)
    return ok("View created successfully", view)


@router.get("/views/default")
def get_default_view(
    module_type: str,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    view = svc.get_default_view(current_user.id, module_type, database_id)
    if view is None:
        raise NotFoundError("No views found")
    return ok("Default view retrieved successfully", view)


@router.get("/views/{view_id}")
def get_view(
    module_type: str,
    view_id: str,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return ok("View retrieved successfully", svc.get_view(current_user.id, module_type, view_id, database_id))


@router.api_route("/views/{view_id}", methods=["PUT", "PATCH"])
def update_view(
    module_type: str,
    view_id: str,
    body: ViewUpdate,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    view = svc.update_view(current_user.id, module_type, view_id, body, database_id)
    return ok("View updated successfully", view)


@router.delete("/views/{view_id}")
def delete_view(
    module_type: str,
    view_id: str,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    svc.delete_view(current_user.id, module_type, view_id, database_id)
    return ok("View deleted successfully")


@router.post("/views/{view_id}/duplicate", status_code=status.HTTP_201_CREATED)
def duplicate_view(
    module_type: str,
    view_id: str,
    body: Optional[ViewDuplicate] = None,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    name = body.name if body else None
    view = svc.duplicate_view(current_user.id, module_type, view_id, name, database_id)
    return ok("View duplicated successfully", view)


# ---------------------------
# Properties
# ---------------------------


@router.get("/properties")
def list_properties(
    module_type: str,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    props = svc.list_properties(current_user.id, module_type, database_id)
    return ok("Properties retrieved successfully", props)


@router.post("/properties", status_code=status.HTTP_201_CREATED)
def add_property(
    module_type: str,
    body: PropertyCreate,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    prop = svc.add_property(current_user.id, module_type, body, database_id)
    return ok("Property added successfully", prop)


@router.api_route("/properties/{property_id}", methods=["PUT", "PATCH"])
def update_property(
    module_type: str,
    property_id: str,
    body: PropertyUpdate,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    prop = svc.update_property(current_user.id, module_type, property_id, body, database_id)
    return ok("Property updated successfully", prop)


@router.delete("/properties/{property_id}")
def delete_property(
    module_type: str,
    property_id: str,
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    if not svc.delete_property(current_user.id, module_type, property_id, database_id):
        reason = svc.property_protection(current_user.id, module_type, property_id, database_id)
        raise InvariantViolationError(reason or f"Cannot remove property '{property_id}'")
    return ok("Property removed successfully")


# ---------------------------
# Records
# ---------------------------


@router.get("/records")
def list_records(
    module_type: str,
    database_id: Optional[str] = DatabaseId,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=20, ge=1, le=100),
    search: Optional[str] = None,
    sort_by: Optional[str] = Query(default=None, alias="sortBy"),
    sort_order: Literal["asc", "desc"] = Query(default="asc", alias="sortOrder"),
    filters: Optional[str] = None,
    view_id: Optional[str] = Query(default=None, alias="viewId"),
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    options = RecordQueryOptions(
        filters=parse_filters(filters),
        sorts=[ViewSort(property_id=sort_by, direction=sort_order)] if sort_by else [],
        search=search,
        page=page,
        limit=limit,
        view_id=view_id,
        database_id=database_id,
    )
    result = svc.get_records(current_user.id, module_type, options, database_id)
    return ok("Records retrieved successfully", result)


@router.post("/records", status_code=status.HTTP_201_CREATED)
def create_record(
    module_type: str,
    data: Dict[str, Any] = Body(...),
    database_id: Optional[str] = DatabaseId,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    record = svc.create_record(current_user.id, module_type, data, database_id)
    return ok("Record created successfully", record)


@router.get("/records/{record_id}")
def get_record(
    module_type: str,
    record_id: str,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return ok("Record retrieved successfully", svc.get_record(current_user.id, module_type, record_id))


@router.api_route("/records/{record_id}", methods=["PUT", "PATCH"])
def update_record(
    module_type: str,
    record_id: str,
    data: Dict[str, Any] = Body(...),
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    record = svc.update_record(current_user.id, module_type, record_id, data)
    return ok("Record updated successfully", record)


@router.delete("/records/{record_id}")
def delete_record(
    module_type: str,
    record_id: str,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    svc.delete_record(current_user.id, module_type, record_id)
    return ok("Record deleted successfully")


# ---------------------------
# Database-scoped view aliases (path segment instead of ?databaseId=)
# ---------------------------


@router.get("/databases/{database_id}/views")
def list_database_views(
    module_type: str,
    database_id: str,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return list_views(module_type, database_id, svc, current_user)


@router.post("/databases/{database_id}/views", status_code=status.HTTP_201_CREATED)
def create_database_view(
    module_type: str,
    database_id: str,
    body: ViewCreate,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return create_view(module_type, body, database_id, svc, current_user)


@router.get("/databases/{database_id}/views/{view_id}")
def get_database_view(
    module_type: str,
    database_id: str,
    view_id: str,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return get_view(module_type, view_id, database_id, svc, current_user)


@router.api_route("/databases/{database_id}/views/{view_id}", methods=["PUT", "PATCH"])
def update_database_view(
    module_type: str,
    database_id: str,
    view_id: str,
    body: ViewUpdate,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return update_view(module_type, view_id, body, database_id, svc, current_user)


@router.delete("/databases/{database_id}/views/{view_id}")
def delete_database_view(
    module_type: str,
    database_id: str,
    view_id: str,
    svc: DocumentViewService = Depends(get_document_view_service),
    current_user: User = Depends(get_current_user),
):
    return delete_view(module_type, view_id, database_id, svc, current_user)
