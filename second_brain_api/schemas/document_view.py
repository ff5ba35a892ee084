# File: /second_brain_api/schemas/document_view.py | Version: 1.0 | Title: Property / View / DocumentView schemas (camelCase JSON)
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from second_brain_api.schemas._base import CamelModel

PropertyType = Literal[
    "text",
    "number",
    "date",
    "select",
    "multiSelect",
    "checkbox",
    "url",
    "email",
    "phone",
    "file",
    "relation",
]

ViewType = Literal["TABLE", "BOARD", "KANBAN", "GALLERY", "LIST", "CALENDAR", "TIMELINE"]

PermissionLevel = Literal["read", "write", "admin"]


# ---------------------------
# Property
# ---------------------------


class PropertyOption(CamelModel):
    name: str
    color: Optional[str] = None
    value: Any = None


class PropertyValidation(CamelModel):
    min: Optional[float] = None
    max: Optional[float] = None
    pattern: Optional[str] = None
    message: Optional[str] = None


class Property(CamelModel):
    id: str
    name: str
    type: PropertyType
    description: Optional[str] = None
    required: bool = False
    frozen: bool = False
    visible: bool = True
    order: int = 0
    width: int = 150
    default_value: Any = None
    options: Optional[List[PropertyOption]] = None
    validation: Optional[PropertyValidation] = None
    module_specific: Optional[Dict[str, Any]] = None


class PropertyCreate(CamelModel):
    """All fields optional; the service fills id, name, type, order and display defaults."""

    id: Optional[str] = None
    name: Optional[str] = None
    type: Optional[PropertyType] = None
    description: Optional[str] = None
    required: Optional[bool] = None
    frozen: Optional[bool] = None
    visible: Optional[bool] = None
    order: Optional[int] = None
    width: Optional[int] = None
    default_value: Any = None
    options: Optional[List[PropertyOption]] = None
    validation: Optional[PropertyValidation] = None
    module_specific: Optional[Dict[str, Any]] = None


class PropertyUpdate(CamelModel):
    name: Optional[str] = None
    type: Optional[PropertyType] = None
    description: Optional[str] = None
    required: Optional[bool] = None
    frozen: Optional[bool] = None
    visible: Optional[bool] = None
    order: Optional[int] = None
    width: Optional[int] = None
    default_value: Any = None
    options: Optional[List[PropertyOption]] = None
    validation: Optional[PropertyValidation] = None
    module_specific: Optional[Dict[str, Any]] = None


# ---------------------------
# View
# ---------------------------


class ViewFilter(CamelModel):
    property_id: str
    operator: str
    value: Any = None
    enabled: bool = True


class ViewSort(CamelModel):
    property_id: str
    direction: Literal["asc", "desc"] = "asc"
    order: int = 0
    enabled: bool = True


class PermissionEntry(CamelModel):
    user_id: str
    permission: PermissionLevel


class View(CamelModel):
    id: str
    name: str
    type: ViewType = "TABLE"
    description: Optional[str] = None
    is_default: bool = False
    is_public: bool = False
    filters: List[ViewFilter] = Field(default_factory=list)
    sorts: List[ViewSort] = Field(default_factory=list)
    group_by: Optional[str] = None
    visible_properties: List[str] = Field(default_factory=list)
    custom_properties: List[Property] = Field(default_factory=list)
    config: Dict[str, Any] = Field(default_factory=dict)
    permissions: List[PermissionEntry] = Field(default_factory=list)
    created_by: Optional[str] = None
    last_edited_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_system_view(self) -> bool:
        return bool(self.config.get("isSystemView"))


class ViewCreate(CamelModel):
    name: str = "New View"
    type: ViewType = "TABLE"
    description: Optional[str] = None
    is_default: bool = False
    is_public: bool = False
    filters: List[ViewFilter] = Field(default_factory=list)
    sorts: List[ViewSort] = Field(default_factory=list)
    group_by: Optional[str] = None
    visible_properties: List[str] = Field(default_factory=list)
    custom_properties: List[Property] = Field(default_factory=list)
    config: Dict[str, Any] = Field(default_factory=dict)
    permissions: List[PermissionEntry] = Field(default_factory=list)


class ViewUpdate(CamelModel):
    name: Optional[str] = None
    type: Optional[ViewType] = None
    description: Optional[str] = None
    is_default: Optional[bool] = None
    is_public: Optional[bool] = None
    filters: Optional[List[ViewFilter]] = None
    sorts: Optional[List[ViewSort]] = None
    group_by: Optional[str] = None
    visible_properties: Optional[List[str]] = None
    custom_properties: Optional[List[Property]] = None
    config: Optional[Dict[str, Any]] = None
    permissions: Optional[List[PermissionEntry]] = None


class ViewDuplicate(CamelModel):
    name: Optional[str] = None


# ---------------------------
# DocumentView aggregate
# ---------------------------


class DocumentViewOut(CamelModel):
    id: str
    user_id: str
    module_type: str
    database_id: str
    name: str
    description: Optional[str] = None
    icon: Optional[str] = None
    properties: List[Property] = Field(default_factory=list)
    views: List[View] = Field(default_factory=list)
    required_properties: List[str] = Field(default_factory=list)
    frozen_properties: List[str] = Field(default_factory=list)
    permissions: List[PermissionEntry] = Field(default_factory=list)
    is_public: bool = False
    is_default: bool = True
    frozen: bool = False
    frozen_at: Optional[datetime] = None
    frozen_by: Optional[str] = None
    frozen_reason: Optional[str] = None
    created_by: Optional[str] = None
    last_edited_by: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
