# File: /second_brain_api/schemas/module_config.py | Version: 1.0 | Title: Module configuration schemas (registry entries)
from __future__ import annotations

from typing import List, Optional

from pydantic import ConfigDict, Field

from second_brain_api.schemas._base import CamelModel
from second_brain_api.schemas.document_view import Property, View, ViewType


class _Frozen(CamelModel):
    model_config = ConfigDict(frozen=True)


class Capabilities(_Frozen):
    can_create: bool = True
    can_edit: bool = True
    can_delete: bool = True
    can_share: bool = True
    can_export: bool = True
    can_import: bool = True


class UiConfig(_Frozen):
    enable_views: bool = True
    enable_search: bool = True
    enable_filters: bool = True
    enable_sorts: bool = True
    enable_grouping: bool = True
    supported_view_types: List[ViewType] = Field(
        default_factory=lambda: ["TABLE", "BOARD", "GALLERY", "LIST", "CALENDAR"]
    )
    default_view_type: ViewType = "TABLE"


class ModuleData(_Frozen):
    default_properties: List[Property] = Field(default_factory=list)
    default_views: List[View] = Field(default_factory=list)
    required_properties: List[str] = Field(default_factory=list)
    frozen_properties: List[str] = Field(default_factory=list)


class ModuleServices(_Frozen):
    record_service: str
    model_name: str
    database_id: str


class FrozenPropertyRule(_Frozen):
    property_id: str
    reason: Optional[str] = None
    allow_edit: bool = False
    allow_hide: bool = False
    allow_delete: bool = False


class FrozenConfig(_Frozen):
    view_type: str
    module_type: str
    description: str
    frozen_properties: List[FrozenPropertyRule] = Field(default_factory=list)


class ModuleConfig(_Frozen):
    module_type: str
    display_name: str
    display_name_plural: str
    description: str
    icon: str
    capabilities: Capabilities = Field(default_factory=Capabilities)
    ui: UiConfig = Field(default_factory=UiConfig)
    data: ModuleData
    services: ModuleServices
    frozen_config: Optional[FrozenConfig] = None
