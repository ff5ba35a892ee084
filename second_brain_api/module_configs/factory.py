# File: /second_brain_api/module_configs/factory.py | Version: 1.0 | Title: Builders for declarative module configs
from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple

from second_brain_api.schemas.document_view import Property, PropertyOption, View, ViewFilter, ViewSort
from second_brain_api.schemas.module_config import (
    Capabilities,
    FrozenConfig,
    FrozenPropertyRule,
    ModuleConfig,
    ModuleData,
    ModuleServices,
    UiConfig,
)

SYSTEM_VIEW_CONFIG = {"canEdit": False, "canDelete": False, "isSystemView": True}


def options(*entries: Tuple[str, Optional[str], Any]) -> List[PropertyOption]:
    """options(("Low", "#green", "low"), ...) -> [PropertyOption, ...]"""
    return [PropertyOption(name=n, color=c, value=v) for n, c, v in entries]


def prop(
    property_id: str,
    name: str,
    kind: str,
    *,
    order: int = 0,
    description: Optional[str] = None,
    required: bool = False,
    frozen: bool = False,
    default_value: Any = None,
    options: Optional[List[PropertyOption]] = None,
    validation: Optional[Dict[str, Any]] = None,
) -> Property:
    return Property(
        id=property_id,
        name=name,
        type=kind,
        description=description,
        required=required,
        frozen=frozen,
        order=order,
        default_value=default_value,
        options=options,
        validation=validation,
        visible=True,
        width=150,
    )


def where(property_id: str, operator: str, value: Any = None) -> ViewFilter:
    return ViewFilter(property_id=property_id, operator=operator, value=value, enabled=True)


def by(property_id: str, direction: str = "asc", order: int = 0) -> ViewSort:
    return ViewSort(property_id=property_id, direction=direction, order=order)


def view(
    view_id: str,
    name: str,
    kind: str,
    *,
    description: Optional[str] = None,
    is_default: bool = False,
    filters: Sequence[ViewFilter] = (),
    sorts: Sequence[ViewSort] = (),
    group_by: Optional[str] = None,
    visible: Sequence[str] = (),
    config: Optional[Dict[str, Any]] = None,
) -> View:
    """System view: cannot be deleted unless `config` overrides isSystemView."""
    return View(
        id=view_id,
        name=name,
        type=kind,
        description=description,
        is_default=is_default,
        is_public=False,
        filters=list(filters),
        sorts=list(sorts),
        group_by=group_by,
        visible_properties=list(visible),
        custom_properties=[],
        config={**SYSTEM_VIEW_CONFIG, **(config or {})},
        permissions=[],
    )


def frozen_rules(
    module_type: str, description: str, rules: Iterable[Tuple[str, str, bool, bool, bool]]
) -> FrozenConfig:
    """rules: (property_id, reason, allow_edit, allow_hide, allow_delete)"""
    return FrozenConfig(
        view_type=module_type,
        module_type=module_type,
        description=description,
        frozen_properties=[
            FrozenPropertyRule(
                property_id=pid,
                reason=reason,
                allow_edit=edit,
                allow_hide=hide,
                allow_delete=delete,
            )
            for pid, reason, edit, hide, delete in rules
        ],
    )


def create_module_config(
    *,
    module_type: str,
    display_name: str,
    display_name_plural: str,
    description: str,
    icon: str,
    model_name: str,
    properties: Sequence[Property],
    views: Sequence[View],
    required: Sequence[str] = (),
    frozen: Sequence[str] = (),
    supported_view_types: Optional[Sequence[str]] = None,
    default_view_type: str = "TABLE",
    capabilities: Optional[Dict[str, bool]] = None,
    frozen_config: Optional[FrozenConfig] = None,
) -> ModuleConfig:
    """Fill capability/UI defaults and derive the record-service locator and database id."""
    ui: Dict[str, Any] = {"default_view_type": default_view_type}
    if supported_view_types is not None:
        ui["supported_view_types"] = list(supported_view_types)
    return ModuleConfig(
        module_type=module_type,
        display_name=display_name,
        display_name_plural=display_name_plural,
        description=description,
        icon=icon,
        capabilities=Capabilities(**(capabilities or {})),
        ui=UiConfig(**ui),
        data=ModuleData(
            default_properties=list(properties),
            default_views=list(views),
            required_properties=list(required),
            frozen_properties=list(frozen),
        ),
        services=ModuleServices(
            record_service=f"sql:{module_type}",
            model_name=model_name,
            database_id=f"{module_type}-main-db",
        ),
        frozen_config=frozen_config,
    )


SYSTEM_TIMESTAMP_RULES = (
    ("createdAt", "System timestamp", False, True, False),
    ("updatedAt", "System timestamp", False, True, False),
)


def core_rule(property_id: str, reason: str) -> Tuple[str, str, bool, bool, bool]:
    """Editable, never hidden or deleted."""
    return (property_id, reason, True, False, False)
