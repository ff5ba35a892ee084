# File: /second_brain_api/services/document_view_rules.py | Version: 1.0 | Title: Schema / view protection rules (single home for every guard)
from __future__ import annotations

from typing import Any, Dict, Iterable, Optional, Sequence

from second_brain_api.core.exceptions import InvariantViolationError
from second_brain_api.schemas.document_view import Property, View


class DocumentViewRules:
    """
    Guards applied before a DocumentView mutation is persisted.

    Each check raises InvariantViolationError naming the rule it enforces,
    except `removal_blocked_by`, which reports the rule so the caller can turn
    a protected deletion into a plain `False`.
    """

    @staticmethod
    def ensure_unique_property_id(properties: Iterable[Property], property_id: str) -> None:
        if any(p.id == property_id for p in properties):
            raise InvariantViolationError(
                f"Property id '{property_id}' already exists; property ids must be unique"
            )

    @staticmethod
    def ensure_not_unfrozen(
        frozen_properties: Sequence[str], property_id: str, changes: Dict[str, Any]
    ) -> None:
        if property_id in frozen_properties and changes.get("frozen") is False:
            raise InvariantViolationError(
                f"Cannot unfreeze system-frozen property '{property_id}'"
            )

    @staticmethod
    def removal_blocked_by(
        required_properties: Sequence[str], frozen_properties: Sequence[str], property_id: str
    ) -> Optional[str]:
        if property_id in required_properties:
            return f"Cannot remove required property '{property_id}'"
        if property_id in frozen_properties:
            return f"Cannot remove frozen property '{property_id}'"
        return None

    @staticmethod
    def ensure_view_deletable(view: View) -> None:
        if view.is_default:
            raise InvariantViolationError(f"Cannot delete default view '{view.id}'")
        if view.is_system_view:
            raise InvariantViolationError(f"Cannot delete system view '{view.id}'")
