# File: /tests/test_document_view_service.py | Version: 1.0 | Title: DocumentViewService (resolution, views, properties, frozen config)
import uuid

import pytest

from second_brain_api.core.exceptions import ConfigurationError, InvariantViolationError, NotFoundError
from second_brain_api.core.registry import ModuleConfigRegistry
from second_brain_api.module_configs import build_default_registry
from second_brain_api.module_configs.factory import create_module_config, prop, view
from second_brain_api.schemas.document_view import (
    PropertyCreate,
    PropertyUpdate,
    ViewCreate,
    ViewFilter,
    ViewUpdate,
)
from second_brain_api.services.document_view import DocumentViewService
from second_brain_api.services.record_service import build_record_services


@pytest.fixture()
def registry():
    return build_default_registry()


@pytest.fixture()
def svc(db_session, registry):
    return DocumentViewService(db_session, registry, build_record_services(registry))


@pytest.fixture()
def uid():
    return str(uuid.uuid4())


# ---------------------------
# Resolution
# ---------------------------


def test_first_access_seeds_from_module_defaults(svc, registry, uid):
    dv = svc.get_or_create_document_view(uid, "tasks")
    config = registry.get_module_config("tasks")

    assert dv.user_id == uid
    assert dv.module_type == "tasks"
    assert dv.database_id == "tasks-main-db"
    assert dv.name == "Tasks"
    assert [p.id for p in dv.properties] == [p.id for p in config.data.default_properties]
    assert [v.id for v in dv.views] == [v.id for v in config.data.default_views]
    assert dv.required_properties == ["title", "status", "priority"]
    assert [(p.user_id, p.permission) for p in dv.permissions] == [(uid, "admin")]
    assert dv.is_public is False and dv.is_default is True
    assert dv.created_by == uid and dv.last_edited_by == uid


def test_second_access_returns_same_aggregate(svc, uid):
    first = svc.get_or_create_document_view(uid, "notes")
    second = svc.get_or_create_document_view(uid, "notes")
    assert first.id == second.id


def test_database_id_and_user_scope_separate_aggregates(svc, uid):
    main = svc.get_or_create_document_view(uid, "databases")
    other = svc.get_or_create_document_view(uid, "databases", "reading-list")
    someone_else = svc.get_or_create_document_view(str(uuid.uuid4()), "databases")
    assert other.database_id == "reading-list"
    assert len({main.id, other.id, someone_else.id}) == 3


def test_unknown_module_is_rejected(svc, uid):
    with pytest.raises(ConfigurationError):
        svc.get_or_create_document_view(uid, "spaceships")
    with pytest.raises(ConfigurationError):
        svc.get_frozen_config("spaceships")


def test_existing_aggregate_is_a_snapshot(db_session, registry, uid):
    svc = DocumentViewService(db_session, registry, {})
    before = svc.get_or_create_document_view(uid, "tasks")

    registry.register(
        create_module_config(
            module_type="tasks",
            display_name="Chore",
            display_name_plural="Chores",
            description="changed",
            icon="!",
            model_name="Chore",
            properties=[prop("title", "Title", "text")],
            views=[view("only", "Only", "LIST", is_default=True)],
        )
    )
    after = svc.get_or_create_document_view(uid, "tasks")
    assert after.name == "Tasks"
    assert len(after.properties) == len(before.properties)


# ---------------------------
# Views
# ---------------------------


def test_default_view_and_missing_view(svc, uid):
    assert svc.get_default_view(uid, "tasks").id == "all-tasks"
    with pytest.raises(NotFoundError):
        svc.get_view(uid, "tasks", "nope")


def test_create_view_applies_defaults_and_audit(svc, uid):
    created = svc.create_view(uid, "tasks", ViewCreate())
    assert created.name == "New View"
    assert created.type == "TABLE"
    assert created.is_default is False
    assert created.created_by == uid
    assert created.created_at is not None
    assert svc.get_view(uid, "tasks", created.id).name == "New View"


def test_update_view_applies_only_supplied_fields(svc, uid):
    before = svc.get_view(uid, "tasks", "active-tasks")
    updated = svc.update_view(uid, "tasks", "active-tasks", ViewUpdate(name="Open work"))
    assert updated.id == "active-tasks"
    assert updated.name == "Open work"
    assert updated.filters == before.filters
    assert updated.sorts == before.sorts
    assert svc.get_view(uid, "tasks", "active-tasks").name == "Open work"


def test_update_view_can_clear_group_by(svc, uid):
    updated = svc.update_view(
        uid, "tasks", "kanban-board", ViewUpdate.model_validate({"groupBy": None})
    )
    assert updated.group_by is None


def test_update_missing_view_is_not_found(svc, uid):
    with pytest.raises(NotFoundError):
        svc.update_view(uid, "tasks", "ghost", ViewUpdate(name="x"))


def test_delete_view_guards(svc, uid):
    with pytest.raises(InvariantViolationError):
        svc.delete_view(uid, "tasks", "all-tasks")  # default
    with pytest.raises(InvariantViolationError):
        svc.delete_view(uid, "tasks", "kanban-board")  # system view
    with pytest.raises(NotFoundError):
        svc.delete_view(uid, "tasks", "ghost")

    custom = svc.create_view(uid, "tasks", ViewCreate(name="Mine"))
    assert svc.delete_view(uid, "tasks", custom.id) is True
    assert custom.id not in [v.id for v in svc.list_views(uid, "tasks")]


def test_duplicate_view_copies_configuration(svc, uid):
    source = svc.get_view(uid, "tasks", "all-tasks")
    dup = svc.duplicate_view(uid, "tasks", "all-tasks")
    assert dup.id != source.id
    assert dup.name == "All Tasks (Copy)"
    assert dup.is_default is False
    assert dup.sorts == source.sorts
    assert dup.visible_properties == source.visible_properties

    named = svc.duplicate_view(uid, "tasks", "all-tasks", "Everything")
    assert named.name == "Everything"
    assert len(svc.list_views(uid, "tasks")) == 6


# ---------------------------
# Properties
# ---------------------------


def test_add_property_defaults_and_default_view_visibility(svc, uid):
    count = len(svc.list_properties(uid, "tasks"))
    added = svc.add_property(uid, "tasks", PropertyCreate())
    assert added.id
    assert added.name == "New Property"
    assert added.type == "text"
    assert added.order == count
    assert added.visible is True
    assert added.width == 150
    assert added.id in svc.get_default_view(uid, "tasks").visible_properties
    assert added.id not in svc.get_view(uid, "tasks", "active-tasks").visible_properties


def test_add_property_with_explicit_fields(svc, uid):
    added = svc.add_property(
        uid,
        "tasks",
        PropertyCreate.model_validate(
            {"id": "effort", "name": "Effort", "type": "number", "order": 0, "visible": False}
        ),
    )
    assert (added.id, added.type, added.order, added.visible) == ("effort", "number", 0, False)


def test_add_property_rejects_duplicate_id(svc, uid):
    with pytest.raises(InvariantViolationError):
        svc.add_property(uid, "tasks", PropertyCreate(id="title"))


def test_update_property(svc, uid):
    updated = svc.update_property(uid, "tasks", "title", PropertyUpdate(name="Headline"))
    assert updated.name == "Headline"
    assert updated.frozen is True
    with pytest.raises(NotFoundError):
        svc.update_property(uid, "tasks", "ghost", PropertyUpdate(name="x"))


def test_frozen_property_cannot_be_unfrozen(svc, uid):
    with pytest.raises(InvariantViolationError):
        svc.update_property(uid, "tasks", "status", PropertyUpdate(frozen=False))
    # non-frozen properties may toggle freely
    assert svc.update_property(uid, "tasks", "assignee", PropertyUpdate(frozen=True)).frozen is True


def test_delete_property_rules(svc, uid):
    assert svc.delete_property(uid, "tasks", "title") is False  # required
    assert svc.delete_property(uid, "tasks", "createdAt") is False  # frozen
    assert "required" in svc.property_protection(uid, "tasks", "title")
    with pytest.raises(NotFoundError):
        svc.delete_property(uid, "tasks", "ghost")

    assert svc.delete_property(uid, "tasks", "assignee") is True
    assert "assignee" not in [p.id for p in svc.list_properties(uid, "tasks")]
    # views keep their (now dangling) reference
    assert "assignee" in svc.get_view(uid, "tasks", "all-tasks").visible_properties


# ---------------------------
# Frozen config
# ---------------------------


def test_frozen_config_explicit_policy(svc):
    fc = svc.get_frozen_config("tasks")
    assert fc.description == "Task management frozen configuration"
    assert "title" in [r.property_id for r in fc.frozen_properties]


def test_frozen_config_fallback_from_frozen_list(db_session):
    registry = ModuleConfigRegistry()
    registry.register(
        create_module_config(
            module_type="notes",
            display_name="Note",
            display_name_plural="Notes",
            description="notes",
            icon="n",
            model_name="Note",
            properties=[prop("title", "Title", "text", frozen=True)],
            views=[view("all", "All", "TABLE", is_default=True)],
            frozen=["title"],
        )
    )
    fc = DocumentViewService(db_session, registry, {}).get_frozen_config("notes")
    assert fc.description == "Frozen configuration for Notes"
    assert [(r.property_id, r.reason, r.allow_delete) for r in fc.frozen_properties] == [
        ("title", "System property", False)
    ]


def test_view_filter_defaults():
    f = ViewFilter.model_validate({"propertyId": "status", "operator": "equals", "value": "x"})
    assert f.enabled is True
