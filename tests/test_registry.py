# File: /tests/test_registry.py | Version: 1.0 | Title: Module config registry
import pytest

from second_brain_api.core.exceptions import ConfigurationError
from second_brain_api.core.registry import ModuleConfigRegistry, ModuleType
from second_brain_api.module_configs import BUILTIN_MODULE_CONFIGS, build_default_registry
from second_brain_api.module_configs.factory import create_module_config, prop, view


def _config(module_type="tasks", name="Custom"):
    return create_module_config(
        module_type=module_type,
        display_name=name,
        display_name_plural=f"{name}s",
        description="custom",
        icon="*",
        model_name=name,
        properties=[prop("title", "Title", "text", required=True)],
        views=[view("all", "All", "TABLE", is_default=True, visible=["title"])],
        required=["title"],
    )


def test_default_registry_has_all_twelve_modules():
    registry = build_default_registry()
    assert len(BUILTIN_MODULE_CONFIGS) == 12
    assert set(registry.get_module_types()) == {m.value for m in ModuleType}
    for mt in ModuleType:
        assert registry.has(mt)
        assert registry.get_module_config(mt.value).module_type == mt.value


def test_get_unknown_module_returns_none_and_strict_lookup_raises():
    registry = build_default_registry()
    assert registry.get("spaceships") is None
    assert registry.has("spaceships") is False
    with pytest.raises(ConfigurationError) as exc:
        registry.get_module_config("spaceships")
    assert "spaceships" in exc.value.message
    assert exc.value.status_code == 400


def test_register_overwrites_last_write_wins():
    registry = ModuleConfigRegistry()
    registry.register(_config(name="First"))
    registry.register(_config(name="Second"))
    assert registry.get_module_types() == ["tasks"]
    assert registry.get("tasks").display_name == "Second"
    assert len(registry.get_all()) == 1


def test_empty_registry_rejects_known_enum_member():
    registry = ModuleConfigRegistry()
    with pytest.raises(ConfigurationError):
        registry.get_module_config(ModuleType.NOTES)
