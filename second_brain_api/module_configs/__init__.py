# File: /second_brain_api/module_configs/__init__.py | Version: 1.0 | Title: Built-in module configs + default registry
from second_brain_api.core.registry import ModuleConfigRegistry
from second_brain_api.module_configs.books import books_config
from second_brain_api.module_configs.content import content_config
from second_brain_api.module_configs.databases import databases_config
from second_brain_api.module_configs.finance import finance_config
from second_brain_api.module_configs.goals import goals_config
from second_brain_api.module_configs.habits import habits_config
from second_brain_api.module_configs.journals import journals_config
from second_brain_api.module_configs.moods import moods_config
from second_brain_api.module_configs.notes import notes_config
from second_brain_api.module_configs.people import people_config
from second_brain_api.module_configs.projects import projects_config
from second_brain_api.module_configs.tasks import tasks_config

BUILTIN_MODULE_CONFIGS = (
    tasks_config,
    people_config,
    notes_config,
    goals_config,
    books_config,
    habits_config,
    projects_config,
    journals_config,
    moods_config,
    finance_config,
    content_config,
    databases_config,
)


def build_default_registry() -> ModuleConfigRegistry:
    registry = ModuleConfigRegistry()
    for config in BUILTIN_MODULE_CONFIGS:
        registry.register(config)
    return registry


__all__ = ["BUILTIN_MODULE_CONFIGS", "build_default_registry"]
