# File: /second_brain_api/core/registry.py | Version: 1.0 | Title: Module Config Registry (init-once, read-many)
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Dict, List, Optional

from fastapi import Request

from second_brain_api.core.exceptions import ConfigurationError
from second_brain_api.schemas.module_config import ModuleConfig

if TYPE_CHECKING:  # pragma: no cover
    from second_brain_api.services.record_service import RecordService

logger = logging.getLogger(__name__)


class ModuleType(str, Enum):
    TASKS = "tasks"
    PEOPLE = "people"
    NOTES = "notes"
    GOALS = "goals"
    BOOKS = "books"
    HABITS = "habits"
    PROJECTS = "projects"
    JOURNALS = "journals"
    MOODS = "moods"
    FINANCE = "finance"
    CONTENT = "content"
    DATABASES = "databases"


def _key(module_type) -> str:
    return str(getattr(module_type, "value", module_type))


class ModuleConfigRegistry:
    """
    Map of module type -> ModuleConfig.

    Populated once while the app is being built and read concurrently after
    that; `register` is not meant to be called while requests are in flight.
    """

    def __init__(self) -> None:
        self._configs: Dict[str, ModuleConfig] = {}

    def register(self, config: ModuleConfig) -> None:
        key = _key(config.module_type)
        if key in self._configs:
            logger.info("Overwriting module config", extra={"module_type": key})
        self._configs[key] = config

    def get(self, module_type) -> Optional[ModuleConfig]:
        return self._configs.get(_key(module_type))

    def has(self, module_type) -> bool:
        return _key(module_type) in self._configs

    def get_all(self) -> List[ModuleConfig]:
        return list(self._configs.values())

    def get_module_types(self) -> List[str]:
        return list(self._configs.keys())

    def get_module_config(self, module_type) -> ModuleConfig:
        config = self.get(module_type)
        if config is None:
            raise ConfigurationError(f"Module '{_key(module_type)}' is not registered")
        return config


# ---------------------------
# FastAPI dependencies
# ---------------------------


def get_registry(request: Request) -> ModuleConfigRegistry:
    return request.app.state.registry


def get_record_services(request: Request) -> Dict[str, "RecordService"]:
    return request.app.state.record_services
