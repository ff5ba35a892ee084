# File: /second_brain_api/main.py | Version: 2.0 | Title: FastAPI App (registry + record services on app.state, router includes, std errors)
from __future__ import annotations

import importlib
import importlib.util
import logging
from typing import Optional

from fastapi import FastAPI

from second_brain_api.core.config import settings
from second_brain_api.core.error_handlers import register_exception_handlers
from second_brain_api.core.logging import configure_logging
from second_brain_api.core.registry import ModuleConfigRegistry
from second_brain_api.middleware.rate_limit import MemoryRateLimiter
from second_brain_api.module_configs import build_default_registry
from second_brain_api.observability.sentry import init_sentry_if_configured
from second_brain_api.services.record_service import build_record_services

log = logging.getLogger(__name__)

ROUTERS = (
    "second_brain_api.routers.auth",
    "second_brain_api.routers.auth_extras",
    "second_brain_api.routers.auth_oauth",
    "second_brain_api.routers.document_view",
    "second_brain_api.routers.habits",
    "second_brain_api.routers.stats",
    "second_brain_api.routers.admin",
    "second_brain_api.routers.health",
)


def include_if_exists(app: FastAPI, module_path: str, attr_name: str = "router") -> bool:
    spec = importlib.util.find_spec(module_path)
    if not spec:
        return False
    mod = importlib.import_module(module_path)
    router = getattr(mod, attr_name, None)
    if router is not None:
        app.include_router(router)
        return True
    return False


def create_app(registry: Optional[ModuleConfigRegistry] = None) -> FastAPI:
    """
    Build the API. The registry and the record-service table are fixed here,
    before any request is served, and only read afterwards.
    """
    app = FastAPI(title=f"Second Brain API ({settings.ENVIRONMENT})")
    app.state.registry = registry or build_default_registry()
    app.state.record_services = build_record_services(app.state.registry)

    app.add_middleware(MemoryRateLimiter)  # no-op unless RATE_LIMIT_ENABLED=true
    register_exception_handlers(app)

    for module_path in ROUTERS:
        include_if_exists(app, module_path)

    log.info(
        "App ready",
        extra={"operation": "startup", "module_type": ",".join(app.state.registry.get_module_types())},
    )
    return app


# Initialize logging & observability
configure_logging()
init_sentry_if_configured()

app = create_app()
