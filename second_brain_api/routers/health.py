# File: /second_brain_api/routers/health.py | Version: 2.0 | Title: Health & readiness endpoints (DB + module registry)
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text

from second_brain_api.core.registry import ModuleConfigRegistry, get_registry
from second_brain_api.db.session import engine

router = APIRouter(tags=["Health"])
log = logging.getLogger(__name__)


@router.get("/healthz")
def healthz() -> dict:
    """
    Liveness probe: returns 200 if the app can serve requests.
    """
    return {"status": "ok"}


@router.get("/readyz")
def readyz(registry: ModuleConfigRegistry = Depends(get_registry)):
    """
    Readiness probe: 200 when the DB answers SELECT 1 and at least one module
    is registered, else 503.
    """
    checks = {"db": "ok", "modules": len(registry.get_module_types())}
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception:  # pragma: no cover (error path is best-effort)
        log.exception("Readiness DB check failed")
        checks["db"] = "error"

    if checks["db"] != "ok" or not checks["modules"]:
        return JSONResponse({"status": "degraded", **checks}, status_code=503)
    return {"status": "ok", **checks}
