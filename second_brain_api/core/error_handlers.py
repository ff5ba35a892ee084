# File: /second_brain_api/core/error_handlers.py | Version: 2.0 | Title: Standardized Error Handlers ({success:false, message, error})
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from second_brain_api.core.exceptions import AppError

logger = logging.getLogger(__name__)

_CODE_MAP = {
    400: "BAD_REQUEST",
    401: "UNAUTHORIZED",
    403: "FORBIDDEN",
    404: "NOT_FOUND",
    405: "METHOD_NOT_ALLOWED",
    409: "CONFLICT",
    422: "UNPROCESSABLE_ENTITY",
    429: "TOO_MANY_REQUESTS",
    500: "INTERNAL_SERVER_ERROR",
    502: "BAD_GATEWAY",
    503: "SERVICE_UNAVAILABLE",
}


def error_body(
    status_code: int, message: str, code: Optional[str] = None, **extra: Any
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "success": False,
        "message": message,
        "error": code or _CODE_MAP.get(status_code, "ERROR"),
    }
    body.update(extra)
    return body


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def _app_exc(_req: Request, exc: AppError):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, exc.message, exc.code),
        )

    @app.exception_handler(StarletteHTTPException)
    async def _http_exc(_req: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content=error_body(exc.status_code, str(exc.detail)),
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def _validation_exc(_req: Request, exc: RequestValidationError):
        # Field locations only; raw input values stay out of the response
        fields = [
            ".".join(str(p) for p in err.get("loc", ()))
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=422,
            content=error_body(422, "Validation error", "VALIDATION_ERROR", fields=fields),
        )

    @app.exception_handler(Exception)
    async def _unhandled(req: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", req.method, req.url.path)
        return JSONResponse(status_code=500, content=error_body(500, "Internal server error"))
