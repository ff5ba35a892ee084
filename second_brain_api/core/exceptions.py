# File: /second_brain_api/core/exceptions.py | Version: 1.0 | Title: Application error taxonomy
from __future__ import annotations

from typing import Any, Dict, Optional


class AppError(Exception):
    """
    Base for every error the API renders itself.

    Carries an HTTP status and a stable machine code; the message is what the
    client sees, so it must never contain internals.
    """

    status_code: int = 500
    code: str = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        *,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        if code is not None:
            self.code = code
        self.details = details


class ConfigurationError(AppError):
    """Unknown or unregistered module type."""

    status_code = 400
    code = "MODULE_NOT_REGISTERED"


class NotFoundError(AppError):
    status_code = 404
    code = "NOT_FOUND"


class InvariantViolationError(AppError):
    """A request would break a schema/view protection rule."""

    status_code = 409
    code = "INVARIANT_VIOLATION"


class ServiceUnavailableError(AppError):
    """A module's record service is missing or lacks an operation (deployment defect)."""

    status_code = 500
    code = "SERVICE_UNAVAILABLE"


class OperationFailedError(AppError):
    status_code = 500
    code = "OPERATION_FAILED"


class BadRequestError(AppError):
    status_code = 400
    code = "BAD_REQUEST"


class ForbiddenError(AppError):
    status_code = 403
    code = "FORBIDDEN"
