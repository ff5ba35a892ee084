# File: /second_brain_api/core/responses.py | Version: 1.0 | Title: Success envelope helper
from __future__ import annotations

from typing import Any, Dict

from fastapi.encoders import jsonable_encoder


def ok(message: str, data: Any = None) -> Dict[str, Any]:
    """Wrap a payload as {success, message, data}; pydantic models serialize by alias (camelCase)."""
    return {
        "success": True,
        "message": message,
        "data": jsonable_encoder(data, by_alias=True),
    }
