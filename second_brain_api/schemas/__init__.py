# File: /second_brain_api/schemas/__init__.py | Version: 2.0 | Path: /second_brain_api/schemas/__init__.py
from . import admin, auth, document_view, habits, module_config, user

__all__ = ["admin", "auth", "document_view", "habits", "module_config", "user"]
