# File: /second_brain_api/routers/__init__.py | Version: 2.0 | Path: /second_brain_api/routers/__init__.py
"""
Router package exports.

Keeping these explicit helps static analyzers and avoids surprises
when importing submodules like: `from second_brain_api.routers import document_view`.
"""
from . import admin, auth, auth_extras, auth_oauth, document_view, habits, health, stats

__all__ = ["admin", "auth", "auth_extras", "auth_oauth", "document_view", "habits", "health", "stats"]
