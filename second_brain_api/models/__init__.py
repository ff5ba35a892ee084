# File: /second_brain_api/models/__init__.py | Version: 2.0 | Title: Models Package Exports
from .document_view import DocumentView
from .record import Record
from .user import User

__all__ = ["User", "DocumentView", "Record"]
