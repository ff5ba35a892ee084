# File: second_brain_api/db/__init__.py | Version: 2.0 | Path: /second_brain_api/db/__init__.py
# Re-export commonly used items so tests can do: from second_brain_api.db import Base, get_db
# Importing the models registers every table on Base.metadata before create_all runs
import second_brain_api.models  # noqa: F401

from .base_class import Base
from .session import SessionLocal, engine, get_db

__all__ = ["Base", "get_db", "SessionLocal", "engine"]
