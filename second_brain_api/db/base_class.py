# File: second_brain_api/db/base_class.py | Version: 2.0 | Path: /second_brain_api/db/base_class.py
from datetime import UTC, datetime
from uuid import uuid4

from sqlalchemy.orm import declarative_base

# Single, authoritative Base for all models
Base = declarative_base()


def gen_uuid() -> str:
    return str(uuid4())


def utcnow() -> datetime:
    return datetime.now(UTC)
