# File: /second_brain_api/models/record.py | Version: 1.0 | Title: Generic module record (property bag per user/module)
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Optional

from sqlalchemy import JSON, DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from second_brain_api.db.base_class import Base, gen_uuid, utcnow


class Record(Base):
    __tablename__ = "records"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    module_type: Mapped[str] = mapped_column(String(32), nullable=False)
    database_id: Mapped[str] = mapped_column(String(255), nullable=False)
    properties: Mapped[Dict[str, Any]] = mapped_column(JSON, nullable=False, default=dict)

    created_by: Mapped[str] = mapped_column(String, nullable=False)
    last_edited_by: Mapped[Optional[str]] = mapped_column(String)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        Index("ix_records_user_module", "user_id", "module_type"),
        Index("ix_records_user_module_database", "user_id", "module_type", "database_id"),
    )
