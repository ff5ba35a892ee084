# File: /second_brain_api/models/document_view.py | Version: 1.0 | Title: Persisted DocumentView aggregate (one per user/module/database)
from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from second_brain_api.db.base_class import Base, gen_uuid, utcnow


class DocumentView(Base):
    __tablename__ = "document_views"

    id: Mapped[str] = mapped_column(String, primary_key=True, default=gen_uuid)
    user_id: Mapped[str] = mapped_column(String, nullable=False)
    module_type: Mapped[str] = mapped_column(String(32), nullable=False)
    database_id: Mapped[str] = mapped_column(String(255), nullable=False)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    icon: Mapped[Optional[str]] = mapped_column(String(64))

    # camelCase dicts, validated through the pydantic schemas on the way out
    properties: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    views: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)
    required_properties: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    frozen_properties: Mapped[List[str]] = mapped_column(JSON, nullable=False, default=list)
    permissions: Mapped[List[Dict[str, Any]]] = mapped_column(JSON, nullable=False, default=list)

    is_public: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_default: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    frozen: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    frozen_at: Mapped[Optional[datetime]] = mapped_column(DateTime(timezone=True))
    frozen_by: Mapped[Optional[str]] = mapped_column(String)
    frozen_reason: Mapped[Optional[str]] = mapped_column(Text)

    created_by: Mapped[str] = mapped_column(String, nullable=False)
    last_edited_by: Mapped[str] = mapped_column(String, nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow, onupdate=utcnow)

    __table_args__ = (
        UniqueConstraint("user_id", "module_type", "database_id", name="uq_document_view_user_module_database"),
        Index("ix_document_views_user_module", "user_id", "module_type"),
        Index("ix_document_views_user_database", "user_id", "database_id"),
    )
