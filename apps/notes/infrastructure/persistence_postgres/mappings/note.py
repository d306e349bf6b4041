"""Note ORM mapping.

category_id는 categories.id를 참조하며 Category 삭제 시 함께 삭제됩니다.
"""

from __future__ import annotations

from sqlalchemy import Column, DateTime, ForeignKey, String, Table, Text, func
from sqlalchemy.dialects.postgresql import UUID

from apps.notes.domain.entities import Note
from apps.notes.domain.entities.note import TITLE_MAX_LENGTH
from apps.notes.infrastructure.persistence_postgres.registry import mapper_registry, metadata

notes_table = Table(
    "notes",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "category_id",
        UUID(as_uuid=True),
        ForeignKey("categories.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("title", String(TITLE_MAX_LENGTH), nullable=False),
    Column("content", Text, nullable=False, server_default=""),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    ),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_note_mapper() -> None:
    # 이미 매핑된 경우 스킵
    if hasattr(Note, "__mapper__"):
        return

    mapper_registry.map_imperatively(Note, notes_table)
