"""Category ORM mapping."""

from __future__ import annotations

from sqlalchemy import Column, DateTime, String, Table, func
from sqlalchemy.dialects.postgresql import UUID

from apps.notes.domain.entities import Category
from apps.notes.domain.entities.category import NAME_MAX_LENGTH
from apps.notes.infrastructure.persistence_postgres.registry import mapper_registry, metadata

categories_table = Table(
    "categories",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("name", String(NAME_MAX_LENGTH), nullable=False, unique=True),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    ),
    Column("updated_at", DateTime(timezone=True), nullable=False, server_default=func.now()),
)


def start_category_mapper() -> None:
    if hasattr(Category, "__mapper__"):
        return

    mapper_registry.map_imperatively(Category, categories_table)
