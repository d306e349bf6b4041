"""Paste ORM mapping - Imperative mapping for the pastes table.

도메인 엔티티가 SQLAlchemy에 의존하지 않도록 Imperative Mapping을 사용합니다.
"""

from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Column, DateTime, String, Table, Text, func

from apps.pastes.domain.entities import Paste
from apps.pastes.domain.entities.paste import LANGUAGE_MAX_LENGTH, TITLE_MAX_LENGTH
from apps.pastes.infrastructure.persistence_postgres.registry import mapper_registry, metadata

pastes_table = Table(
    "pastes",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("slug", String(20), nullable=False, unique=True, index=True),
    Column("title", String(TITLE_MAX_LENGTH), nullable=True),
    Column("content", Text, nullable=False),
    Column(
        "language",
        String(LANGUAGE_MAX_LENGTH),
        nullable=False,
        server_default="plaintext",
    ),
    Column("is_public", Boolean, nullable=False, server_default="true"),
    Column("expires_at", DateTime(timezone=True), nullable=True),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        index=True,
    ),
    Column(
        "updated_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    ),
)


def start_paste_mapper() -> None:
    """Paste 엔티티를 pastes 테이블에 매핑합니다."""
    # 이미 매핑된 경우 스킵
    if hasattr(Paste, "__mapper__"):
        return

    mapper_registry.map_imperatively(Paste, pastes_table)
