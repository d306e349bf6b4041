"""SQLAlchemy implementation of paste gateways."""

from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, or_, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.pastes.application.common.exceptions import PasteStorageError
from apps.pastes.domain.entities import Paste
from apps.pastes.infrastructure.persistence_postgres.mappings import pastes_table


class SqlaPasteQueryGateway:
    """Paste 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_slug(self, slug: str) -> Paste | None:
        """slug로 Paste를 조회합니다."""
        try:
            result = await self._session.execute(
                select(Paste).where(pastes_table.c.slug == slug)
            )
        except SQLAlchemyError as e:
            raise PasteStorageError(str(e)) from e
        return result.scalar_one_or_none()

    async def list_public(self, *, now: datetime, limit: int, offset: int) -> list[Paste]:
        """만료되지 않은 공개 Paste를 최신순으로 조회합니다."""
        stmt = (
            select(Paste)
            .where(
                pastes_table.c.is_public.is_(True),
                or_(
                    pastes_table.c.expires_at.is_(None),
                    pastes_table.c.expires_at > now,
                ),
            )
            .order_by(pastes_table.c.created_at.desc(), pastes_table.c.id.desc())
            .limit(limit)
            .offset(offset)
        )
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise PasteStorageError(str(e)) from e
        return list(result.scalars().all())


class SqlaPasteCommandGateway:
    """Paste 변경 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, paste: Paste) -> Paste:
        """새 Paste를 저장합니다."""
        self._session.add(paste)
        try:
            await self._session.flush()
        except SQLAlchemyError as e:
            raise PasteStorageError(str(e)) from e
        return paste

    async def delete_by_slug(self, slug: str) -> None:
        """slug에 해당하는 Paste를 삭제합니다."""
        try:
            await self._session.execute(delete(pastes_table).where(pastes_table.c.slug == slug))
        except SQLAlchemyError as e:
            raise PasteStorageError(str(e)) from e
