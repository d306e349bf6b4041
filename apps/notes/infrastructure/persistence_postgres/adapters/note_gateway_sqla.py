"""SQLAlchemy implementation of note gateways."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.entities import Note
from apps.notes.domain.exceptions import CategoryNotFoundError
from apps.notes.infrastructure.persistence_postgres.mappings import notes_table


class SqlaNoteQueryGateway:
    """Note 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, note_id: UUID) -> Note | None:
        try:
            result = await self._session.execute(select(Note).where(notes_table.c.id == note_id))
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Note]:
        return await self._list(select(Note))

    async def list_by_category(self, category_id: UUID) -> list[Note]:
        return await self._list(select(Note).where(notes_table.c.category_id == category_id))

    async def _list(self, stmt) -> list[Note]:
        try:
            result = await self._session.execute(stmt.order_by(notes_table.c.created_at.desc()))
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e
        return list(result.scalars().all())


class SqlaNoteCommandGateway:
    """Note 변경 게이트웨이 SQLAlchemy 구현.

    notes.category_id FK 위반은 CategoryNotFoundError로 변환합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, note: Note) -> Note:
        self._session.add(note)
        await self._flush(note.category_id)
        return note

    async def update(self, note: Note) -> Note:
        merged = await self._session.merge(note)
        await self._flush(note.category_id)
        return merged

    async def delete(self, note_id: UUID) -> bool:
        try:
            result = await self._session.execute(
                delete(notes_table).where(notes_table.c.id == note_id)
            )
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e
        return result.rowcount > 0

    async def _flush(self, category_id: UUID) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise CategoryNotFoundError(category_id) from e
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e
