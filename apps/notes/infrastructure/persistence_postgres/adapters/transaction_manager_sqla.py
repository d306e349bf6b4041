"""SQLAlchemy implementation of transaction manager."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.notes.application.common.exceptions import NotesStorageError


class SqlaTransactionManager:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def commit(self) -> None:
        try:
            await self._session.commit()
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e

    async def rollback(self) -> None:
        await self._session.rollback()
