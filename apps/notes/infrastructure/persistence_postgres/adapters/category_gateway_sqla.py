"""SQLAlchemy implementation of category gateways."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.entities import Category
from apps.notes.domain.exceptions import CategoryAlreadyExistsError
from apps.notes.infrastructure.persistence_postgres.mappings import categories_table


class SqlaCategoryQueryGateway:
    """Category 조회 게이트웨이 SQLAlchemy 구현."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, category_id: UUID) -> Category | None:
        try:
            result = await self._session.execute(
                select(Category).where(categories_table.c.id == category_id)
            )
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Category]:
        stmt = select(Category).order_by(categories_table.c.created_at.desc())
        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e
        return list(result.scalars().all())


class SqlaCategoryCommandGateway:
    """Category 변경 게이트웨이 SQLAlchemy 구현.

    categories.name UNIQUE 제약 위반은 CategoryAlreadyExistsError로 변환합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def create(self, category: Category) -> Category:
        self._session.add(category)
        await self._flush(category.name)
        return category

    async def update(self, category: Category) -> Category:
        merged = await self._session.merge(category)
        await self._flush(category.name)
        return merged

    async def delete(self, category_id: UUID) -> bool:
        try:
            result = await self._session.execute(
                delete(categories_table).where(categories_table.c.id == category_id)
            )
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e
        return result.rowcount > 0

    async def _flush(self, name: str) -> None:
        try:
            await self._session.flush()
        except IntegrityError as e:
            raise CategoryAlreadyExistsError(name) from e
        except SQLAlchemyError as e:
            raise NotesStorageError(str(e)) from e
