"""Update category command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.exceptions import CategoryAlreadyExistsError, CategoryNotFoundError

if TYPE_CHECKING:
    from apps.notes.application.category.dto import UpdateCategoryInput
    from apps.notes.application.category.ports import (
        CategoryCommandGateway,
        CategoryQueryGateway,
    )
    from apps.notes.application.common.ports import TransactionManager
    from apps.notes.domain.entities import Category

logger = logging.getLogger(__name__)


class UpdateCategoryInteractor:
    """Category 이름 변경 유스케이스."""

    def __init__(
        self,
        category_query: "CategoryQueryGateway",
        category_command: "CategoryCommandGateway",
        transaction_manager: "TransactionManager",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._category_query = category_query
        self._category_command = category_command
        self._tx = transaction_manager
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, data: "UpdateCategoryInput") -> "Category":
        try:
            category = await self._category_query.get_by_id(data.category_id)
        except NotesStorageError as e:
            logger.error("Failed to load category", extra={"error": e.message})
            raise NotesStorageError("failed to update category") from e
        if category is None:
            raise CategoryNotFoundError(data.category_id)

        category.rename(data.name, now=self._clock())

        try:
            updated = await self._category_command.update(category)
            await self._tx.commit()
        except CategoryAlreadyExistsError:
            await self._tx.rollback()
            raise
        except NotesStorageError as e:
            await self._tx.rollback()
            logger.error(
                "Failed to update category",
                extra={"category_id": str(data.category_id), "error": e.message},
            )
            raise NotesStorageError("failed to update category") from e

        logger.info("Category updated", extra={"category_id": str(updated.id)})
        return updated
