"""Delete category command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.exceptions import CategoryNotFoundError

if TYPE_CHECKING:
    from apps.notes.application.category.ports import CategoryCommandGateway
    from apps.notes.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class DeleteCategoryInteractor:
    """Category 삭제 유스케이스.

    속한 Note는 DB의 ON DELETE CASCADE로 함께 삭제됩니다.
    """

    def __init__(
        self,
        category_command: "CategoryCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._category_command = category_command
        self._tx = transaction_manager

    async def execute(self, category_id: UUID) -> None:
        try:
            deleted = await self._category_command.delete(category_id)
            await self._tx.commit()
        except NotesStorageError as e:
            await self._tx.rollback()
            logger.error(
                "Failed to delete category",
                extra={"category_id": str(category_id), "error": e.message},
            )
            raise NotesStorageError("failed to delete category") from e

        if not deleted:
            raise CategoryNotFoundError(category_id)
        logger.info("Category deleted", extra={"category_id": str(category_id)})
