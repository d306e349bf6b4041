"""Create category command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.entities import Category
from apps.notes.domain.exceptions import CategoryAlreadyExistsError

if TYPE_CHECKING:
    from apps.notes.application.category.dto import CreateCategoryInput
    from apps.notes.application.category.ports import CategoryCommandGateway
    from apps.notes.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class CreateCategoryInteractor:
    """Category 생성 유스케이스."""

    def __init__(
        self,
        category_command: "CategoryCommandGateway",
        transaction_manager: "TransactionManager",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._category_command = category_command
        self._tx = transaction_manager
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, data: "CreateCategoryInput") -> Category:
        """Category를 생성합니다.

        Raises:
            InvalidCategoryError: 이름 검증 실패
            CategoryAlreadyExistsError: 이름 중복
            NotesStorageError: 저장 실패
        """
        category = Category.create(data.name, now=self._clock())

        try:
            created = await self._category_command.create(category)
            await self._tx.commit()
        except CategoryAlreadyExistsError:
            await self._tx.rollback()
            raise
        except NotesStorageError as e:
            await self._tx.rollback()
            logger.error("Failed to create category", extra={"error": e.message})
            raise NotesStorageError("failed to create category") from e

        logger.info("Category created", extra={"category_id": str(created.id)})
        return created
