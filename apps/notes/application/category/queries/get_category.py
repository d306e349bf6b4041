"""Get category query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.exceptions import CategoryNotFoundError

if TYPE_CHECKING:
    from apps.notes.application.category.ports import CategoryQueryGateway
    from apps.notes.domain.entities import Category

logger = logging.getLogger(__name__)


class GetCategoryQuery:
    def __init__(self, category_query: "CategoryQueryGateway") -> None:
        self._category_query = category_query

    async def execute(self, category_id: UUID) -> "Category":
        """Category를 조회합니다.

        Raises:
            CategoryNotFoundError: 존재하지 않음
            NotesStorageError: 조회 실패
        """
        try:
            category = await self._category_query.get_by_id(category_id)
        except NotesStorageError as e:
            logger.error(
                "Failed to get category",
                extra={"category_id": str(category_id), "error": e.message},
            )
            raise NotesStorageError("failed to get category") from e

        if category is None:
            raise CategoryNotFoundError(category_id)
        return category
