"""List categories query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.notes.application.common.exceptions import NotesStorageError

if TYPE_CHECKING:
    from apps.notes.application.category.ports import CategoryQueryGateway
    from apps.notes.domain.entities import Category

logger = logging.getLogger(__name__)


class ListCategoriesQuery:
    """전체 Category 목록 (최신순)."""

    def __init__(self, category_query: "CategoryQueryGateway") -> None:
        self._category_query = category_query

    async def execute(self) -> list["Category"]:
        try:
            return await self._category_query.list_all()
        except NotesStorageError as e:
            logger.error("Failed to list categories", extra={"error": e.message})
            raise NotesStorageError("failed to get categories") from e
