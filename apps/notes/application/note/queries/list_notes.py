"""List notes query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.notes.application.common.exceptions import NotesStorageError

if TYPE_CHECKING:
    from apps.notes.application.note.ports import NoteQueryGateway
    from apps.notes.domain.entities import Note

logger = logging.getLogger(__name__)


class ListNotesQuery:
    """Note 목록 (최신순).

    category_id가 주어지면 해당 Category의 Note만 조회합니다.
    """

    def __init__(self, note_query: "NoteQueryGateway") -> None:
        self._note_query = note_query

    async def execute(self, category_id: UUID | None = None) -> list["Note"]:
        try:
            if category_id is None:
                return await self._note_query.list_all()
            return await self._note_query.list_by_category(category_id)
        except NotesStorageError as e:
            logger.error(
                "Failed to list notes",
                extra={"category_id": str(category_id or ""), "error": e.message},
            )
            raise NotesStorageError("failed to get notes") from e
