"""Get note query."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.exceptions import NoteNotFoundError

if TYPE_CHECKING:
    from apps.notes.application.note.ports import NoteQueryGateway
    from apps.notes.domain.entities import Note

logger = logging.getLogger(__name__)


class GetNoteQuery:
    def __init__(self, note_query: "NoteQueryGateway") -> None:
        self._note_query = note_query

    async def execute(self, note_id: UUID) -> "Note":
        try:
            note = await self._note_query.get_by_id(note_id)
        except NotesStorageError as e:
            logger.error("Failed to get note", extra={"note_id": str(note_id), "error": e.message})
            raise NotesStorageError("failed to get note") from e

        if note is None:
            raise NoteNotFoundError(note_id)
        return note
