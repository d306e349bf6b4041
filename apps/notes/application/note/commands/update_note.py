"""Update note command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.exceptions import CategoryNotFoundError, NoteNotFoundError

if TYPE_CHECKING:
    from apps.notes.application.common.ports import TransactionManager
    from apps.notes.application.note.dto import UpdateNoteInput
    from apps.notes.application.note.ports import NoteCommandGateway, NoteQueryGateway
    from apps.notes.domain.entities import Note

logger = logging.getLogger(__name__)


class UpdateNoteInteractor:
    """Note 수정 유스케이스 (category_id, title, content 전체 교체)."""

    def __init__(
        self,
        note_query: "NoteQueryGateway",
        note_command: "NoteCommandGateway",
        transaction_manager: "TransactionManager",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._note_query = note_query
        self._note_command = note_command
        self._tx = transaction_manager
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, data: "UpdateNoteInput") -> "Note":
        try:
            note = await self._note_query.get_by_id(data.note_id)
        except NotesStorageError as e:
            logger.error("Failed to load note", extra={"error": e.message})
            raise NotesStorageError("failed to update note") from e
        if note is None:
            raise NoteNotFoundError(data.note_id)

        note.revise(
            category_id=data.category_id,
            title=data.title,
            content=data.content,
            now=self._clock(),
        )

        try:
            updated = await self._note_command.update(note)
            await self._tx.commit()
        except CategoryNotFoundError:
            await self._tx.rollback()
            raise
        except NotesStorageError as e:
            await self._tx.rollback()
            logger.error(
                "Failed to update note",
                extra={"note_id": str(data.note_id), "error": e.message},
            )
            raise NotesStorageError("failed to update note") from e

        logger.info("Note updated", extra={"note_id": str(updated.id)})
        return updated
