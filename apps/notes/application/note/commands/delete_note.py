"""Delete note command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING
from uuid import UUID

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.exceptions import NoteNotFoundError

if TYPE_CHECKING:
    from apps.notes.application.common.ports import TransactionManager
    from apps.notes.application.note.ports import NoteCommandGateway

logger = logging.getLogger(__name__)


class DeleteNoteInteractor:
    def __init__(
        self,
        note_command: "NoteCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._note_command = note_command
        self._tx = transaction_manager

    async def execute(self, note_id: UUID) -> None:
        """Note를 삭제합니다.

        Raises:
            NoteNotFoundError: 존재하지 않음
            NotesStorageError: 삭제 실패
        """
        try:
            deleted = await self._note_command.delete(note_id)
            await self._tx.commit()
        except NotesStorageError as e:
            await self._tx.rollback()
            logger.error(
                "Failed to delete note", extra={"note_id": str(note_id), "error": e.message}
            )
            raise NotesStorageError("failed to delete note") from e

        if not deleted:
            raise NoteNotFoundError(note_id)
        logger.info("Note deleted", extra={"note_id": str(note_id)})
