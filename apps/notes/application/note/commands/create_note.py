"""Create note command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from apps.notes.application.common.exceptions import NotesStorageError
from apps.notes.domain.entities import Note
from apps.notes.domain.exceptions import CategoryNotFoundError

if TYPE_CHECKING:
    from apps.notes.application.common.ports import TransactionManager
    from apps.notes.application.note.dto import CreateNoteInput
    from apps.notes.application.note.ports import NoteCommandGateway

logger = logging.getLogger(__name__)


class CreateNoteInteractor:
    """Note 생성 유스케이스."""

    def __init__(
        self,
        note_command: "NoteCommandGateway",
        transaction_manager: "TransactionManager",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._note_command = note_command
        self._tx = transaction_manager
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, data: "CreateNoteInput") -> Note:
        """Note를 생성합니다.

        Raises:
            InvalidNoteError: 제목 검증 실패
            CategoryNotFoundError: category_id에 해당하는 Category 없음
            NotesStorageError: 저장 실패
        """
        note = Note.create(
            category_id=data.category_id,
            title=data.title,
            content=data.content,
            now=self._clock(),
        )

        try:
            created = await self._note_command.create(note)
            await self._tx.commit()
        except CategoryNotFoundError:
            await self._tx.rollback()
            raise
        except NotesStorageError as e:
            await self._tx.rollback()
            logger.error("Failed to create note", extra={"error": e.message})
            raise NotesStorageError("failed to create note") from e

        logger.info(
            "Note created",
            extra={"note_id": str(created.id), "category_id": str(created.category_id)},
        )
        return created
