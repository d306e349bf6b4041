"""Note Domain Exceptions."""

from uuid import UUID

from apps.notes.domain.exceptions.base import DomainError


class InvalidNoteError(DomainError):
    """Note 필드 검증 실패."""

    pass


class NoteNotFoundError(DomainError):
    def __init__(self, note_id: UUID) -> None:
        self.note_id = note_id
        super().__init__("note not found")
