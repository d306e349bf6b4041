"""Domain Exceptions."""

from apps.notes.domain.exceptions.base import DomainError
from apps.notes.domain.exceptions.category import (
    CategoryAlreadyExistsError,
    CategoryNotFoundError,
    InvalidCategoryError,
)
from apps.notes.domain.exceptions.note import InvalidNoteError, NoteNotFoundError

__all__ = [
    "CategoryAlreadyExistsError",
    "CategoryNotFoundError",
    "DomainError",
    "InvalidCategoryError",
    "InvalidNoteError",
    "NoteNotFoundError",
]
