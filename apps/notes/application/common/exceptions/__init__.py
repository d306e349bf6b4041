from apps.notes.application.common.exceptions.base import ApplicationError
from apps.notes.application.common.exceptions.request import (
    AuthenticationError,
    InvalidInputError,
)
from apps.notes.application.common.exceptions.storage import NotesStorageError

__all__ = ["ApplicationError", "AuthenticationError", "InvalidInputError", "NotesStorageError"]
