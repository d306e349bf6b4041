from apps.pastes.application.common.exceptions.base import ApplicationError
from apps.pastes.application.common.exceptions.storage import PasteStorageError

__all__ = ["ApplicationError", "PasteStorageError"]
