"""Domain Exceptions."""

from apps.pastes.domain.exceptions.base import DomainError
from apps.pastes.domain.exceptions.paste import (
    InvalidPasteError,
    PasteExpiredError,
    PasteNotFoundError,
)

__all__ = [
    "DomainError",
    "InvalidPasteError",
    "PasteExpiredError",
    "PasteNotFoundError",
]
