"""Paste Domain Exceptions."""

from apps.pastes.domain.exceptions.base import DomainError


class InvalidPasteError(DomainError):
    """Paste 필드 검증 실패."""

    pass


class PasteNotFoundError(DomainError):
    """slug에 해당하는 Paste 없음."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__("paste not found")


class PasteExpiredError(DomainError):
    """만료된 Paste 조회."""

    def __init__(self, slug: str) -> None:
        self.slug = slug
        super().__init__("paste has expired")
