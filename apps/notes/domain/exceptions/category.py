"""Category Domain Exceptions."""

from uuid import UUID

from apps.notes.domain.exceptions.base import DomainError


class InvalidCategoryError(DomainError):
    """Category 필드 검증 실패."""

    pass


class CategoryNotFoundError(DomainError):
    def __init__(self, category_id: UUID | None = None) -> None:
        self.category_id = category_id
        super().__init__("category not found")


class CategoryAlreadyExistsError(DomainError):
    """이름 중복."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("category already exists")
