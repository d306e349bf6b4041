"""Category entity - 노트를 묶는 분류."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.notes.domain.exceptions import InvalidCategoryError

NAME_MAX_LENGTH = 100


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validate_name(name: str) -> None:
    if not name:
        raise InvalidCategoryError("name is required")
    if len(name) > NAME_MAX_LENGTH:
        raise InvalidCategoryError(f"name must be at most {NAME_MAX_LENGTH} characters")


@dataclass
class Category:
    """Category 엔티티.

    categories 테이블에 매핑됩니다. name은 유일합니다.
    """

    name: str
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(cls, name: str, *, now: datetime | None = None) -> "Category":
        """새 Category를 생성합니다.

        Raises:
            InvalidCategoryError: 이름이 비었거나 너무 긺
        """
        _validate_name(name)
        now = now or _utcnow()
        return cls(name=name, created_at=now, updated_at=now)

    def rename(self, name: str, *, now: datetime | None = None) -> None:
        _validate_name(name)
        self.name = name
        self.updated_at = now or _utcnow()
