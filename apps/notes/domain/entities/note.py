"""Note entity - Category에 속한 텍스트 메모."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID, uuid4

from apps.notes.domain.exceptions import InvalidNoteError

TITLE_MAX_LENGTH = 200


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _validate_title(title: str) -> None:
    if not title:
        raise InvalidNoteError("title is required")
    if len(title) > TITLE_MAX_LENGTH:
        raise InvalidNoteError(f"title must be at most {TITLE_MAX_LENGTH} characters")


@dataclass
class Note:
    """Note 엔티티.

    notes 테이블에 매핑되며 category_id로 Category를 참조합니다.
    content는 비어 있어도 됩니다.
    """

    category_id: UUID
    title: str
    content: str = ""
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        *,
        category_id: UUID,
        title: str,
        content: str = "",
        now: datetime | None = None,
    ) -> "Note":
        """새 Note를 생성합니다.

        Raises:
            InvalidNoteError: 제목이 비었거나 너무 긺
        """
        _validate_title(title)
        now = now or _utcnow()
        return cls(
            category_id=category_id,
            title=title,
            content=content,
            created_at=now,
            updated_at=now,
        )

    def revise(
        self,
        *,
        category_id: UUID,
        title: str,
        content: str,
        now: datetime | None = None,
    ) -> None:
        """Category, 제목, 본문을 모두 교체합니다."""
        _validate_title(title)
        self.category_id = category_id
        self.title = title
        self.content = content
        self.updated_at = now or _utcnow()
