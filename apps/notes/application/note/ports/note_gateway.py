"""Note gateway ports."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from apps.notes.domain.entities import Note


class NoteQueryGateway(Protocol):
    """Note 조회 포트. 목록은 최신순입니다."""

    async def get_by_id(self, note_id: UUID) -> Note | None:
        ...

    async def list_all(self) -> list[Note]:
        ...

    async def list_by_category(self, category_id: UUID) -> list[Note]:
        ...


class NoteCommandGateway(Protocol):
    """Note 변경 포트.

    create/update는 참조하는 Category가 없으면 CategoryNotFoundError를 올립니다.
    """

    async def create(self, note: Note) -> Note:
        ...

    async def update(self, note: Note) -> Note:
        ...

    async def delete(self, note_id: UUID) -> bool:
        """삭제된 행이 있으면 True."""
        ...
