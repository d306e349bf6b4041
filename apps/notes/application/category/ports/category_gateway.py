"""Category gateway ports."""

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from apps.notes.domain.entities import Category


class CategoryQueryGateway(Protocol):
    """Category 조회 포트."""

    async def get_by_id(self, category_id: UUID) -> Category | None:
        ...

    async def list_all(self) -> list[Category]:
        """전체 Category를 최신순으로 조회합니다."""
        ...


class CategoryCommandGateway(Protocol):
    """Category 변경 포트.

    create/update는 이름이 중복되면 CategoryAlreadyExistsError를 올립니다.
    """

    async def create(self, category: Category) -> Category:
        ...

    async def update(self, category: Category) -> Category:
        ...

    async def delete(self, category_id: UUID) -> bool:
        """삭제된 행이 있으면 True."""
        ...
