"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.pastes.domain.entities import Paste


class InMemoryPasteGateway:
    """PasteQueryGateway/PasteCommandGateway 인메모리 구현."""

    def __init__(self) -> None:
        self.pastes: dict[str, Paste] = {}
        self._next_id = 1

    async def get_by_slug(self, slug: str) -> Paste | None:
        return self.pastes.get(slug)

    async def list_public(self, *, now: datetime, limit: int, offset: int) -> list[Paste]:
        visible = [p for p in self.pastes.values() if p.is_public and not p.is_expired(now)]
        visible.sort(key=lambda p: p.created_at, reverse=True)
        return visible[offset : offset + limit]

    async def create(self, paste: Paste) -> Paste:
        paste.id = self._next_id
        self._next_id += 1
        self.pastes[paste.slug] = paste
        return paste

    async def delete_by_slug(self, slug: str) -> None:
        self.pastes.pop(slug, None)


@pytest.fixture
def now() -> datetime:
    """고정된 기준 시각."""
    return datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def gateway() -> InMemoryPasteGateway:
    return InMemoryPasteGateway()


@pytest.fixture
def mock_tx() -> AsyncMock:
    """TransactionManager Mock."""
    return AsyncMock()


@pytest.fixture
def slug_generator() -> MagicMock:
    """고정 slug를 순서대로 발급하는 SlugGenerator Mock."""
    generator = MagicMock()
    generator.generate.side_effect = [f"slug{i:04d}" for i in range(1, 100)]
    return generator


@pytest.fixture
def make_paste(now: datetime):
    """Paste 팩토리."""

    def _make(
        slug: str = "abcDEF12",
        *,
        content: str = "print('hello')",
        title: str | None = "hello",
        is_public: bool = True,
        created_offset: timedelta = timedelta(0),
        expires_at: datetime | None = None,
        paste_id: int | None = 1,
    ) -> Paste:
        return Paste(
            id=paste_id,
            slug=slug,
            content=content,
            title=title,
            language="python",
            is_public=is_public,
            expires_at=expires_at,
            created_at=now + created_offset,
            updated_at=now + created_offset,
        )

    return _make
