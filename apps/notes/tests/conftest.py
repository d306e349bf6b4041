"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock
from uuid import UUID

import pytest

from apps.notes.domain.entities import Category, Note
from apps.notes.domain.exceptions import CategoryAlreadyExistsError, CategoryNotFoundError


class InMemoryNotesStore:
    """Category/Note 게이트웨이 인메모리 구현.

    name UNIQUE, category_id FK, ON DELETE CASCADE를 흉내 냅니다.
    """

    def __init__(self) -> None:
        self.categories: dict[UUID, Category] = {}
        self.notes: dict[UUID, Note] = {}


class InMemoryCategoryGateway:
    def __init__(self, store: InMemoryNotesStore) -> None:
        self._store = store

    async def get_by_id(self, category_id: UUID) -> Category | None:
        return self._store.categories.get(category_id)

    async def list_all(self) -> list[Category]:
        return sorted(self._store.categories.values(), key=lambda c: c.created_at, reverse=True)

    async def create(self, category: Category) -> Category:
        self._check_unique(category)
        self._store.categories[category.id] = category
        return category

    async def update(self, category: Category) -> Category:
        self._check_unique(category)
        self._store.categories[category.id] = category
        return category

    async def delete(self, category_id: UUID) -> bool:
        if self._store.categories.pop(category_id, None) is None:
            return False
        for note_id in [n.id for n in self._store.notes.values() if n.category_id == category_id]:
            del self._store.notes[note_id]
        return True

    def _check_unique(self, category: Category) -> None:
        for other in self._store.categories.values():
            if other.id != category.id and other.name == category.name:
                raise CategoryAlreadyExistsError(category.name)


class InMemoryNoteGateway:
    def __init__(self, store: InMemoryNotesStore) -> None:
        self._store = store

    async def get_by_id(self, note_id: UUID) -> Note | None:
        return self._store.notes.get(note_id)

    async def list_all(self) -> list[Note]:
        return sorted(self._store.notes.values(), key=lambda n: n.created_at, reverse=True)

    async def list_by_category(self, category_id: UUID) -> list[Note]:
        return [n for n in await self.list_all() if n.category_id == category_id]

    async def create(self, note: Note) -> Note:
        self._check_category(note)
        self._store.notes[note.id] = note
        return note

    async def update(self, note: Note) -> Note:
        self._check_category(note)
        self._store.notes[note.id] = note
        return note

    async def delete(self, note_id: UUID) -> bool:
        return self._store.notes.pop(note_id, None) is not None

    def _check_category(self, note: Note) -> None:
        if note.category_id not in self._store.categories:
            raise CategoryNotFoundError(note.category_id)


@pytest.fixture
def now() -> datetime:
    """고정된 기준 시각."""
    return datetime(2026, 3, 10, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> InMemoryNotesStore:
    return InMemoryNotesStore()


@pytest.fixture
def category_gateway(store: InMemoryNotesStore) -> InMemoryCategoryGateway:
    return InMemoryCategoryGateway(store)


@pytest.fixture
def note_gateway(store: InMemoryNotesStore) -> InMemoryNoteGateway:
    return InMemoryNoteGateway(store)


@pytest.fixture
def mock_tx() -> AsyncMock:
    """TransactionManager Mock."""
    return AsyncMock()


@pytest.fixture
def make_category(store: InMemoryNotesStore, now: datetime):
    """Category 팩토리 (store에 바로 저장)."""

    def _make(name: str = "work", *, created_offset: timedelta = timedelta(0)) -> Category:
        category = Category(name=name, created_at=now + created_offset, updated_at=now)
        store.categories[category.id] = category
        return category

    return _make


@pytest.fixture
def make_note(store: InMemoryNotesStore, now: datetime):
    """Note 팩토리 (store에 바로 저장)."""

    def _make(
        category: Category,
        title: str = "todo",
        *,
        content: str = "",
        created_offset: timedelta = timedelta(0),
    ) -> Note:
        note = Note(
            category_id=category.id,
            title=title,
            content=content,
            created_at=now + created_offset,
            updated_at=now,
        )
        store.notes[note.id] = note
        return note

    return _make
