"""Category/Note 엔티티 테스트."""

from __future__ import annotations

from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from apps.notes.domain.entities import Category, Note
from apps.notes.domain.exceptions import InvalidCategoryError, InvalidNoteError


class TestCategory:
    """Category 테스트."""

    def test_create(self, now: datetime) -> None:
        category = Category.create("work", now=now)

        assert category.name == "work"
        assert category.created_at == category.updated_at == now

    def test_ids_are_unique(self) -> None:
        assert Category.create("a").id != Category.create("b").id

    @pytest.mark.parametrize(
        ("name", "message"),
        [
            ("", "name is required"),
            ("x" * 101, "name must be at most 100 characters"),
        ],
    )
    def test_invalid_name(self, name: str, message: str) -> None:
        with pytest.raises(InvalidCategoryError) as exc_info:
            Category.create(name)

        assert exc_info.value.message == message

    def test_rename(self, now: datetime) -> None:
        # Arrange
        category = Category.create("work", now=now)
        later = now + timedelta(minutes=5)

        # Act
        category.rename("home", now=later)

        # Assert
        assert category.name == "home"
        assert category.created_at == now
        assert category.updated_at == later

    def test_rename_keeps_name_on_error(self) -> None:
        category = Category.create("work")

        with pytest.raises(InvalidCategoryError):
            category.rename("")

        assert category.name == "work"


class TestNote:
    """Note 테스트."""

    def test_create_with_empty_content(self, now: datetime) -> None:
        category_id = uuid4()

        note = Note.create(category_id=category_id, title="todo", now=now)

        assert note.category_id == category_id
        assert note.content == ""
        assert note.updated_at == now

    @pytest.mark.parametrize(
        ("title", "message"),
        [
            ("", "title is required"),
            ("t" * 201, "title must be at most 200 characters"),
        ],
    )
    def test_invalid_title(self, title: str, message: str) -> None:
        with pytest.raises(InvalidNoteError) as exc_info:
            Note.create(category_id=uuid4(), title=title)

        assert exc_info.value.message == message

    def test_revise_replaces_all_fields(self, now: datetime) -> None:
        # Arrange
        note = Note.create(category_id=uuid4(), title="old", content="a", now=now)
        new_category = uuid4()
        later = now + timedelta(hours=1)

        # Act
        note.revise(category_id=new_category, title="new", content="", now=later)

        # Assert
        assert (note.category_id, note.title, note.content) == (new_category, "new", "")
        assert note.created_at == now
        assert note.updated_at == later
