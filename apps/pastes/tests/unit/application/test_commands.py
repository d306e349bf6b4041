"""Paste Command/Query 단위 테스트."""

from __future__ import annotations

from datetime import datetime, timedelta
from unittest.mock import AsyncMock, MagicMock

import pytest

from apps.pastes.application.common.exceptions import PasteStorageError
from apps.pastes.application.paste.commands import CreatePasteInteractor, DeletePasteInteractor
from apps.pastes.application.paste.dto import CreatePasteInput, PageRequest
from apps.pastes.application.paste.queries import GetPasteQuery, ListPastesQuery
from apps.pastes.domain.exceptions import (
    InvalidPasteError,
    PasteExpiredError,
    PasteNotFoundError,
)


class TestCreatePasteInteractor:
    """CreatePasteInteractor 테스트."""

    @pytest.mark.asyncio
    async def test_creates_and_commits(
        self, gateway, mock_tx: AsyncMock, slug_generator: MagicMock, now: datetime
    ) -> None:
        # Arrange
        interactor = CreatePasteInteractor(gateway, mock_tx, slug_generator, clock=lambda: now)

        # Act
        paste = await interactor.execute(
            CreatePasteInput(content="hello", title="greeting", expires_in_minutes=10)
        )

        # Assert
        assert paste.slug == "slug0001"
        assert paste.id == 1
        assert paste.expires_at == now + timedelta(minutes=10)
        assert gateway.pastes["slug0001"] is paste
        mock_tx.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_invalid_input_does_not_touch_storage(
        self, mock_tx: AsyncMock, slug_generator: MagicMock
    ) -> None:
        # Arrange
        command = AsyncMock()
        interactor = CreatePasteInteractor(command, mock_tx, slug_generator)

        # Act & Assert
        with pytest.raises(InvalidPasteError):
            await interactor.execute(CreatePasteInput(content=""))

        command.create.assert_not_awaited()
        mock_tx.commit.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_storage_failure(self, mock_tx: AsyncMock, slug_generator: MagicMock) -> None:
        # Arrange
        command = AsyncMock()
        command.create.side_effect = PasteStorageError("connection reset")
        interactor = CreatePasteInteractor(command, mock_tx, slug_generator)

        # Act & Assert
        with pytest.raises(PasteStorageError) as exc_info:
            await interactor.execute(CreatePasteInput(content="hello"))

        assert exc_info.value.message == "failed to create paste"
        mock_tx.rollback.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_commit_failure(self, mock_tx: AsyncMock, slug_generator: MagicMock) -> None:
        # Arrange
        mock_tx.commit.side_effect = PasteStorageError("duplicate key")
        interactor = CreatePasteInteractor(AsyncMock(), mock_tx, slug_generator)

        # Act & Assert
        with pytest.raises(PasteStorageError, match="failed to create paste"):
            await interactor.execute(CreatePasteInput(content="hello"))

        mock_tx.rollback.assert_awaited_once()


class TestDeletePasteInteractor:
    """DeletePasteInteractor 테스트."""

    @pytest.mark.asyncio
    async def test_delete(self, gateway, mock_tx: AsyncMock, make_paste) -> None:
        # Arrange
        gateway.pastes["abcDEF12"] = make_paste("abcDEF12")
        interactor = DeletePasteInteractor(gateway, mock_tx)

        # Act
        await interactor.execute("abcDEF12")

        # Assert
        assert "abcDEF12" not in gateway.pastes
        mock_tx.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_missing_is_ok(self, gateway, mock_tx: AsyncMock) -> None:
        await DeletePasteInteractor(gateway, mock_tx).execute("missing1")

        mock_tx.commit.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_delete_failure(self, mock_tx: AsyncMock) -> None:
        command = AsyncMock()
        command.delete_by_slug.side_effect = PasteStorageError("boom")

        with pytest.raises(PasteStorageError, match="failed to delete paste"):
            await DeletePasteInteractor(command, mock_tx).execute("abcDEF12")

        mock_tx.rollback.assert_awaited_once()


class TestGetPasteQuery:
    """GetPasteQuery 테스트."""

    @pytest.mark.asyncio
    async def test_found(self, gateway, make_paste, now: datetime) -> None:
        gateway.pastes["abcDEF12"] = make_paste("abcDEF12")

        paste = await GetPasteQuery(gateway, clock=lambda: now).execute("abcDEF12")

        assert paste.slug == "abcDEF12"

    @pytest.mark.asyncio
    async def test_not_found(self, gateway) -> None:
        with pytest.raises(PasteNotFoundError):
            await GetPasteQuery(gateway).execute("missing1")

    @pytest.mark.asyncio
    async def test_expired(self, gateway, make_paste, now: datetime) -> None:
        gateway.pastes["old"] = make_paste("old", expires_at=now - timedelta(minutes=1))

        with pytest.raises(PasteExpiredError):
            await GetPasteQuery(gateway, clock=lambda: now).execute("old")


class TestListPastesQuery:
    """ListPastesQuery 테스트."""

    @pytest.mark.asyncio
    async def test_public_unexpired_newest_first(
        self, gateway, make_paste, now: datetime
    ) -> None:
        # Arrange
        gateway.pastes = {
            "older": make_paste("older", created_offset=timedelta(minutes=-10)),
            "newer": make_paste("newer", created_offset=timedelta(minutes=-1)),
            "private": make_paste("private", is_public=False),
            "expired": make_paste("expired", expires_at=now - timedelta(seconds=1)),
        }
        query = ListPastesQuery(gateway, clock=lambda: now)

        # Act
        pastes = await query.execute(PageRequest(limit=20, offset=0))

        # Assert
        assert [p.slug for p in pastes] == ["newer", "older"]

    @pytest.mark.asyncio
    async def test_passes_page_to_gateway(self, now: datetime) -> None:
        # Arrange
        paste_query = AsyncMock()
        paste_query.list_public.return_value = []

        # Act
        await ListPastesQuery(paste_query, clock=lambda: now).execute(PageRequest(limit=10, offset=5))

        # Assert
        paste_query.list_public.assert_awaited_once_with(now=now, limit=10, offset=5)

    @pytest.mark.asyncio
    async def test_storage_failure(self) -> None:
        paste_query = AsyncMock()
        paste_query.list_public.side_effect = PasteStorageError("boom")

        with pytest.raises(PasteStorageError, match="failed to list pastes"):
            await ListPastesQuery(paste_query).execute(PageRequest(limit=20, offset=0))
