"""SQLAlchemy Paste Gateway 단위 테스트.

AsyncSession을 Mock하여 어댑터가 만드는 쿼리와 예외 변환을 검증합니다.
"""

from __future__ import annotations

from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from apps.pastes.application.common.exceptions import PasteStorageError
from apps.pastes.infrastructure.persistence_postgres.adapters import (
    SqlaPasteCommandGateway,
    SqlaPasteQueryGateway,
    SqlaTransactionManager,
)
from apps.pastes.infrastructure.persistence_postgres.mappings import start_mappers


@pytest.fixture(autouse=True)
def _mappers() -> None:
    start_mappers()


@pytest.fixture
def mock_session() -> AsyncMock:
    session = AsyncMock()
    session.add = MagicMock()
    return session


def _compiled(stmt) -> str:
    return str(stmt.compile(dialect=postgresql.dialect()))


class TestSqlaPasteQueryGateway:
    """SqlaPasteQueryGateway 테스트."""

    @pytest.mark.asyncio
    async def test_get_by_slug(self, mock_session: AsyncMock, make_paste) -> None:
        # Arrange
        paste = make_paste("abcDEF12")
        result = MagicMock()
        result.scalar_one_or_none.return_value = paste
        mock_session.execute.return_value = result

        # Act
        found = await SqlaPasteQueryGateway(mock_session).get_by_slug("abcDEF12")

        # Assert
        assert found is paste
        sql = _compiled(mock_session.execute.await_args.args[0])
        assert "pastes.slug = " in sql

    @pytest.mark.asyncio
    async def test_list_public_query(self, mock_session: AsyncMock, now: datetime) -> None:
        # Arrange
        result = MagicMock()
        result.scalars.return_value.all.return_value = []
        mock_session.execute.return_value = result

        # Act
        pastes = await SqlaPasteQueryGateway(mock_session).list_public(
            now=now, limit=10, offset=20
        )

        # Assert
        assert pastes == []
        sql = _compiled(mock_session.execute.await_args.args[0])
        assert "pastes.is_public IS true" in sql
        assert "pastes.expires_at IS NULL OR pastes.expires_at >" in sql
        assert "ORDER BY pastes.created_at DESC" in sql
        assert "LIMIT" in sql and "OFFSET" in sql

    @pytest.mark.asyncio
    async def test_query_failure_wrapped(self, mock_session: AsyncMock) -> None:
        mock_session.execute.side_effect = OperationalError("SELECT", {}, Exception("down"))

        with pytest.raises(PasteStorageError):
            await SqlaPasteQueryGateway(mock_session).get_by_slug("abcDEF12")


class TestSqlaPasteCommandGateway:
    """SqlaPasteCommandGateway 테스트."""

    @pytest.mark.asyncio
    async def test_create_flushes(self, mock_session: AsyncMock, make_paste) -> None:
        # Arrange
        paste = make_paste("abcDEF12", paste_id=None)

        # Act
        created = await SqlaPasteCommandGateway(mock_session).create(paste)

        # Assert
        assert created is paste
        mock_session.add.assert_called_once_with(paste)
        mock_session.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_failure_wrapped(self, mock_session: AsyncMock, make_paste) -> None:
        mock_session.flush.side_effect = OperationalError("INSERT", {}, Exception("down"))

        with pytest.raises(PasteStorageError):
            await SqlaPasteCommandGateway(mock_session).create(make_paste())

    @pytest.mark.asyncio
    async def test_delete_by_slug(self, mock_session: AsyncMock) -> None:
        await SqlaPasteCommandGateway(mock_session).delete_by_slug("abcDEF12")

        sql = _compiled(mock_session.execute.await_args.args[0])
        assert sql.startswith("DELETE FROM pastes WHERE pastes.slug =")


class TestSqlaTransactionManager:
    """SqlaTransactionManager 테스트."""

    @pytest.mark.asyncio
    async def test_commit_failure_wrapped(self, mock_session: AsyncMock) -> None:
        mock_session.commit.side_effect = OperationalError("COMMIT", {}, Exception("down"))

        with pytest.raises(PasteStorageError):
            await SqlaTransactionManager(mock_session).commit()

    @pytest.mark.asyncio
    async def test_rollback(self, mock_session: AsyncMock) -> None:
        await SqlaTransactionManager(mock_session).rollback()

        mock_session.rollback.assert_awaited_once()
