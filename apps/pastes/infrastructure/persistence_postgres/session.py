"""PostgreSQL Session Management."""

from __future__ import annotations

from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from apps.pastes.setup.config import get_settings


def get_async_engine() -> AsyncEngine:
    """AsyncEngine 생성.

    환경변수:
        - PASTES_DATABASE_URL: PostgreSQL 연결 URL
        - PASTES_DATABASE_POOL_SIZE: 풀 크기 (기본: 5)
        - PASTES_DATABASE_MAX_OVERFLOW: 최대 오버플로우 (기본: 10)
    """
    settings = get_settings()
    return create_async_engine(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        pool_pre_ping=True,
        echo=settings.database_echo,
    )


_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _get_session_factory() -> async_sessionmaker[AsyncSession]:
    """세션 팩토리 싱글톤."""
    global _engine, _session_factory
    if _session_factory is None:
        _engine = get_async_engine()
        _session_factory = async_sessionmaker(
            _engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
    return _session_factory


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI Depends용 세션 제공자."""
    session_factory = _get_session_factory()
    async with session_factory() as session:
        yield session


async def dispose_engine() -> None:
    """엔진 연결 풀 종료 (shutdown 시)."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None
