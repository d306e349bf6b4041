"""Pastes API - FastAPI application entry point.

Paste CRUD REST API입니다. PostgreSQL에 저장하며 만료된 Paste는 410으로 응답합니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.pastes.infrastructure.persistence_postgres.mappings import start_mappers
from apps.pastes.infrastructure.persistence_postgres.session import dispose_engine
from apps.pastes.presentation.http.controllers import health_router, pastes_router
from apps.pastes.presentation.http.errors import register_exception_handlers
from apps.pastes.presentation.http.middleware import RequestLoggingMiddleware
from apps.pastes.setup.config import get_settings
from apps.pastes.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    # Startup
    logger.info(f"Starting {settings.app_name} ({settings.environment})")

    yield

    # Shutdown
    await dispose_engine()
    logger.info(f"Shutting down {settings.app_name}")


def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    setup_logging(settings)

    # ORM 매핑 시작
    start_mappers()

    app = FastAPI(
        title=settings.app_name,
        version=settings.service_version,
        description="Pastebin REST API",
        lifespan=lifespan,
    )

    app.add_middleware(RequestLoggingMiddleware)

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(pastes_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.pastes.main:app",
        host="0.0.0.0",
        port=8080,
        reload=settings.environment == "local",
    )
