"""Notes API - FastAPI application entry point.

Category/Note CRUD REST API입니다. /api/v1 아래는 정적 Bearer 토큰으로 보호됩니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from apps.notes.infrastructure.persistence_postgres.mappings import start_mappers
from apps.notes.infrastructure.persistence_postgres.session import dispose_engine
from apps.notes.presentation.http.controllers import api_router, health_router
from apps.notes.presentation.http.errors import register_exception_handlers
from apps.notes.presentation.http.middleware import (
    RequestIdMiddleware,
    RequestLoggingMiddleware,
)
from apps.notes.setup.config import get_settings
from apps.notes.setup.logging import setup_logging

logger = logging.getLogger(__name__)
settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    # Startup
    logger.info(
        f"Starting {settings.app_name} ({settings.environment})",
        extra={"addr": f"{settings.host}:{settings.port}"},
    )

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
        description="Notes and categories REST API",
        lifespan=lifespan,
    )

    # 나중에 추가한 미들웨어가 바깥쪽
    app.add_middleware(RequestIdMiddleware)
    app.add_middleware(RequestLoggingMiddleware)

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.notes.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.environment == "local",
    )
