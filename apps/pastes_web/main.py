"""Pastebin Web - FastAPI application entry point.

서버 렌더링 Pastebin 프론트엔드입니다. 데이터는 Pastes REST API에서 가져옵니다.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from apps.pastes_web.presentation.http.controllers import health_router, pages_router
from apps.pastes_web.setup.config import Settings, get_settings
from apps.pastes_web.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 수명주기 관리."""
    settings: Settings = app.state.settings
    # Startup
    logger.info(
        f"Starting {settings.app_name} ({settings.environment})",
        extra={"api_base_url": settings.api_base_url},
    )
    app.state.api_client = httpx.AsyncClient(
        base_url=settings.api_base_url,
        timeout=settings.api_timeout_seconds,
    )

    yield

    # Shutdown
    await app.state.api_client.aclose()
    logger.info(f"Shutting down {settings.app_name}")


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션을 생성합니다."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        version=settings.service_version,
        description="Pastebin frontend",
        docs_url=None,
        redoc_url=None,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # 라우터 등록
    app.include_router(health_router)
    app.include_router(pages_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.pastes_web.main:app",
        host="0.0.0.0",
        port=8081,
        reload=get_settings().environment == "local",
    )
