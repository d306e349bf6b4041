"""Auth Gateway Application Entry Point.

외부 인증 서버 앞단의 HTTP 게이트웨이입니다.

- /api/auth/*: 인증 서버로 위임 (소셜 로그인, 디바이스 인증, JWT 발급)
- /login: 소셜 로그인 페이지
- /device: 디바이스 승인 페이지 (device-login 배포에서만)
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from apps.auth.presentation.http.controllers import device_router, root_router
from apps.auth.presentation.http.errors import register_exception_handlers
from apps.auth.presentation.http.middleware import PathScopedCORSMiddleware
from apps.auth.setup.config import Settings, get_settings
from apps.auth.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    settings: Settings = app.state.settings
    # Startup
    logger.info(
        "Starting Auth Gateway",
        extra={
            "upstream_url": settings.upstream_url,
            "device_authorization": settings.device_authorization_enabled,
        },
    )
    app.state.upstream_client = httpx.AsyncClient(
        timeout=settings.upstream_timeout_seconds,
        follow_redirects=False,
    )

    yield

    # Shutdown
    await app.state.upstream_client.aclose()
    logger.info("Shutting down Auth Gateway")


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = settings or get_settings()

    # 로깅 설정
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="외부 인증 서버 게이트웨이",
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # CORS 설정 (/api/auth/* 에만 적용)
    app.add_middleware(
        PathScopedCORSMiddleware,
        path_prefix="/api/auth",
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    # 예외 핸들러 등록
    register_exception_handlers(app)

    # 라우터 등록
    app.include_router(root_router)
    if settings.device_authorization_enabled:
        app.include_router(device_router, tags=["pages"])

    return app


# 애플리케이션 인스턴스
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.auth.main:app",
        host="0.0.0.0",
        port=3000,
        reload=True,
    )
