"""Resource API Application Entry Point.

- /api/public/*: 인증 없이 접근
- /api/protected/*: 인증 서버 JWKS로 검증된 Bearer JWT 필요
"""

import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.resource.infrastructure.jwks import JoseTokenVerifier, JwksCache
from apps.resource.presentation.http.controllers import root_router
from apps.resource.presentation.http.errors import register_exception_handlers
from apps.resource.setup.config import Settings, get_settings
from apps.resource.setup.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """애플리케이션 생명주기 관리."""
    settings: Settings = app.state.settings
    logger.info("Starting Resource API", extra={"jwks_url": settings.jwks_url})

    app.state.jwks_client = httpx.AsyncClient(timeout=settings.jwks_timeout_seconds)
    jwks_cache = JwksCache(
        app.state.jwks_client,
        settings.jwks_url,
        min_refresh_interval=settings.jwks_min_refresh_seconds,
        max_refresh_interval=settings.jwks_max_refresh_seconds,
    )
    app.state.token_verifier = JoseTokenVerifier(
        jwks_cache,
        audience=settings.jwt_audience,
        issuer=settings.jwt_issuer,
    )

    yield

    await app.state.jwks_client.aclose()
    logger.info("Shutting down Resource API")


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 애플리케이션 팩토리."""
    settings = settings or get_settings()
    setup_logging(settings)

    app = FastAPI(
        title=settings.app_name,
        description="JWKS 기반 JWT 검증 리소스 서버",
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type"],
    )

    register_exception_handlers(app)
    app.include_router(root_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.resource.main:app",
        host="0.0.0.0",
        port=8082,
        reload=True,
    )
