"""Dependency Injection Setup.

FastAPI Depends를 사용한 의존성 주입 설정입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Depends, Request

from apps.auth.setup.config import Settings

if TYPE_CHECKING:
    import httpx

    from apps.auth.application.gateway.ports import AuthHandler


def get_app_settings(request: Request) -> Settings:
    """create_app()에 전달된 설정 (배포별로 다름)."""
    return request.app.state.settings


def get_upstream_client(request: Request) -> "httpx.AsyncClient":
    """인증 서버용 httpx 클라이언트 (lifespan에서 생성)."""
    return request.app.state.upstream_client


def get_auth_handler(
    client: "httpx.AsyncClient" = Depends(get_upstream_client),
    settings: Settings = Depends(get_app_settings),
) -> "AuthHandler":
    """AuthHandler 제공자."""
    from apps.auth.infrastructure.upstream import HttpxAuthHandler

    return HttpxAuthHandler(client, upstream_url=settings.upstream_url)
