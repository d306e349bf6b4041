"""Dependency injection setup."""

from __future__ import annotations

from fastapi import Request

from apps.pastes_web.application.ports import PastesApi
from apps.pastes_web.infrastructure.api import PastesApiClient
from apps.pastes_web.setup.config import Settings


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_pastes_api(request: Request) -> PastesApi:
    """lifespan에서 생성한 httpx 클라이언트로 PastesApiClient를 만듭니다."""
    return PastesApiClient(request.app.state.api_client)
