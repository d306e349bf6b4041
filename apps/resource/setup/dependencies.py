"""Dependency Injection Setup."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import Request

from apps.resource.setup.config import Settings

if TYPE_CHECKING:
    from apps.resource.application.auth import TokenVerifier


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_token_verifier(request: Request) -> "TokenVerifier":
    """lifespan에서 생성된 verifier (JWKS 캐시 공유)."""
    return request.app.state.token_verifier
