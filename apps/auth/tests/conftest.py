"""Test Configuration and Fixtures.

pytest 설정 및 공통 픽스처.
"""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from apps.auth.application.gateway.dto import AuthResponse
from apps.auth.setup.config import Settings


@pytest.fixture
def settings() -> Settings:
    """device-login 배포 설정."""
    return Settings(
        upstream_url="http://auth-upstream.test",
        trusted_origins="http://localhost:3000,http://app.test",
        device_authorization_enabled=True,
    )


@pytest.fixture
def resource_settings() -> Settings:
    """resource 배포 설정 (디바이스 페이지 없음)."""
    return Settings(
        upstream_url="http://auth-upstream.test",
        device_authorization_enabled=False,
    )


@pytest.fixture
def mock_auth_handler() -> AsyncMock:
    """AuthHandler Mock."""
    handler = AsyncMock()
    handler.handle.return_value = AuthResponse(
        status_code=200,
        headers=(("content-type", "application/json"),),
        body=b'{"ok":true}',
    )
    return handler
