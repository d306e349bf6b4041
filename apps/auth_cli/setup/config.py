"""CLI configuration.

환경변수(DEVICE_LOGIN_*)로 OAuth 클라이언트 정보와 로그 레벨을 조정합니다.
사용자별 로그인 상태는 config.json에 별도로 저장됩니다.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    service_name: str = "device-login-cli"
    service_version: str = "1.0.0"
    environment: str = "local"
    # CLI 출력과 섞이지 않도록 기본은 WARNING
    log_level: str = "WARNING"

    client_id: str = "device-login-cli"
    scope: str = "openid profile email"
    keyring_service: str = "device-login-cli"
    http_timeout_seconds: float = Field(30.0, gt=0)

    model_config = SettingsConfigDict(
        env_prefix="DEVICE_LOGIN_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스를 반환합니다."""
    return Settings()
