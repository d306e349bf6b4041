"""Application configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Pastebin 프론트엔드 설정."""

    app_name: str = "Pastebin"
    service_name: str = "pastes-web"
    service_version: str = "1.0.0"
    environment: str = "local"
    log_level: str = "INFO"

    # Pastes REST API
    api_base_url: str = Field("http://localhost:8080", description="Pastes API base URL")
    api_timeout_seconds: float = Field(10.0, gt=0)

    recent_limit: int = Field(10, ge=1, le=100, description="최근 목록 개수")

    model_config = SettingsConfigDict(
        env_prefix="PASTES_WEB_",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스를 반환합니다."""
    return Settings()
