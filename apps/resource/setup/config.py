"""Application configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Resource API 설정."""

    app_name: str = "Resource API"
    service_name: str = "resource-api"
    service_version: str = "1.0.0"
    environment: str = "local"
    log_level: str = "INFO"

    # 인증 서버 (JWKS 제공자)
    auth_service_url: str = Field("http://localhost:3000", description="Auth service base URL")
    jwks_timeout_seconds: float = Field(10.0, gt=0)
    jwks_min_refresh_seconds: float = Field(60.0, ge=0, description="JWKS 최소 갱신 간격")
    jwks_max_refresh_seconds: float = Field(900.0, gt=0, description="JWKS 최대 갱신 간격")

    # 설정 시에만 검증
    jwt_audience: str | None = None
    jwt_issuer: str | None = None

    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_prefix="RESOURCE_",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("auth_service_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @property
    def jwks_url(self) -> str:
        return f"{self.auth_service_url}/api/auth/jwks"


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스를 반환합니다."""
    return Settings()
