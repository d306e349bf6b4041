"""Application Settings.

env_prefix="AUTH_" 사용으로 AUTH_UPSTREAM_URL 등의 환경변수 매핑.

같은 애플리케이션을 두 가지 배포로 사용합니다:
    - device-login: AUTH_DEVICE_AUTHORIZATION_ENABLED=true (기본값, /device 페이지 제공)
    - resource: AUTH_DEVICE_AUTHORIZATION_ENABLED=false (/login 페이지만 제공)
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """애플리케이션 설정.

    환경변수에서 자동으로 로드됩니다.

    예시:
        AUTH_UPSTREAM_URL → upstream_url
        AUTH_TRUSTED_ORIGINS → trusted_origins
    """

    # Service
    app_name: str = "Auth Gateway"
    service_name: str = "auth-gateway"
    service_version: str = "1.0.0"
    environment: str = "local"
    log_level: str = "INFO"

    # 브라우저 인증 클라이언트가 호출하는 공개 URL
    base_url: str = "http://localhost:3000"

    # 외부 인증 서버 (/api/auth/* 위임 대상)
    upstream_url: str = "http://localhost:3001"
    upstream_timeout_seconds: float = 30.0

    # CORS (쉼표 구분)
    trusted_origins: str = "http://localhost:3000"

    # Pages
    device_authorization_enabled: bool = True
    social_provider: str = "github"
    auth_client_version: str = "1.4.10"

    model_config = SettingsConfigDict(
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("base_url", "upstream_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        """URL 끝의 슬래시 제거."""
        return value.rstrip("/")

    @property
    def cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.trusted_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """캐시된 Settings 인스턴스 반환 (FastAPI 공식 패턴)."""
    return Settings()
