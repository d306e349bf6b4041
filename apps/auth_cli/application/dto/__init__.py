"""Device flow DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

DEFAULT_POLL_INTERVAL = 5


@dataclass(frozen=True, slots=True)
class DeviceAuthorization:
    """디바이스 코드 발급 응답."""

    device_code: str
    user_code: str
    verification_uri: str
    verification_uri_complete: str | None = None
    expires_in: int | None = None
    interval: int = DEFAULT_POLL_INTERVAL

    @property
    def browser_uri(self) -> str:
        """브라우저로 열 URI (코드가 채워진 URI 우선)."""
        return self.verification_uri_complete or self.verification_uri

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "DeviceAuthorization":
        return cls(
            device_code=data["device_code"],
            user_code=data["user_code"],
            verification_uri=data["verification_uri"],
            verification_uri_complete=data.get("verification_uri_complete") or None,
            expires_in=data.get("expires_in"),
            interval=data.get("interval") or DEFAULT_POLL_INTERVAL,
        )


@dataclass(frozen=True, slots=True)
class TokenSet:
    """토큰 엔드포인트 응답."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int | None = None
    refresh_token: str | None = None

    @classmethod
    def from_response(cls, data: dict[str, Any]) -> "TokenSet":
        return cls(
            access_token=data["access_token"],
            token_type=data.get("token_type") or "Bearer",
            expires_in=data.get("expires_in") or None,
            refresh_token=data.get("refresh_token") or None,
        )


@dataclass(frozen=True, slots=True)
class SessionUser:
    id: str
    email: str | None = None
    name: str | None = None


__all__ = ["DEFAULT_POLL_INTERVAL", "DeviceAuthorization", "SessionUser", "TokenSet"]
