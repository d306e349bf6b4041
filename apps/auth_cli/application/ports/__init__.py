"""Device-login CLI Ports."""

from __future__ import annotations

from typing import Protocol

from apps.auth_cli.application.dto import DeviceAuthorization, SessionUser, TokenSet
from apps.auth_cli.domain import LoginState


class DeviceAuthGateway(Protocol):
    """인증 서버 디바이스 플로우 엔드포인트."""

    def request_device_code(self) -> DeviceAuthorization:
        """디바이스 코드 발급."""
        ...

    def poll_for_token(self, device_code: str, interval: int, timeout: float) -> TokenSet:
        """사용자 승인까지 토큰 엔드포인트 폴링."""
        ...

    def get_session(self, access_token: str) -> SessionUser | None:
        """액세스 토큰의 세션 사용자 조회."""
        ...


class CredentialStore(Protocol):
    """토큰 저장소 (시스템 keyring)."""

    def save_tokens(self, tokens: TokenSet) -> None: ...

    def get_access_token(self) -> str | None: ...

    def clear(self) -> None: ...


class LoginStateStore(Protocol):
    """로그인 상태 파일 저장소."""

    def load(self) -> LoginState | None: ...

    def save(self, state: LoginState) -> None: ...

    def clear(self) -> None: ...


__all__ = ["CredentialStore", "DeviceAuthGateway", "LoginStateStore"]
