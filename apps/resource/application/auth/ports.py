"""Authentication Ports."""

from __future__ import annotations

from typing import Any, Protocol

from apps.resource.application.auth.dto import AuthenticatedUser


class KeySource(Protocol):
    """서명 검증 키 조회."""

    async def get_key(self, kid: str | None) -> dict[str, Any]:
        """kid에 해당하는 JWK.

        Raises:
            InvalidTokenError: 알 수 없는 kid
            JwksUnavailableError: JWKS 조회 실패
        """
        ...


class TokenVerifier(Protocol):
    async def verify(self, token: str) -> AuthenticatedUser:
        """Bearer 토큰 검증.

        Raises:
            InvalidTokenError: 서명/만료/클레임 검증 실패
            JwksUnavailableError: JWKS 조회 실패
        """
        ...
