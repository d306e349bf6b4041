"""AuthHandler Port.

``/api/auth/*`` 요청을 처리하는 외부 인증 서버의 인터페이스입니다.
세션, 소셜 로그인, 디바이스 인가, JWT 발급은 모두 외부 인증 서버가 소유합니다.
"""

from typing import Protocol

from apps.auth.application.gateway.dto import AuthRequest, AuthResponse


class AuthHandler(Protocol):
    """인증 핸들러 인터페이스.

    구현체:
        - HttpxAuthHandler (infrastructure/upstream/)
    """

    async def handle(self, request: AuthRequest) -> AuthResponse:
        """요청을 그대로 위임하고 응답을 반환.

        Raises:
            AuthUpstreamError: 인증 서버에 연결할 수 없음
        """
        ...
