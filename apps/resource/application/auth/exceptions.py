"""Authentication Exceptions."""

from apps.resource.application.common.exceptions import ApplicationError


class AuthenticationError(ApplicationError):
    """요청 인증 실패 (401)."""


class InvalidTokenError(AuthenticationError):
    """JWT 검증 실패."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"invalid token: {reason}")


class JwksUnavailableError(ApplicationError):
    """JWKS를 가져올 수 없음 (500)."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"failed to fetch JWKS: {reason}")
