"""Upstream Exceptions."""

from apps.auth.application.common.exceptions.base import ApplicationError


class AuthUpstreamError(ApplicationError):
    """인증 서버 통신 실패."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Auth server unavailable: {reason}")
