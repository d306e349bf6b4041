"""Request Exceptions."""

from apps.notes.application.common.exceptions.base import ApplicationError


class InvalidInputError(ApplicationError):
    """식별자 형식 오류 등 요청 값 검증 실패."""

    pass


class AuthenticationError(ApplicationError):
    """API 토큰 인증 실패."""

    pass
