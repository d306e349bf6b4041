"""CLI Application Exceptions."""


class CliError(Exception):
    """CLI 명령 실패.

    presentation 계층에서 메시지를 출력하고 exit code 1로 종료합니다.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DeviceFlowError(CliError):
    """디바이스 인가 플로우 오류.

    code는 토큰 엔드포인트의 OAuth 에러 코드입니다
    (``authorization_pending``, ``slow_down``, ``access_denied``, ``expired_token`` 등).
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        self.code = code
        super().__init__(message)


__all__ = ["CliError", "DeviceFlowError"]
