"""Pastes API client exceptions."""


class PastesApiError(Exception):
    """Pastes API 호출 실패.

    status_code는 HTTP 응답이 없으면(연결 실패 등) None입니다.
    """

    def __init__(self, message: str, status_code: int | None = None) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    @property
    def is_expired(self) -> bool:
        return self.status_code == 410

    @property
    def is_not_found(self) -> bool:
        return self.status_code == 404
