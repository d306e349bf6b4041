"""Storage Exceptions."""

from apps.pastes.application.common.exceptions.base import ApplicationError


class PasteStorageError(ApplicationError):
    """저장소 작업 실패.

    message는 클라이언트에 그대로 노출되므로 내부 오류 내용을 담지 않습니다.
    """

    pass
