"""Storage Exceptions."""

from apps.notes.application.common.exceptions.base import ApplicationError


class NotesStorageError(ApplicationError):
    """저장소 작업 실패.

    어댑터는 드라이버 오류를 그대로 담아 올리고,
    Use Case가 "failed to ..." 형태의 고정 메시지로 바꿔 다시 올립니다.
    """

    pass
