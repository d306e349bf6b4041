"""Paste entity - Core domain object for a stored text snippet."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone

from apps.pastes.domain.exceptions import InvalidPasteError

DEFAULT_LANGUAGE = "plaintext"
TITLE_MAX_LENGTH = 200
LANGUAGE_MAX_LENGTH = 50


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Paste:
    """Paste 엔티티.

    pastes 테이블에 매핑됩니다.
    slug는 서버에서 발급하며, expires_at이 지나면 조회할 수 없습니다.
    """

    slug: str
    content: str
    title: str | None = None
    language: str = DEFAULT_LANGUAGE
    is_public: bool = True
    expires_at: datetime | None = None
    id: int | None = None
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    @classmethod
    def create(
        cls,
        *,
        slug: str,
        content: str,
        title: str | None = None,
        language: str | None = None,
        is_public: bool = True,
        expires_in_minutes: int | None = None,
        now: datetime | None = None,
    ) -> "Paste":
        """새 Paste를 생성합니다.

        Args:
            slug: 발급된 slug
            content: 본문 (필수)
            title: 제목 (최대 200자, 빈 문자열은 제목 없음)
            language: 언어 (최대 50자, 기본 plaintext)
            is_public: 공개 여부
            expires_in_minutes: 만료까지 남은 분 (0 이하 또는 None은 만료 없음)
            now: 기준 시각

        Raises:
            InvalidPasteError: 필드 검증 실패
        """
        if not content:
            raise InvalidPasteError("content is required")
        if title and len(title) > TITLE_MAX_LENGTH:
            raise InvalidPasteError(f"title must be at most {TITLE_MAX_LENGTH} characters")
        if language and len(language) > LANGUAGE_MAX_LENGTH:
            raise InvalidPasteError(
                f"language must be at most {LANGUAGE_MAX_LENGTH} characters"
            )

        now = now or _utcnow()
        expires_at = None
        if expires_in_minutes is not None and expires_in_minutes > 0:
            try:
                expires_at = now + timedelta(minutes=expires_in_minutes)
            except OverflowError as e:
                raise InvalidPasteError("expires_in_minutes is too large") from e

        return cls(
            slug=slug,
            content=content,
            title=title or None,
            language=language or DEFAULT_LANGUAGE,
            is_public=is_public,
            expires_at=expires_at,
            created_at=now,
            updated_at=now,
        )

    def is_expired(self, now: datetime | None = None) -> bool:
        """만료 여부를 반환합니다."""
        if self.expires_at is None:
            return False
        return self.expires_at < (now or _utcnow())
