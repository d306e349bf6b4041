"""Paste view DTOs."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass(frozen=True, slots=True)
class PasteView:
    """API 응답에서 화면에 필요한 필드만 추린 Paste."""

    slug: str
    content: str
    language: str
    created_at: datetime
    title: str | None = None
    is_public: bool = True
    expires_at: datetime | None = None

    @property
    def display_title(self) -> str:
        return self.title or "Untitled"

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PasteView":
        expires_at = data.get("expires_at")
        return cls(
            slug=data["slug"],
            content=data.get("content", ""),
            language=data.get("language") or "plaintext",
            created_at=_parse_datetime(data["created_at"]),
            title=data.get("title") or None,
            is_public=data.get("is_public", True),
            expires_at=_parse_datetime(expires_at) if expires_at else None,
        )


@dataclass(frozen=True, slots=True)
class PasteDraft:
    """생성 폼 입력."""

    content: str
    title: str = ""
    language: str = "plaintext"
    is_public: bool = True
    expires_in_minutes: int | None = None

    def to_payload(self) -> dict[str, Any]:
        return {
            "title": self.title,
            "content": self.content,
            "language": self.language,
            "is_public": self.is_public,
            "expires_in_minutes": self.expires_in_minutes,
        }


def _parse_datetime(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
