"""Paste DTOs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CreatePasteInput:
    """Paste 생성 입력."""

    content: str
    title: str | None = None
    language: str | None = None
    is_public: bool = True
    expires_in_minutes: int | None = None


@dataclass(frozen=True, slots=True)
class PageRequest:
    """목록 조회 페이지 요청."""

    limit: int
    offset: int
