"""Paste HTTP schemas."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class CreatePasteRequest(BaseModel):
    """Paste 생성 요청 스키마.

    길이 제한과 필수 여부는 도메인에서 검증합니다.
    """

    title: str | None = Field(None, description="제목 (최대 200자)")
    content: str = Field("", description="본문")
    language: str | None = Field(None, description="언어 (기본 plaintext)")
    is_public: bool | None = Field(None, description="공개 여부 (기본 true)")
    expires_in_minutes: int | None = Field(None, description="만료까지 남은 분 (0 이하는 만료 없음)")


class PasteResponse(BaseModel):
    """Paste 응답 스키마."""

    id: int = Field(..., description="Paste ID")
    slug: str = Field(..., description="URL-safe 식별자")
    title: str | None = Field(None, description="제목")
    content: str = Field(..., description="본문")
    language: str = Field(..., description="언어")
    is_public: bool = Field(..., description="공개 여부")
    expires_at: datetime | None = Field(None, description="만료 시각")
    created_at: datetime = Field(..., description="생성 시각")

    model_config = {"from_attributes": True}


class PasteListResponse(BaseModel):
    """Paste 목록 응답 스키마."""

    pastes: list[PasteResponse] = Field(..., description="Paste 목록")
    limit: int = Field(..., description="적용된 limit")
    offset: int = Field(..., description="적용된 offset")
