"""Note HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class NoteRequest(BaseModel):
    """Note 생성/수정 요청.

    category_id는 컨트롤러에서 UUID로 파싱하여 "invalid category_id"로 응답합니다.
    """

    category_id: str = Field("", description="Category ID (UUID)")
    title: str = Field("", description="제목 (필수)")
    content: str = Field("", description="본문")


class NoteResponse(BaseModel):
    id: UUID
    category_id: UUID
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
