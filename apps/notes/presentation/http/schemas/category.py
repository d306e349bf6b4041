"""Category HTTP schemas."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field


class CategoryRequest(BaseModel):
    """Category 생성/수정 요청. 빈 이름은 도메인에서 거부합니다."""

    name: str = Field("", description="이름 (필수, 유일)")


class CategoryResponse(BaseModel):
    id: UUID
    name: str
    created_at: datetime
    updated_at: datetime

    model_config = {"from_attributes": True}
