"""Paste gateway ports."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from apps.pastes.domain.entities import Paste


class PasteQueryGateway(Protocol):
    """Paste 조회 포트."""

    async def get_by_slug(self, slug: str) -> Paste | None:
        """slug로 Paste를 조회합니다."""
        ...

    async def list_public(self, *, now: datetime, limit: int, offset: int) -> list[Paste]:
        """만료되지 않은 공개 Paste를 최신순으로 조회합니다."""
        ...


class PasteCommandGateway(Protocol):
    """Paste 변경 포트."""

    async def create(self, paste: Paste) -> Paste:
        """새 Paste를 저장합니다."""
        ...

    async def delete_by_slug(self, slug: str) -> None:
        """slug에 해당하는 Paste를 삭제합니다 (없으면 무시)."""
        ...
