"""Pastes API port."""

from __future__ import annotations

from typing import Protocol

from apps.pastes_web.application.dto import PasteDraft, PasteView


class PastesApi(Protocol):
    """Pastes REST API 포트."""

    async def list_recent(self, limit: int) -> list[PasteView]:
        ...

    async def get(self, slug: str) -> PasteView:
        ...

    async def create(self, draft: PasteDraft) -> PasteView:
        ...
