"""List pastes query."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from apps.pastes.application.common.exceptions import PasteStorageError

if TYPE_CHECKING:
    from apps.pastes.application.paste.dto import PageRequest
    from apps.pastes.application.paste.ports import PasteQueryGateway
    from apps.pastes.domain.entities import Paste

logger = logging.getLogger(__name__)


class ListPastesQuery:
    """공개 Paste 목록 조회 (만료 제외, 최신순)."""

    def __init__(
        self,
        paste_query: "PasteQueryGateway",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._paste_query = paste_query
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, page: "PageRequest") -> list["Paste"]:
        try:
            return await self._paste_query.list_public(
                now=self._clock(),
                limit=page.limit,
                offset=page.offset,
            )
        except PasteStorageError as e:
            logger.error("Failed to list pastes", extra={"error": e.message})
            raise PasteStorageError("failed to list pastes") from e
