"""Get paste query."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from apps.pastes.application.common.exceptions import PasteStorageError
from apps.pastes.domain.exceptions import PasteExpiredError, PasteNotFoundError

if TYPE_CHECKING:
    from apps.pastes.application.paste.ports import PasteQueryGateway
    from apps.pastes.domain.entities import Paste

logger = logging.getLogger(__name__)


class GetPasteQuery:
    """slug로 Paste를 조회합니다."""

    def __init__(
        self,
        paste_query: "PasteQueryGateway",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._paste_query = paste_query
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, slug: str) -> "Paste":
        """Paste를 조회합니다.

        Raises:
            PasteNotFoundError: 존재하지 않음
            PasteExpiredError: 만료됨
            PasteStorageError: 조회 실패
        """
        try:
            paste = await self._paste_query.get_by_slug(slug)
        except PasteStorageError as e:
            logger.error("Failed to get paste", extra={"slug": slug, "error": e.message})
            raise PasteStorageError("failed to get paste") from e

        if paste is None:
            raise PasteNotFoundError(slug)
        if paste.is_expired(self._clock()):
            raise PasteExpiredError(slug)
        return paste
