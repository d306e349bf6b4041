"""Delete paste command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.pastes.application.common.exceptions import PasteStorageError

if TYPE_CHECKING:
    from apps.pastes.application.common.ports import TransactionManager
    from apps.pastes.application.paste.ports import PasteCommandGateway

logger = logging.getLogger(__name__)


class DeletePasteInteractor:
    """Paste 삭제 유스케이스.

    존재하지 않는 slug도 성공으로 처리합니다.
    """

    def __init__(
        self,
        paste_command: "PasteCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._paste_command = paste_command
        self._tx = transaction_manager

    async def execute(self, slug: str) -> None:
        try:
            await self._paste_command.delete_by_slug(slug)
            await self._tx.commit()
        except PasteStorageError as e:
            await self._tx.rollback()
            logger.error("Failed to delete paste", extra={"slug": slug, "error": e.message})
            raise PasteStorageError("failed to delete paste") from e

        logger.info("Paste deleted", extra={"slug": slug})
