"""Create paste command."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Callable

from apps.pastes.application.common.exceptions import PasteStorageError
from apps.pastes.domain.entities import Paste

if TYPE_CHECKING:
    from apps.pastes.application.common.ports import TransactionManager
    from apps.pastes.application.paste.dto import CreatePasteInput
    from apps.pastes.application.paste.ports import PasteCommandGateway
    from apps.pastes.domain.services import SlugGenerator

logger = logging.getLogger(__name__)


class CreatePasteInteractor:
    """Paste 생성 유스케이스."""

    def __init__(
        self,
        paste_command: "PasteCommandGateway",
        transaction_manager: "TransactionManager",
        slug_generator: "SlugGenerator",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._paste_command = paste_command
        self._tx = transaction_manager
        self._slug_generator = slug_generator
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    async def execute(self, data: "CreatePasteInput") -> Paste:
        """Paste를 생성합니다.

        Raises:
            InvalidPasteError: 필드 검증 실패
            PasteStorageError: 저장 실패
        """
        paste = Paste.create(
            slug=self._slug_generator.generate(),
            content=data.content,
            title=data.title,
            language=data.language,
            is_public=data.is_public,
            expires_in_minutes=data.expires_in_minutes,
            now=self._clock(),
        )

        try:
            created = await self._paste_command.create(paste)
            await self._tx.commit()
        except PasteStorageError as e:
            await self._tx.rollback()
            logger.error("Failed to create paste", extra={"error": e.message})
            raise PasteStorageError("failed to create paste") from e

        logger.info(
            "Paste created",
            extra={
                "slug": created.slug,
                "is_public": created.is_public,
                "expires_at": created.expires_at.isoformat() if created.expires_at else None,
            },
        )
        return created
