"""Logout command."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.auth_cli.application.ports import CredentialStore, LoginStateStore

logger = logging.getLogger(__name__)


class LogoutInteractor:
    """저장된 토큰과 로그인 상태를 삭제합니다.

    이미 로그아웃된 상태여도 성공합니다.
    """

    def __init__(
        self,
        credentials: "CredentialStore",
        state_store: "LoginStateStore",
    ) -> None:
        self._credentials = credentials
        self._state_store = state_store

    def execute(self) -> None:
        self._credentials.clear()
        self._state_store.clear()
        logger.info("Logged out")
