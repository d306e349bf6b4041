"""Auth status query."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.auth_cli.application.ports import CredentialStore, LoginStateStore
    from apps.auth_cli.domain import LoginState


class AuthStatusQuery:
    """현재 로그인 상태 조회.

    상태 파일이나 액세스 토큰 중 하나라도 없으면 로그인되지 않은 것(None)입니다.
    """

    def __init__(
        self,
        credentials: "CredentialStore",
        state_store: "LoginStateStore",
    ) -> None:
        self._credentials = credentials
        self._state_store = state_store

    def execute(self) -> "LoginState | None":
        state = self._state_store.load()
        if state is None:
            return None
        if not self._credentials.get_access_token():
            return None
        return state
