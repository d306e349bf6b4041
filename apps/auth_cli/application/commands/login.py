"""Login command."""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Callable

from apps.auth_cli.application.exceptions import CliError
from apps.auth_cli.domain import LoginState

if TYPE_CHECKING:
    from apps.auth_cli.application.dto import DeviceAuthorization, TokenSet
    from apps.auth_cli.application.ports import (
        CredentialStore,
        DeviceAuthGateway,
        LoginStateStore,
    )

logger = logging.getLogger(__name__)


class LoginInteractor:
    """디바이스 인가 로그인 유스케이스.

    1. start(): 디바이스 코드 발급 (호출자가 사용자에게 코드를 안내)
    2. complete(): 승인 대기 → 토큰 저장 → 세션 사용자 조회 → 상태 저장
    """

    def __init__(
        self,
        hostname: str,
        gateway: "DeviceAuthGateway",
        credentials: "CredentialStore",
        state_store: "LoginStateStore",
        clock: Callable[[], datetime] | None = None,
    ) -> None:
        self._hostname = hostname
        self._gateway = gateway
        self._credentials = credentials
        self._state_store = state_store
        self._clock = clock or (lambda: datetime.now(timezone.utc))

    def start(self) -> "DeviceAuthorization":
        try:
            authorization = self._gateway.request_device_code()
        except CliError as e:
            raise CliError(f"failed to request device code: {e.message}") from e

        logger.info(
            "Device code issued",
            extra={"hostname": self._hostname, "interval": authorization.interval},
        )
        return authorization

    def complete(self, authorization: "DeviceAuthorization", timeout: float) -> LoginState:
        """사용자 승인을 기다려 로그인을 마칩니다.

        Raises:
            DeviceFlowError: 거부/만료/타임아웃
            CliError: 토큰 또는 상태 저장 실패
        """
        tokens = self._gateway.poll_for_token(
            authorization.device_code,
            authorization.interval,
            timeout,
        )
        self._credentials.save_tokens(tokens)

        state = LoginState(
            hostname=self._hostname,
            user_email=self._fetch_email(tokens),
            expires_at=self._expires_at(tokens),
        )
        self._state_store.save(state)

        logger.info("Login completed", extra={"hostname": self._hostname})
        return state

    def _expires_at(self, tokens: "TokenSet") -> datetime | None:
        if not tokens.expires_in:
            return None
        return self._clock() + timedelta(seconds=tokens.expires_in)

    def _fetch_email(self, tokens: "TokenSet") -> str | None:
        # 세션 조회 실패는 로그인 실패로 보지 않음
        try:
            user = self._gateway.get_session(tokens.access_token)
        except CliError as e:
            logger.warning("Session lookup failed", extra={"error": e.message})
            return None
        return user.email if user else None
