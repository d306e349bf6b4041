"""Keyring Credential Store.

CredentialStore 포트의 keyring 구현체입니다.
액세스/리프레시 토큰을 OS 자격 증명 저장소에 보관합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from apps.auth_cli.application.exceptions import CliError

if TYPE_CHECKING:
    from apps.auth_cli.application.dto import TokenSet

logger = logging.getLogger(__name__)

ACCESS_TOKEN_KEY = "access_token"
REFRESH_TOKEN_KEY = "refresh_token"


class KeyringCredentialStore:
    def __init__(self, service: str) -> None:
        self._service = service

    def save_tokens(self, tokens: "TokenSet") -> None:
        self._set(ACCESS_TOKEN_KEY, tokens.access_token)
        if tokens.refresh_token:
            self._set(REFRESH_TOKEN_KEY, tokens.refresh_token)

    def get_access_token(self) -> str | None:
        try:
            return keyring.get_password(self._service, ACCESS_TOKEN_KEY)
        except KeyringError as e:
            logger.warning("Keyring read failed", extra={"error": str(e)})
            return None

    def clear(self) -> None:
        """저장된 토큰 삭제. 없는 항목은 무시합니다."""
        for key in (ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY):
            try:
                keyring.delete_password(self._service, key)
            except PasswordDeleteError:
                continue
            except KeyringError as e:
                raise CliError(f"failed to delete {key.replace('_', ' ')}: {e}") from e

    def _set(self, key: str, value: str) -> None:
        try:
            keyring.set_password(self._service, key, value)
        except KeyringError as e:
            raise CliError(f"failed to store {key.replace('_', ' ')}: {e}") from e
