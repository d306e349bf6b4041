"""JSON Login State File.

LoginStateStore 포트의 파일 구현체입니다.

저장 위치: ``$XDG_CONFIG_HOME/device-login-cli/config.json``
(XDG_CONFIG_HOME 미설정 시 ``~/.config``)

임시 파일에 쓰고 ``os.replace``로 교체하므로 중간 상태의 파일이 남지 않습니다.
파일 권한은 0600, 디렉토리는 0700입니다.
"""

from __future__ import annotations

import logging
import os
import tempfile
from datetime import datetime, timezone
from pathlib import Path

from pydantic import BaseModel, ValidationError

from apps.auth_cli.application.exceptions import CliError
from apps.auth_cli.domain import LoginState

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = "device-login-cli"
CONFIG_FILE_NAME = "config.json"


class AuthSection(BaseModel):
    hostname: str
    user_email: str | None = None
    expires_at: datetime | None = None


class CliConfig(BaseModel):
    """config.json 스키마."""

    auth: AuthSection


def default_config_path() -> Path:
    base = os.environ.get("XDG_CONFIG_HOME") or str(Path.home() / ".config")
    return Path(base) / CONFIG_DIR_NAME / CONFIG_FILE_NAME


class JsonLoginStateStore:
    def __init__(self, path: Path | None = None) -> None:
        self._path = path or default_config_path()

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> LoginState | None:
        """파일이 없거나 손상되었으면 None."""
        if not self._path.is_file():
            return None
        try:
            config = CliConfig.model_validate_json(self._path.read_text(encoding="utf-8"))
        except (OSError, ValidationError) as e:
            logger.warning(
                "Ignoring unreadable config file",
                extra={"path": str(self._path), "error": str(e)},
            )
            return None

        expires_at = config.auth.expires_at
        if expires_at is not None and expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)

        return LoginState(
            hostname=config.auth.hostname,
            user_email=config.auth.user_email,
            expires_at=expires_at,
        )

    def save(self, state: LoginState) -> None:
        config = CliConfig(
            auth=AuthSection(
                hostname=state.hostname,
                user_email=state.user_email,
                expires_at=state.expires_at,
            )
        )
        text = config.model_dump_json(indent=2, exclude_none=True) + "\n"

        try:
            self._write_atomic(text)
        except OSError as e:
            raise CliError(f"failed to save config: {e}") from e

    def clear(self) -> None:
        try:
            self._path.unlink(missing_ok=True)
        except OSError as e:
            raise CliError(f"failed to remove config: {e}") from e

    def _write_atomic(self, text: str) -> None:
        directory = self._path.parent
        directory.mkdir(mode=0o700, parents=True, exist_ok=True)

        fd, tmp_path = tempfile.mkstemp(
            dir=directory,
            prefix=f".{self._path.name}.",
            suffix=".tmp",
        )
        try:
            os.fchmod(fd, 0o600)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(text)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self._path)
        except BaseException:
            Path(tmp_path).unlink(missing_ok=True)
            raise
