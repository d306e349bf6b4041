"""LoginState.

CLI가 로컬에 보관하는 로그인 상태(서버, 사용자, 토큰 만료 시각)입니다.
토큰 자체는 시스템 keyring에 저장되며 여기에는 포함되지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass(frozen=True, slots=True)
class LoginState:
    hostname: str
    user_email: str | None = None
    expires_at: datetime | None = None

    def is_expired(self, now: datetime) -> bool:
        """만료 시각이 없으면 만료되지 않은 것으로 봅니다."""
        return self.expires_at is not None and now >= self.expires_at

    def time_remaining(self, now: datetime) -> timedelta | None:
        if self.expires_at is None:
            return None
        return max(self.expires_at - now, timedelta(0))


def normalize_hostname(hostname: str) -> str:
    """앞뒤 공백과 끝의 ``/`` 제거."""
    return hostname.strip().rstrip("/")


def format_duration(delta: timedelta) -> str:
    """초 단위로 반올림한 ``1h2m3s`` 형태의 문자열.

    예시:
        timedelta(minutes=4, seconds=59.6) → "5m0s"
        timedelta(seconds=42)              → "42s"
    """
    total = int(round(delta.total_seconds()))
    hours, rest = divmod(total, 3600)
    minutes, seconds = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{seconds}s"
    if minutes:
        return f"{minutes}m{seconds}s"
    return f"{seconds}s"
