"""Relative time formatting for paste timestamps."""

from __future__ import annotations

from datetime import datetime, timezone

MINUTE = 60
HOUR = 60 * MINUTE
DAY = 24 * HOUR
WEEK = 7 * DAY


def format_relative_time(created_at: datetime, now: datetime | None = None) -> str:
    """생성 시각을 상대 시간 문자열로 변환합니다.

    1분 미만 "just now", 1시간 미만 "Nm ago", 1일 미만 "Nh ago",
    1주 미만 "Nd ago", 그 이상은 로케일 날짜 문자열입니다.
    미래 시각은 "just now"로 취급합니다.
    """
    if created_at.tzinfo is None:
        created_at = created_at.replace(tzinfo=timezone.utc)
    now = now or datetime.now(timezone.utc)

    elapsed = (now - created_at).total_seconds()
    if elapsed < MINUTE:
        return "just now"
    if elapsed < HOUR:
        return f"{int(elapsed // MINUTE)}m ago"
    if elapsed < DAY:
        return f"{int(elapsed // HOUR)}h ago"
    if elapsed < WEEK:
        return f"{int(elapsed // DAY)}d ago"
    return created_at.astimezone().strftime("%x")
