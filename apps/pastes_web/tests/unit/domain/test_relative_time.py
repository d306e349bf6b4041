"""Relative time formatting tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from apps.pastes_web.domain.relative_time import format_relative_time

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


class TestFormatRelativeTime:
    """format_relative_time 테스트."""

    @pytest.mark.parametrize(
        ("elapsed", "expected"),
        [
            (timedelta(seconds=30), "just now"),
            (timedelta(seconds=59), "just now"),
            (timedelta(minutes=1), "1m ago"),
            (timedelta(minutes=59, seconds=59), "59m ago"),
            (timedelta(hours=1), "1h ago"),
            (timedelta(hours=23, minutes=59), "23h ago"),
            (timedelta(days=1), "1d ago"),
            (timedelta(days=6, hours=23), "6d ago"),
        ],
    )
    def test_buckets(self, elapsed: timedelta, expected: str) -> None:
        assert format_relative_time(NOW - elapsed, NOW) == expected

    def test_older_than_a_week_uses_date(self) -> None:
        created_at = NOW - timedelta(days=30)

        result = format_relative_time(created_at, NOW)

        assert result == created_at.astimezone().strftime("%x")

    def test_future_is_just_now(self) -> None:
        assert format_relative_time(NOW + timedelta(minutes=5), NOW) == "just now"

    def test_naive_datetime_treated_as_utc(self) -> None:
        naive = (NOW - timedelta(minutes=5)).replace(tzinfo=None)

        assert format_relative_time(naive, NOW) == "5m ago"
