"""Authenticated user DTO."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class AuthenticatedUser:
    """검증된 토큰의 사용자 정보."""

    user_id: str
    email: str | None = None

    @classmethod
    def from_claims(cls, claims: dict[str, Any]) -> "AuthenticatedUser":
        """``id`` 클레임이 없으면 ``sub``를 사용합니다."""
        user_id = claims.get("id") or claims.get("sub") or ""
        return cls(user_id=str(user_id), email=claims.get("email"))
