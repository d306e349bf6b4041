"""Static Bearer token authentication.

/api/v1 아래 모든 요청은 ``Authorization: Bearer <NOTES_AUTH_TOKEN>`` 헤더가 필요합니다.
"""

from __future__ import annotations

import secrets

from fastapi import Depends, Header

from apps.notes.application.common.exceptions import AuthenticationError
from apps.notes.setup.config import Settings, get_settings


def check_bearer_token(authorization: str | None, expected: str) -> None:
    """Authorization 헤더를 검사합니다.

    Raises:
        AuthenticationError: 헤더 없음, 형식 오류, 토큰 불일치
    """
    if not authorization:
        raise AuthenticationError("missing authorization header")

    scheme, sep, token = authorization.partition(" ")
    if not sep or scheme.lower() != "bearer":
        raise AuthenticationError("invalid authorization header format")

    if not secrets.compare_digest(token.encode(), expected.encode()):
        raise AuthenticationError("invalid token")


async def require_api_token(
    authorization: str | None = Header(None),
    settings: Settings = Depends(get_settings),
) -> None:
    check_bearer_token(authorization, settings.auth_token)
