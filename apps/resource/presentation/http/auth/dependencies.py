"""Auth Dependencies.

FastAPI Depends용 Bearer 인증 의존성입니다.
"""

from __future__ import annotations

from fastapi import Depends, Header

from apps.resource.application.auth import (
    AuthenticatedUser,
    AuthenticationError,
    TokenVerifier,
)
from apps.resource.setup.dependencies import get_token_verifier


def extract_bearer_token(authorization: str | None) -> str:
    """``Bearer <token>`` 헤더에서 토큰 추출.

    Raises:
        AuthenticationError: 헤더 누락 또는 형식 오류
    """
    if not authorization:
        raise AuthenticationError("missing authorization header")

    parts = authorization.split(" ")
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1]:
        raise AuthenticationError("invalid authorization header format")
    return parts[1]


async def get_current_user(
    authorization: str | None = Header(None),
    verifier: TokenVerifier = Depends(get_token_verifier),
) -> AuthenticatedUser:
    """현재 인증된 사용자.

    Raises:
        AuthenticationError: 401
        JwksUnavailableError: 500
    """
    token = extract_bearer_token(authorization)
    return await verifier.verify(token)
