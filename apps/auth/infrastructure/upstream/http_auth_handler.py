"""HTTPX Auth Handler.

AuthHandler 포트의 httpx 구현체입니다.
/api/auth/* 요청을 외부 인증 서버로 그대로 전달합니다.
"""

from __future__ import annotations

import logging

import httpx

from apps.auth.application.gateway.dto import AuthRequest, AuthResponse
from apps.auth.application.gateway.exceptions import AuthUpstreamError

logger = logging.getLogger(__name__)

# RFC 7230 6.1 hop-by-hop 헤더
HOP_BY_HOP_HEADERS = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
    }
)

# httpx가 다시 계산하는 헤더
_REQUEST_EXCLUDED = HOP_BY_HOP_HEADERS | {"host", "content-length"}
_RESPONSE_EXCLUDED = HOP_BY_HOP_HEADERS | {"content-length", "content-encoding"}


def filter_headers(
    headers: tuple[tuple[str, str], ...] | list[tuple[str, str]],
    excluded: frozenset[str] | set[str],
) -> list[tuple[str, str]]:
    """제외 대상 헤더를 걸러낸 (name, value) 목록 반환.

    Connection 헤더에 나열된 토큰도 hop-by-hop으로 취급합니다.
    Set-Cookie처럼 중복 가능한 헤더는 순서대로 유지됩니다.
    """
    connection_tokens = {
        token.strip().lower()
        for name, value in headers
        if name.lower() == "connection"
        for token in value.split(",")
        if token.strip()
    }
    blocked = set(excluded) | connection_tokens
    return [(name, value) for name, value in headers if name.lower() not in blocked]


class HttpxAuthHandler:
    """외부 인증 서버로의 리버스 프록시."""

    def __init__(self, client: httpx.AsyncClient, upstream_url: str) -> None:
        self._client = client
        self._upstream_url = upstream_url.rstrip("/")

    def _build_url(self, request: AuthRequest) -> str:
        url = f"{self._upstream_url}{request.path}"
        if request.query:
            url = f"{url}?{request.query}"
        return url

    async def handle(self, request: AuthRequest) -> AuthResponse:
        headers = filter_headers(request.headers, _REQUEST_EXCLUDED)
        if request.client_host:
            headers.append(("x-forwarded-for", request.client_host))
        host = next((v for k, v in request.headers if k.lower() == "host"), None)
        if host:
            headers.append(("x-forwarded-host", host))

        url = self._build_url(request)
        try:
            upstream = await self._client.request(
                request.method,
                url,
                headers=headers,
                content=request.body or None,
            )
        except httpx.HTTPError as e:
            logger.error(
                "Auth upstream request failed",
                extra={"method": request.method, "path": request.path, "error": str(e)},
            )
            raise AuthUpstreamError(str(e) or type(e).__name__) from e

        logger.debug(
            "Auth upstream responded",
            extra={
                "method": request.method,
                "path": request.path,
                "status_code": upstream.status_code,
            },
        )
        return AuthResponse(
            status_code=upstream.status_code,
            headers=tuple(filter_headers(upstream.headers.multi_items(), _RESPONSE_EXCLUDED)),
            body=upstream.content,
        )
