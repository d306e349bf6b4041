"""Request logging middleware."""

from __future__ import annotations

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger("apps.pastes.access")


def get_client_ip(request: Request) -> str:
    """X-Forwarded-For, X-Real-IP, 연결 주소 순으로 클라이언트 IP를 결정합니다."""
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        return forwarded_for
    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip
    return request.client.host if request.client else ""


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """요청마다 method, path, status, duration 등을 기록합니다."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        start = time.perf_counter()
        response = await call_next(request)
        duration_ms = (time.perf_counter() - start) * 1000

        logger.info(
            "request",
            extra={
                "method": request.method,
                "path": request.url.path,
                "query": request.url.query,
                "status": response.status_code,
                "size": response.headers.get("content-length"),
                "duration_ms": round(duration_ms, 2),
                "ip": get_client_ip(request),
                "user_agent": request.headers.get("user-agent", ""),
            },
        )
        return response
